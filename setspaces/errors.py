class SpaceError(Exception):
    """
    Base of all errors raised by setspaces
    """
    pass


class UnsupportedOperationError(SpaceError, NotImplementedError):
    """
    The space has no defined procedure for the requested operation (e.g. uniform sampling over Naturals).
    Signals a programming or configuration error of the caller, it is not meant to be recovered from.
    """
    pass


class EmptySpaceError(SpaceError, ValueError):
    """
    The operation needs at least one member but the space is empty (e.g. sampling Discrete(0)).
    """
    pass


class DeserializationError(SpaceError, ValueError):
    """
    Malformed persisted data.

    Attributes:
        kind: one of 'missing_field', 'duplicate_field', 'unknown_field', 'invalid_length', 'invalid_value',
              'invalid_type', 'unknown_type'
        field: name of the offending field (None when not field related)
        expected: field names the record accepts
    """

    def __init__(self, kind, message, field=None, expected=()):
        self.kind = kind
        self.field = field
        self.expected = tuple(expected)
        super(DeserializationError, self).__init__(message)

    @classmethod
    def missing_field(cls, field, expected=()):
        return cls('missing_field', 'missing field `{}`'.format(field), field=field, expected=expected)

    @classmethod
    def duplicate_field(cls, field, expected=()):
        return cls('duplicate_field', 'duplicate field `{}`'.format(field), field=field, expected=expected)

    @classmethod
    def unknown_field(cls, field, expected=()):
        if expected:
            msg = 'unknown field `{}`, expected {}'.format(field, ', '.join('`{}`'.format(f) for f in expected))
        else:
            msg = 'unknown field `{}`, there are no fields'.format(field)
        return cls('unknown_field', msg, field=field, expected=expected)

    @classmethod
    def invalid_length(cls, length, expecting, expected=()):
        return cls('invalid_length', 'invalid length {}, expected {}'.format(length, expecting), expected=expected)
