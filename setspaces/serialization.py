import json
from collections import OrderedDict
from collections.abc import Mapping
import torch
from addict import Dict
from setspaces.errors import DeserializationError
from setspaces.spaces import Binary, Discrete, Naturals
from setspaces.spaces import Space, UnionSpace, IntersectionSpace, union, intersection


class FieldPairs(list):
    """
    Ordered (name, value) pairs of a record as they appear in a document.
    Unlike a dict, repeated names are kept so that duplicated fields can be reported.
    """
    pass


def _record_fields(name, expected, record):
    """
    Check a record against the expected field names and return its fields as a dict.

    A record is either positional (a list or tuple with one value per expected field) or named
    (a mapping or ``FieldPairs``). Every expected field must be present exactly once and no other field is accepted.
    """
    if isinstance(record, FieldPairs):
        pairs = list(record)
    elif isinstance(record, Mapping):
        pairs = list(record.items())
    elif isinstance(record, (list, tuple)):
        if len(record) != len(expected):
            raise DeserializationError.invalid_length(
                len(record), 'struct {} with {} element(s)'.format(name, len(expected)), expected=expected)
        return dict(zip(expected, record))
    elif record is None and len(expected) == 0:
        return {}
    else:
        raise DeserializationError('invalid_type', 'invalid type {}, expected struct {}'.format(
            type(record).__name__, name), expected=expected)

    fields = {}
    for field, value in pairs:
        if field not in expected:
            raise DeserializationError.unknown_field(field, expected=expected)
        if field in fields:
            raise DeserializationError.duplicate_field(field, expected=expected)
        fields[field] = value
    for field in expected:
        if field not in fields:
            raise DeserializationError.missing_field(field, expected=expected)
    return fields


def to_record(space):
    """
    Project a space onto its constructor parameters, e.g. ``{'size': 3}`` for ``Discrete(3)``.
    Derived state is never part of the record.
    """
    return {field: getattr(space, field) for field in space.FIELDS}


def from_record(cls, record):
    """
    Rebuild a space of class cls from a record, through its constructor.
    Raises ``DeserializationError`` on missing, duplicated, unknown or invalid fields.
    """
    fields = _record_fields(cls.__name__, cls.FIELDS, record)
    try:
        return cls(**fields)
    except (TypeError, ValueError) as err:
        raise DeserializationError('invalid_value', 'invalid value for struct {}: {}'.format(cls.__name__, err),
                                   expected=cls.FIELDS) from err


class SpaceCodec:
    """
    Encodes spaces as tagged config documents and back.

    A document is the record of the space plus a type tag, for instance::

        >>> SpaceCodec().encode(Discrete(3))
        {'type': 'Discrete', 'size': 3}
        >>> SpaceCodec().encode(union(Binary(), Naturals()))
        {'type': 'Union', 'left': {'type': 'Binary'}, 'right': {'type': 'Naturals'}}

    so that a space configuration can be part of a larger configuration document.
    """

    @staticmethod
    def default_config():
        default_config = Dict()
        default_config.type_key = 'type'
        default_config.json_indent = None
        default_config.sort_keys = False
        return default_config

    def __init__(self, config={}, **kwargs):
        self.config = self.__class__.default_config()
        self.config.update(config)
        self.config.update(kwargs)

        self.space_types = OrderedDict()
        for cls in (Binary, Discrete, Naturals):
            self.register(cls)

    def register(self, cls, name=None):
        """
        Register a space class: it must define ``FIELDS``, the names of its constructor parameters.
        """
        if not isinstance(cls, type) or not issubclass(cls, Space):
            raise TypeError("registered classes must be subclasses of setspaces.Space, got {!r}".format(cls))
        if not hasattr(cls, 'FIELDS'):
            raise TypeError("registered class {} must define its record FIELDS".format(cls.__name__))
        name = cls.__name__ if name is None else name
        if name in ('Union', 'Intersection'):
            raise ValueError('{!r} is reserved for the space combinators'.format(name))
        self.space_types[name] = cls

    def encode(self, space):
        type_key = self.config.type_key
        if isinstance(space, UnionSpace):
            return Dict([(type_key, 'Union'), ('left', self.encode(space.left)), ('right', self.encode(space.right))])
        if isinstance(space, IntersectionSpace):
            return Dict([(type_key, 'Intersection'), ('left', self.encode(space.left)),
                         ('right', self.encode(space.right))])
        for name, cls in self.space_types.items():
            if type(space) is cls:
                document = Dict([(type_key, name)])
                document.update(to_record(space))
                return document
        raise TypeError('no space type registered for {!r}'.format(space))

    def decode(self, document):
        type_key = self.config.type_key
        if isinstance(document, Mapping):
            pairs = list(document.items())
        elif isinstance(document, FieldPairs):
            pairs = list(document)
        else:
            raise DeserializationError('invalid_type', 'invalid type {}, expected a space document'.format(
                type(document).__name__), expected=(type_key,))

        tags = [value for field, value in pairs if field == type_key]
        if len(tags) == 0:
            raise DeserializationError.missing_field(type_key, expected=(type_key,))
        if len(tags) > 1:
            raise DeserializationError.duplicate_field(type_key, expected=(type_key,))
        name = tags[0]
        if not isinstance(name, str):
            raise DeserializationError('invalid_value', 'space type must be a string, got {!r}'.format(name),
                                       field=type_key)
        record = FieldPairs((field, value) for field, value in pairs if field != type_key)

        if name in ('Union', 'Intersection'):
            fields = _record_fields(name, ('left', 'right'), record)
            combinator = union if name == 'Union' else intersection
            return combinator(self.decode(fields['left']), self.decode(fields['right']))
        if name not in self.space_types:
            raise DeserializationError('unknown_type', 'unknown space type {!r}, expected one of {}'.format(
                name, ', '.join(list(self.space_types) + ['Union', 'Intersection'])), field=type_key)
        return from_record(self.space_types[name], record)

    def dumps(self, space):
        return json.dumps(self.encode(space), indent=self.config.json_indent, sort_keys=self.config.sort_keys)

    def loads(self, text):
        return self.decode(json.loads(text, object_pairs_hook=FieldPairs))

    def save(self, space, filepath):
        """
        Saves the space object using torch.save function in pickle format.
        Spaces pickle through their constructor, so derived state is rebuilt on load.
        """
        torch.save(space, filepath)

    def load(self, filepath):
        return torch.load(filepath, weights_only=False)


_default_codec = SpaceCodec()


def encode(space):
    return _default_codec.encode(space)


def decode(document):
    return _default_codec.decode(document)


def dumps(space):
    return _default_codec.dumps(space)


def loads(text):
    return _default_codec.loads(text)


def loads_record(cls, text):
    """
    Rebuild a space of class cls from the JSON text of its record (no type tag).
    """
    return from_record(cls, json.loads(text, object_pairs_hook=FieldPairs))
