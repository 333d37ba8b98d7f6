import numbers


class Card(object):
    """
    Cardinality of a space: either ``Card.Finite(n)`` with n >= 0 or ``Card.Infinite``.

    Cards are immutable values, compared structurally.
    ``Finite(0)`` is the cardinality of an empty space.

    Example::

        >>> Card.Finite(3) | Card.Finite(4)
        Card.Finite(7)
        >>> Card.Finite(3) | Card.Infinite
        Card.Infinite

    """

    __slots__ = ('_count',)

    def __init__(self, count=None):
        if count is not None:
            if isinstance(count, bool) or not isinstance(count, numbers.Integral):
                raise ValueError('a finite cardinality must be an integer, got {!r}'.format(count))
            if count < 0:
                raise ValueError('a finite cardinality must be non-negative, got {}'.format(count))
            count = int(count)
        object.__setattr__(self, '_count', count)

    def __setattr__(self, name, value):
        raise AttributeError('Card is immutable')

    @staticmethod
    def Finite(count):
        return Card(count)

    @property
    def count(self):
        """Number of elements, None if infinite."""
        return self._count

    @property
    def is_finite(self):
        return self._count is not None

    @property
    def is_infinite(self):
        return self._count is None

    def union(self, other):
        """
        Cardinality of the disjoint sum of two spaces.
        Values are not deduplicated: separate domains are stacked, not merged.
        """
        if self.is_infinite or other.is_infinite:
            return Card.Infinite
        return Card(self._count + other._count)

    def intersection(self, other):
        """
        Cardinality bookkeeping for the intersection of two spaces.
        No value-level intersection is computed: the smaller finite count is an upper bound.
        """
        if self.is_infinite:
            return other
        if other.is_infinite:
            return self
        return Card(min(self._count, other._count))

    def __or__(self, other):
        if not isinstance(other, Card):
            return NotImplemented
        return self.union(other)

    def __and__(self, other):
        if not isinstance(other, Card):
            return NotImplemented
        return self.intersection(other)

    def __eq__(self, other):
        return isinstance(other, Card) and self._count == other._count

    def __lt__(self, other):
        if not isinstance(other, Card):
            return NotImplemented
        if self.is_infinite:
            return False
        return other.is_infinite or self._count < other._count

    def __le__(self, other):
        if not isinstance(other, Card):
            return NotImplemented
        return self == other or self < other

    def __gt__(self, other):
        if not isinstance(other, Card):
            return NotImplemented
        return other < self

    def __ge__(self, other):
        if not isinstance(other, Card):
            return NotImplemented
        return other <= self

    def __hash__(self):
        return hash(('Card', self._count))

    def __len__(self):
        if self.is_infinite:
            raise TypeError('an infinite cardinality has no len()')
        return self._count

    def __reduce__(self):
        return (Card, (self._count,))

    def __repr__(self):
        if self.is_infinite:
            return "Card.Infinite"
        return "Card.Finite({})".format(self._count)


Card.Infinite = Card()


class Dim(object):
    """
    Number of independent scalar components occupied by one value of a space.
    Scalar spaces have ``Dim.one()``.
    """

    __slots__ = ('_n',)

    def __init__(self, n):
        if isinstance(n, bool) or not isinstance(n, numbers.Integral) or n < 0:
            raise ValueError('dimensionality must be a non-negative integer, got {!r}'.format(n))
        object.__setattr__(self, '_n', int(n))

    def __setattr__(self, name, value):
        raise AttributeError('Dim is immutable')

    @staticmethod
    def one():
        return Dim(1)

    @staticmethod
    def many(n):
        return Dim(n)

    @property
    def is_scalar(self):
        return self._n == 1

    def __int__(self):
        return self._n

    def __index__(self):
        return self._n

    def __eq__(self, other):
        return isinstance(other, Dim) and self._n == other._n

    def __lt__(self, other):
        if not isinstance(other, Dim):
            return NotImplemented
        return self._n < other._n

    def __le__(self, other):
        if not isinstance(other, Dim):
            return NotImplemented
        return self._n <= other._n

    def __gt__(self, other):
        if not isinstance(other, Dim):
            return NotImplemented
        return self._n > other._n

    def __ge__(self, other):
        if not isinstance(other, Dim):
            return NotImplemented
        return self._n >= other._n

    def __hash__(self):
        return hash(('Dim', self._n))

    def __reduce__(self):
        return (Dim, (self._n,))

    def __repr__(self):
        if self.is_scalar:
            return "Dim.one()"
        return "Dim.many({})".format(self._n)
