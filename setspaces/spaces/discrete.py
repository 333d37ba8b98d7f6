import numbers
from functools import singledispatchmethod
import torch
from setspaces.errors import EmptySpaceError
from setspaces.spaces.card import Card, Dim
from setspaces.spaces.mapping import Surjection
from setspaces.spaces.space import FiniteSpace

# largest size torch.randint can draw from
MAX_SIZE = 2 ** 63 - 1


def as_index(x):
    """
    Return x as a python int if it is an integer (python integer or integer 0-d tensor, booleans excluded),
    None otherwise.
    """
    if isinstance(x, bool):
        return None
    if isinstance(x, numbers.Integral):
        return int(x)
    if isinstance(x, torch.Tensor) and x.shape == () and not x.dtype.is_floating_point \
            and not x.dtype.is_complex and x.dtype != torch.bool:
        return int(x)
    return None


class Discrete(FiniteSpace, Surjection):
    r"""A finite ordinal space :math:`\{ 0, 1, \dots, n-1 \}`.

    Only ``size`` is part of the identity of the space: two Discrete spaces are equal iff their sizes are.
    ``Discrete(0)`` is the empty space: it has no bounds, contains nothing and cannot be sampled.
    Sizes above ``MAX_SIZE`` (the int64 range) are rejected.

    Example::

        >>> Discrete(3)
        Discrete(3)
        >>> list(Discrete(3))
        [0, 1, 2]

    """

    FIELDS = ('size',)

    def __init__(self, size):
        if isinstance(size, bool) or not isinstance(size, numbers.Integral):
            raise ValueError("size must be an integer, got {!r}".format(size))
        if size < 0:
            raise ValueError("size must be non-negative, got {}".format(size))
        if size > MAX_SIZE:
            raise ValueError("size must fit in a 64-bit integer (at most {}), got {}".format(MAX_SIZE, size))
        self.size = int(size)

        # derived from size only, rebuilt on every construction
        self._range = range(self.size)

    def dim(self):
        return Dim.one()

    def card(self):
        return Card.Finite(self.size)

    def sample(self, rng=None):
        if self.size == 0:
            raise EmptySpaceError("cannot sample the empty space {!r}".format(self))
        return int(torch.randint(self.size, (), generator=rng))

    def inf(self):
        return self._range[0] if self.size > 0 else None

    def sup(self):
        return self._range[-1] if self.size > 0 else None

    def contains(self, x):
        as_int = as_index(x)
        if as_int is None:
            return False
        return as_int in self._range

    def values(self):
        return iter(self._range)

    def index(self, x):
        if not self.contains(x):
            raise ValueError("{!r} is not a member of {!r}".format(x, self))
        return as_index(x)

    @singledispatchmethod
    def map(self, value):
        return self.unmapped(value)

    @map.register(bool)
    def _(self, value):
        return self.unmapped(value)

    @map.register(numbers.Integral)
    def _(self, value):
        return int(value)

    @map.register(torch.Tensor)
    def _(self, value):
        as_int = as_index(value)
        if as_int is None:
            return self.unmapped(value)
        return as_int

    def __reduce__(self):
        return (Discrete, (self.size,))

    def __repr__(self):
        return "Discrete(%d)" % self.size

    def __eq__(self, other):
        return isinstance(other, Discrete) and self.size == other.size

    def __hash__(self):
        return hash((Discrete, self.size))
