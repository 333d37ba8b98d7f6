import numbers
from functools import singledispatchmethod
import torch
from setspaces.spaces.card import Card, Dim
from setspaces.spaces.mapping import Surjection
from setspaces.spaces.space import FiniteSpace


class Binary(FiniteSpace, Surjection):
    r"""The binary (base-2) space :math:`\{ False, True \}`.

    Real numbers are mapped onto it by a sign test: strictly positive values map to True.

    Example::

        >>> Binary().map(0.3)
        True
        >>> list(Binary())
        [False, True]

    """

    FIELDS = ()

    def dim(self):
        return Dim.one()

    def card(self):
        return Card.Finite(2)

    def sample(self, rng=None):
        return bool(torch.randint(2, (), generator=rng))

    def inf(self):
        return False

    def sup(self):
        return True

    def contains(self, x):
        if isinstance(x, bool):
            return True
        if isinstance(x, torch.Tensor):
            return x.dtype == torch.bool and x.shape == ()
        return False

    def values(self):
        return iter([False, True])

    @singledispatchmethod
    def map(self, value):
        return self.unmapped(value)

    @map.register(bool)
    def _(self, value):
        return value

    @map.register(numbers.Real)
    def _(self, value):
        return value > 0.0

    @map.register(torch.Tensor)
    def _(self, value):
        if value.shape != ():
            return self.unmapped(value)
        if value.dtype == torch.bool:
            return bool(value)
        if value.dtype.is_floating_point:
            return bool(value > 0.0)
        return self.unmapped(value)

    def __str__(self):
        return "{0, 1}"

    def __repr__(self):
        return "Binary()"

    def __eq__(self, other):
        return isinstance(other, Binary)

    def __hash__(self):
        return hash(Binary)
