from setspaces.errors import UnsupportedOperationError
from setspaces.spaces.card import Card, Dim
from setspaces.spaces.discrete import as_index
from setspaces.spaces.space import BoundedSpace


class Naturals(BoundedSpace):
    """
    The set of all natural numbers {0, 1, 2, ...}.

    Bounded below by 0 and unbounded above. There is no uniform distribution over a countably infinite set,
    so sampling is unsupported and raises.
    """

    FIELDS = ()

    def dim(self):
        return Dim.one()

    def card(self):
        return Card.Infinite

    def sample(self, rng=None):
        raise UnsupportedOperationError("Naturals has no uniform distribution to sample from")

    def inf(self):
        return 0

    def sup(self):
        return None

    def contains(self, x):
        as_int = as_index(x)
        return as_int is not None and as_int >= 0

    def __repr__(self):
        return "Naturals()"

    def __str__(self):
        return "N"

    def __eq__(self, other):
        return isinstance(other, Naturals)

    def __hash__(self):
        return hash(Naturals)
