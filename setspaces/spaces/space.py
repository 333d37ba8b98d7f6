import torch
from setspaces.errors import EmptySpaceError, UnsupportedOperationError
from setspaces.spaces.card import Card


class Space(object):
    """
    Describes a set of values of one semantic domain: its dimensionality, its cardinality
    and (when defined) how to draw values from it.

    Sampling takes the random generator as an argument (a ``torch.Generator``, None for torch's default one).
    The generator belongs to the caller and is not synchronized: do not share it between threads without locking.
    """

    def dim(self):
        """
        Number of scalar components of one value of the space (a ``Dim``).
        """
        raise NotImplementedError

    def card(self):
        """
        Cardinality of the space (a ``Card``).
        """
        raise NotImplementedError

    def sample(self, rng=None):
        """
        Randomly sample an element of this space, uniformly over its values.
        Spaces without a well-defined sampling procedure raise ``UnsupportedOperationError``.
        """
        raise UnsupportedOperationError("{} does not support sampling".format(self))

    def __or__(self, other):
        from setspaces.spaces.combinators import union
        if not isinstance(other, Space):
            return NotImplemented
        return union(self, other)

    def __and__(self, other):
        from setspaces.spaces.combinators import intersection
        if not isinstance(other, Space):
            return NotImplemented
        return intersection(self, other)


class BoundedSpace(Space):
    """
    A space with an infimum, a supremum and an exact membership test.
    A bound is None when the space is unbounded on that side (or empty).
    """

    def inf(self):
        raise NotImplementedError

    def sup(self):
        raise NotImplementedError

    def contains(self, x):
        """
        Return boolean specifying if x is a valid
        member of this space
        """
        raise NotImplementedError

    def is_bounded(self, manner="both"):
        below = self.inf() is not None
        above = self.sup() is not None
        if manner == "both":
            return below and above
        elif manner == "below":
            return below
        elif manner == "above":
            return above
        else:
            raise ValueError("manner is not in {'below', 'above', 'both'}")

    def clamp(self, x):
        """
        Return a valid clamped value of x inside space's bounds
        """
        if self.card() == Card.Finite(0):
            raise EmptySpaceError("cannot clamp onto the empty space {}".format(self))
        low, high = self.inf(), self.sup()
        if low is not None and x < low:
            x = low
        if high is not None and x > high:
            x = high
        return x

    def __contains__(self, x):
        return self.contains(x)


class FiniteSpace(BoundedSpace):
    """
    A bounded space whose values can be fully enumerated.

    ``values()`` returns a fresh iterator at each call, yielding every member exactly once in a stable order.
    When the space is ordered ascending the first and last values are ``inf()`` and ``sup()``.
    """

    def values(self):
        raise NotImplementedError

    def __iter__(self):
        return self.values()

    def __len__(self):
        return len(self.card())

    def index(self, x):
        """
        Position of x in the enumeration of the space.
        """
        if self.contains(x):
            if isinstance(x, torch.Tensor) and x.dim() == 0:
                x = x.item()
            # False == 0 and True == 1, so the type has to match too
            for idx, value in enumerate(self.values()):
                if type(value) is type(x) and value == x:
                    return idx
        raise ValueError("{!r} is not a member of {}".format(x, self))

    def sample(self, rng=None):
        n = len(self)
        if n == 0:
            raise EmptySpaceError("cannot sample the empty space {}".format(self))
        idx = int(torch.randint(n, (), generator=rng))
        for i, value in enumerate(self.values()):
            if i == idx:
                return value
