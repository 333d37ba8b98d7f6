import warnings
import torch
from setspaces.errors import EmptySpaceError, UnsupportedOperationError
from setspaces.spaces.card import Card
from setspaces.spaces.space import Space, BoundedSpace, FiniteSpace


def _combined_dim(left, right):
    left_dim, right_dim = left.dim(), right.dim()
    if left_dim != right_dim:
        warnings.warn('combining {!r} and {!r} of different dimensionality ({!r} and {!r}): using the largest'.format(
            left, right, left_dim, right_dim))
        return max(left_dim, right_dim)
    return left_dim


def _is_empty(space):
    return space.card() == Card.Finite(0)


class UnionSpace(Space):
    """
    Disjoint union of two spaces.

    The values of both operands are stacked rather than merged, so the cardinality is the sum of the operands'.
    Use ``union(left, right)`` (or ``left | right``) to get the most capable union descriptor for the operands.
    """

    def __init__(self, left, right):
        for space in (left, right):
            if not isinstance(space, Space):
                raise TypeError("operands of a union must be instances of setspaces.Space, got {!r}".format(space))
        self.left = left
        self.right = right
        self._dim = _combined_dim(left, right)

    def dim(self):
        return self._dim

    def card(self):
        return self.left.card().union(self.right.card())

    def sample(self, rng=None):
        raise UnsupportedOperationError("{!r} has no uniform distribution to sample from".format(self))

    def __getitem__(self, index):
        return (self.left, self.right)[index]

    def __repr__(self):
        return "Union({!r}, {!r})".format(self.left, self.right)

    def __eq__(self, other):
        return isinstance(other, UnionSpace) and (self.left, self.right) == (other.left, other.right)

    def __hash__(self):
        return hash((UnionSpace, self.left, self.right))


class BoundedUnionSpace(UnionSpace, BoundedSpace):

    def inf(self):
        infs = [space.inf() for space in (self.left, self.right) if not _is_empty(space)]
        if not infs or any(low is None for low in infs):
            return None
        return min(infs)

    def sup(self):
        sups = [space.sup() for space in (self.left, self.right) if not _is_empty(space)]
        if not sups or any(high is None for high in sups):
            return None
        return max(sups)

    def contains(self, x):
        return self.left.contains(x) or self.right.contains(x)


class FiniteUnionSpace(BoundedUnionSpace, FiniteSpace):
    """
    Disjoint union of two finite spaces: enumerates the left operand, then the right one.
    """

    def values(self):
        yield from self.left.values()
        yield from self.right.values()

    def sample(self, rng=None):
        n_left, n_right = len(self.left.card()), len(self.right.card())
        if n_left + n_right == 0:
            raise EmptySpaceError("cannot sample the empty space {!r}".format(self))
        # pick an operand with a probability proportional to its cardinality
        if int(torch.randint(n_left + n_right, (), generator=rng)) < n_left:
            return self.left.sample(rng)
        return self.right.sample(rng)


class IntersectionSpace(Space):
    """
    Intersection of two spaces.

    Only the cardinality is tracked (the smallest finite one of the operands), the intersected set of values
    is never computed. See ``BoundedIntersectionSpace`` for intersections with a finite left operand.
    """

    def __init__(self, left, right):
        for space in (left, right):
            if not isinstance(space, Space):
                raise TypeError(
                    "operands of an intersection must be instances of setspaces.Space, got {!r}".format(space))
        self.left = left
        self.right = right
        self._dim = _combined_dim(left, right)

    def dim(self):
        return self._dim

    def card(self):
        return self.left.card().intersection(self.right.card())

    def sample(self, rng=None):
        raise UnsupportedOperationError("{!r} has no uniform distribution to sample from".format(self))

    def __getitem__(self, index):
        return (self.left, self.right)[index]

    def __repr__(self):
        return "Intersection({!r}, {!r})".format(self.left, self.right)

    def __eq__(self, other):
        return isinstance(other, IntersectionSpace) and (self.left, self.right) == (other.left, other.right)

    def __hash__(self):
        return hash((IntersectionSpace, self.left, self.right))


class BoundedIntersectionSpace(IntersectionSpace, BoundedSpace):
    """
    Intersection of two bounded spaces.

    When the left operand is finite its values are filtered through the right operand's ``contains``, and the
    cardinality, bounds and sampling all come from those members. A space with no member is empty: its card is
    ``Card.Finite(0)`` and sampling raises ``EmptySpaceError``. Otherwise only the cardinality bookkeeping is
    available and a bound is reported only when both operands contain it.
    """

    def _members(self):
        if not isinstance(self.left, FiniteSpace):
            return None
        return [value for value in self.left.values() if self.right.contains(value)]

    def card(self):
        members = self._members()
        if members is None:
            return super(BoundedIntersectionSpace, self).card()
        return Card.Finite(len(members))

    def inf(self):
        members = self._members()
        if members is not None:
            return members[0] if members else None
        if _is_empty(self.left) or _is_empty(self.right):
            return None
        infs = [low for low in (self.left.inf(), self.right.inf()) if low is not None]
        return self._bound(max(infs) if infs else None)

    def sup(self):
        members = self._members()
        if members is not None:
            return members[-1] if members else None
        if _is_empty(self.left) or _is_empty(self.right):
            return None
        sups = [high for high in (self.left.sup(), self.right.sup()) if high is not None]
        return self._bound(min(sups) if sups else None)

    def _bound(self, value):
        # a bound of one operand may lie outside the other one
        if value is None or not self.contains(value):
            return None
        return value

    def contains(self, x):
        return self.left.contains(x) and self.right.contains(x)

    def sample(self, rng=None):
        members = self._members()
        if members is None:
            return super(BoundedIntersectionSpace, self).sample(rng)
        if len(members) == 0:
            raise EmptySpaceError("cannot sample the empty space {!r}".format(self))
        return members[int(torch.randint(len(members), (), generator=rng))]


def union(left, right):
    """
    Return the disjoint union of two spaces.

    The descriptor is as capable as its operands allow: bounded if both are bounded,
    enumerable (and samplable) if both are finite.

    Example::

        >>> union(Discrete(3), Discrete(4)).card()
        Card.Finite(7)
        >>> union(Discrete(3), Naturals()).card()
        Card.Infinite
    """
    if isinstance(left, FiniteSpace) and isinstance(right, FiniteSpace):
        return FiniteUnionSpace(left, right)
    if isinstance(left, BoundedSpace) and isinstance(right, BoundedSpace):
        return BoundedUnionSpace(left, right)
    return UnionSpace(left, right)


def intersection(left, right):
    """
    Return the intersection of two spaces.
    Bounded if both operands are bounded, and enumerated exactly when the left operand is also finite.
    """
    if isinstance(left, BoundedSpace) and isinstance(right, BoundedSpace):
        return BoundedIntersectionSpace(left, right)
    return IntersectionSpace(left, right)
