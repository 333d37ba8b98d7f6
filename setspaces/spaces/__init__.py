from setspaces.spaces.card import Card, Dim
from setspaces.spaces.mapping import Surjection
from setspaces.spaces.space import Space, BoundedSpace, FiniteSpace
from setspaces.spaces.binary import Binary
from setspaces.spaces.discrete import Discrete
from setspaces.spaces.naturals import Naturals
from setspaces.spaces.combinators import union, intersection
from setspaces.spaces.combinators import UnionSpace, BoundedUnionSpace, FiniteUnionSpace
from setspaces.spaces.combinators import IntersectionSpace, BoundedIntersectionSpace
from setspaces.spaces.utils import flatdim
from setspaces.spaces.utils import flatten
from setspaces.spaces.utils import unflatten

__all__ = ["Card", "Dim", "Surjection", "Space", "BoundedSpace", "FiniteSpace", "Binary", "Discrete", "Naturals",
           "union", "intersection", "UnionSpace", "BoundedUnionSpace", "FiniteUnionSpace", "IntersectionSpace",
           "BoundedIntersectionSpace", "flatdim", "flatten", "unflatten"]
