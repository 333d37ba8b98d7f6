from setspaces.errors import SpaceError, UnsupportedOperationError, EmptySpaceError, DeserializationError
from setspaces.spaces import Card, Dim, Surjection
from setspaces.spaces import Space, BoundedSpace, FiniteSpace
from setspaces.spaces import Binary, Discrete, Naturals
from setspaces.spaces import union, intersection
from setspaces.serialization import SpaceCodec

__all__ = ["Card", "Dim", "Surjection", "Space", "BoundedSpace", "FiniteSpace", "Binary", "Discrete", "Naturals",
           "union", "intersection", "SpaceCodec",
           "SpaceError", "UnsupportedOperationError", "EmptySpaceError", "DeserializationError"]
