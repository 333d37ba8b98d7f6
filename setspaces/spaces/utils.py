import torch
from setspaces.spaces.space import FiniteSpace


def flatdim(space):
    """Return the number of dimensions a flattened equivalent of this space
    would have.

    Accepts a space and returns an integer. Raises ``NotImplementedError`` if
    the space cannot be enumerated.
    """
    if isinstance(space, FiniteSpace):
        return len(space)
    else:
        raise NotImplementedError


def flatten(space, x):
    """Flatten a data point from a space.

    This is useful when e.g. points from spaces must be passed to a neural
    network, which only understands flat arrays of floats.

    Accepts a finite space and a point from that space. Always returns a 1D one-hot
    array of length ``flatdim(space)``, hot at the position of x in the enumeration of the space.
    Raises ``NotImplementedError`` if the space cannot be enumerated.
    """
    if isinstance(space, FiniteSpace):
        onehot = torch.zeros(flatdim(space), dtype=torch.float32)
        onehot[space.index(x)] = 1.0
        return onehot
    else:
        raise NotImplementedError


def unflatten(space, x):
    """Unflatten a data point from a space.

    This reverses the transformation applied by ``flatten()``. You must ensure
    that the ``space`` argument is the same as for the ``flatten()`` call.

    Accepts a finite space and a flattened point. Returns the member of the space
    at the hot position. Raises ``NotImplementedError`` if the space cannot be enumerated.
    """
    if isinstance(space, FiniteSpace):
        idx = int(torch.nonzero(torch.as_tensor(x))[0][0])
        for i, value in enumerate(space.values()):
            if i == idx:
                return value
        raise ValueError("hot position {} is out of {!r}".format(idx, space))
    else:
        raise NotImplementedError
