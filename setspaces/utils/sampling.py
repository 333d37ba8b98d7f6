import numbers
from collections.abc import Mapping

from setspaces.serialization import FieldPairs, decode
from setspaces.spaces import Discrete, Space


def sample_value(config, rng=None):
    """Samples a value depending on the provided description.

    The description is one of:
        - a space: sampled directly
        - a number (or boolean): returned as is
        - a space document such as ``{'type': 'Discrete', 'size': 3}``: decoded then sampled
        - a list: one of its items, chosen uniformly
        - a tuple ``('discrete', low, high)``: an integer in [low, high], bounds included
    """

    if isinstance(config, Space):
        return config.sample(rng)

    elif isinstance(config, numbers.Number):  # works also for booleans
        return config

    elif isinstance(config, (Mapping, FieldPairs)):
        return decode(config).sample(rng)

    elif isinstance(config, list):
        return config[Discrete(len(config)).sample(rng)]

    elif isinstance(config, tuple):

        if len(config) == 3 and config[0] == 'discrete':
            low, high = config[1], config[2]
            if high < low:
                raise ValueError('Empty discrete range [{}, {}] for sampling!'.format(low, high))
            return low + Discrete(high - low + 1).sample(rng)

        else:
            raise ValueError('Unknown parameter type {!r} for sampling!'.format(config[0] if config else config))

    raise ValueError('Cannot sample from {!r}!'.format(config))


def sample_n(space, n, rng=None):
    """
    Draw n values from space with the same generator.
    """
    return [space.sample(rng) for _ in range(n)]
