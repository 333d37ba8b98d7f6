import random

import torch


def make_rng(seed=None):
    """
    Return a new torch.Generator, seeded with seed if given (non-deterministically otherwise).
    The generator is owned by the caller: it is not synchronized and should not be shared between threads.
    """
    rng = torch.Generator()
    if seed is None:
        rng.seed()
    else:
        rng.manual_seed(seed)
    return rng


def set_seed(seed):
    """
    Seed the global random state of python and torch (used when sampling without an explicit generator).
    """
    random.seed(seed)
    torch.manual_seed(seed)
