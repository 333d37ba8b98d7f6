from setspaces.utils.sampling import sample_value, sample_n
from setspaces.utils.seeding import make_rng, set_seed

__all__ = ["sample_value", "sample_n", "make_rng", "set_seed"]
