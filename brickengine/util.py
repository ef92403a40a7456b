"""Small numeric helpers and a shared random number source."""

import random as _random

_ZERO_TOLERANCE = 1e-10


def is_equal_to_zero(value):
    """Return True when value is close enough to zero to be treated as zero."""
    return abs(value) < _ZERO_TOLERANCE


def sign(value):
    """Return 1, -1 or 0 according to the sign of value."""
    return int(0 < value) - int(value < 0)


class Random:
    """Uniform random integers, with a process-wide shared instance."""

    _instance = None

    def __init__(self, seed=None):
        self._generator = _random.Random(seed)

    def get_random_int(self, low, high):
        """Return a random integer in the closed range [low, high]."""
        return self._generator.randint(low, high)

    @classmethod
    def get_instance(cls):
        """Return the shared instance, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance