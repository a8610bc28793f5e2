"""
Scalar Field Helpers

Normalization and random seeding of the 2D pattern field. The field is a
(height, width) float64 array indexed [y, x].
"""

import numpy as np


# Value every element takes when a perfectly flat field is normalized
DEGENERATE_VALUE = 0.5


def normalize(field):
    """Rescale the field in place so that min == 0 and max == 1.

    A flat field (max == min) has no relative positions to rescale, so
    every element is set to DEGENERATE_VALUE instead.

    Returns:
        The same array, for chaining.
    """
    lo = field.min()
    hi = field.max()
    value_range = hi - lo
    if value_range == 0:
        field.fill(DEGENERATE_VALUE)
        return field
    field -= lo
    field /= value_range
    return field


class Randomizer:
    """Owns the random generator used to seed a field.

    Args:
        seed: Integer seed for reproducible runs. None draws fresh
            entropy from the OS.
    """

    def __init__(self, seed=None):
        self.seed = seed
        self.rng = np.random.default_rng(seed)

    def fill(self, field):
        """Fill the field in place with independent uniform [0, 1) draws."""
        field[...] = self.rng.random(field.shape)
        return field
