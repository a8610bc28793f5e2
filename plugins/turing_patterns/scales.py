"""
Scale Model

A scale is one spatial frequency band of the pattern: an activator radius,
an inhibitor radius, and the increment applied to pixels this scale wins.
Short-range activation with long-range inhibition (activator radius smaller
than inhibitor radius) is the usual setup, but the engine accepts either
order.
"""

from typing import NamedTuple


class Scale(NamedTuple):
    activator_radius: int
    inhibitor_radius: int
    increment: float

    @classmethod
    def create(cls, activator_radius, inhibitor_radius, increment):
        """Build a validated Scale."""
        for name, radius in (("activator_radius", activator_radius),
                             ("inhibitor_radius", inhibitor_radius)):
            if int(radius) != radius or radius < 0:
                raise ValueError(
                    f"{name} must be a non-negative integer, got {radius!r}")
        if not increment > 0:
            raise ValueError(f"increment must be positive, got {increment!r}")
        return cls(int(activator_radius), int(inhibitor_radius), float(increment))

    def scaled(self, factor):
        """Return a copy with both radii multiplied by factor.

        Non-zero radii never drop below 1 pixel.
        """
        def _scale(radius):
            if radius == 0:
                return 0
            return max(1, int(round(radius * factor)))
        return Scale(_scale(self.activator_radius),
                     _scale(self.inhibitor_radius),
                     self.increment)


class ScaleSet(tuple):
    """Immutable ordered sequence of Scales.

    Accepts Scale instances or plain (activator, inhibitor, increment)
    triples. Order matters: the first scale seeds the per-pixel selection
    and ties keep the earliest scale.
    """

    def __new__(cls, scales=()):
        return super().__new__(cls, (Scale.create(*s) for s in scales))

    def scaled(self, factor):
        """Return a ScaleSet with every radius multiplied by factor."""
        return ScaleSet(s.scaled(factor) for s in self)

    def __repr__(self):
        return f"ScaleSet({list(self)!r})"
