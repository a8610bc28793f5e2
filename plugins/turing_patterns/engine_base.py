"""
Abstract Base Class for Pattern Engines

Every engine owns a rectangular float field in [0, 1] and advances it one
generation at a time, so the simulator and viewer can drive any engine
the same way.
"""

from abc import ABC, abstractmethod
import numpy as np


class PatternEngineBase(ABC):
    """Base class for field-evolving pattern engines."""

    engine_name = ""   # e.g. "turing"
    engine_label = ""  # e.g. "Multi-scale Turing"

    def __init__(self, width, height):
        if int(width) != width or int(height) != height:
            raise ValueError(
                f"Field dimensions must be integers, got {width}x{height}")
        width, height = int(width), int(height)
        if width <= 0 or height <= 0:
            raise ValueError(
                f"Field dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.world = np.zeros((self.height, self.width), dtype=np.float64)
        self.generation = 0

    @abstractmethod
    def step(self):
        """Advance one generation. Returns the world (display) state."""

    def step_n(self, n):
        """Advance n generations. Returns final state."""
        for _ in range(n):
            self.step()
        return self.world

    @abstractmethod
    def randomize(self):
        """Reseed the world."""

    def current_field(self):
        """Read-only view of the world for display."""
        view = self.world.view()
        view.flags.writeable = False
        return view

    @property
    def stats(self):
        """Return current world statistics."""
        return {
            "generation": self.generation,
            "mean": float(self.world.mean()),
            "min": float(self.world.min()),
            "max": float(self.world.max()),
        }
