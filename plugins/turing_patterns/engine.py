"""
Multi-scale Turing Pattern Engine

Evolves a scalar field with several activator/inhibitor pairs at once:

  For every scale s (in order):
    activator = box_blur(field, s.activator_radius)
    inhibitor = box_blur(field, s.inhibitor_radius)
    variation = activator - inhibitor

  Per pixel, the scale with the smallest |variation| (the one closest to
  equilibrium there) decides the direction: the pixel moves by
  +s.increment if its variation is positive, -s.increment otherwise.
  The field is then renormalized to [0, 1].

The two blurs of a scale read the same field and write to separate
buffers, so they run on two threads joined before the selection pass.
Scales are processed sequentially since they share the selection arrays.

References:
  Turing, "The Chemical Basis of Morphogenesis" (1952)
  McCabe, "Cyclic Symmetric Multi-Scale Turing Patterns" (2010)
"""

import threading
import numpy as np

from .blur import BoxBlur
from .engine_base import PatternEngineBase
from .field import Randomizer, normalize
from .scales import ScaleSet


class _BlurTask(threading.Thread):
    """One blur of the shared field into a private destination buffer."""

    def __init__(self, blurrer, radius, source, out):
        super().__init__(daemon=True)
        self.blurrer = blurrer
        self.radius = radius
        self.source = source
        self.out = out
        self.error = None

    def run(self):
        try:
            self.blurrer.blur(self.radius, self.source, out=self.out)
        except Exception as e:
            self.error = e


class PatternEngine(PatternEngineBase):

    engine_name = "turing"
    engine_label = "Multi-scale Turing"

    def __init__(self, width, height, scales=(), seed=None):
        """
        Args:
            width: Field width in pixels (> 0)
            height: Field height in pixels (> 0)
            scales: ScaleSet or iterable of (activator_radius,
                inhibitor_radius, increment) triples
            seed: Optional integer seed for the randomizer

        Raises:
            ValueError: non-positive dimensions or an invalid scale
            MemoryError: the field or work buffers could not be allocated
        """
        # Validate everything before allocating
        scales = ScaleSet(scales)
        super().__init__(width, height)
        self.scales = scales
        self.randomizer = Randomizer(seed)

        shape = (self.height, self.width)
        # Pre-allocate per-step work buffers (values never carry over)
        self._activators = np.empty(shape, dtype=np.float64)
        self._inhibitors = np.empty(shape, dtype=np.float64)
        self._variations = np.empty(shape, dtype=np.float64)
        self._increments = np.empty(shape, dtype=np.float64)
        self._candidate = np.empty(shape, dtype=np.float64)
        self._closer = np.empty(shape, dtype=bool)
        # One blurrer per concurrent task, so buffers are never shared
        self._activator_blur = BoxBlur(self.width, self.height)
        self._inhibitor_blur = BoxBlur(self.width, self.height)

        self.randomize()

    def randomize(self):
        """Refill the field with uniform noise in [0, 1)."""
        self.randomizer.fill(self.world)
        self.generation = 0
        return self.world

    def _blur_pair(self, scale):
        """Run activator and inhibitor blurs of the current field concurrently."""
        tasks = [
            _BlurTask(self._activator_blur, scale.activator_radius,
                      self.world, self._activators),
            _BlurTask(self._inhibitor_blur, scale.inhibitor_radius,
                      self.world, self._inhibitors),
        ]
        for task in tasks:
            task.start()
        for task in tasks:
            task.join()
        for task in tasks:
            if task.error is not None:
                raise task.error
        return self._activators, self._inhibitors

    def compute_increments(self):
        """Select the dominant scale per pixel without touching the field.

        Returns:
            (best_variation, increments): two (height, width) arrays. They
            are the engine's work buffers and are overwritten by the next
            call to compute_increments() or step().
        """
        best = self._variations
        increments = self._increments
        variation = self._candidate
        closer = self._closer

        if not self.scales:
            best.fill(0.0)
            increments.fill(0.0)
            return best, increments

        for i, scale in enumerate(self.scales):
            activators, inhibitors = self._blur_pair(scale)
            np.subtract(activators, inhibitors, out=variation)

            if i == 0:
                best[...] = variation
                increments[...] = np.where(variation > 0,
                                           scale.increment, -scale.increment)
                continue

            # Later equal magnitudes fail the strict test: earliest scale wins ties
            np.less(np.abs(variation), np.abs(best), out=closer)
            best[closer] = variation[closer]
            increments[closer] = np.where(variation[closer] > 0,
                                          scale.increment, -scale.increment)

        return best, increments

    def step(self):
        """Advance one generation. Returns the normalized field."""
        if not self.scales:
            return self.world

        _, increments = self.compute_increments()
        self.world += increments
        normalize(self.world)

        self.generation += 1
        return self.world

    @property
    def stats(self):
        stats = super().stats
        stats["scales"] = len(self.scales)
        return stats
