"""
Separable Moving-Sum Box Blur

Approximates diffusion at a given radius: every output pixel is the mean of
the source pixels inside a (2r+1) x (2r+1) square, clipped at the image
borders. Near an edge the window simply holds fewer samples, and the divisor
(the span) shrinks with it instead of treating out-of-image pixels as zero.

The blur runs as two 1-D passes, horizontal then vertical. Each pass keeps a
running sum along the row (column) so every output costs one subtraction
and one division regardless of radius: O(width * height) per pass.
"""

import numpy as np


def _window_bounds(n, radius):
    """Running-sum indices and spans for a 1-D moving window.

    For position i the window covers samples [lo[i], hi[i]) where
    lo = max(i - r, 0) and hi = min(i + r, n - 1) + 1. A radius wider than
    the row collapses to the whole row.
    """
    r = min(radius, n - 1)
    idx = np.arange(n)
    lo = np.maximum(idx - r, 0)
    hi = np.minimum(idx + r, n - 1) + 1
    span = (hi - lo).astype(np.float64)
    return lo, hi, span


class BoxBlur:
    """Box blur bound to one field shape, with its own work buffers.

    Each instance may be used by one thread at a time. The pattern engine
    keeps one BoxBlur per concurrent blur task so that the tasks never
    share memory.

    Args:
        width: Field width in pixels
        height: Field height in pixels
    """

    def __init__(self, width, height):
        self.width = width
        self.height = height
        # Horizontal pass output, read by the vertical pass
        self._partial = np.empty((height, width), dtype=np.float64)
        # Running sums with a leading zero column / row
        self._row_sums = np.zeros((height, width + 1), dtype=np.float64)
        self._col_sums = np.zeros((height + 1, width), dtype=np.float64)
        # (axis, radius) -> (lo, hi, span)
        self._bounds = {}

    def _get_bounds(self, axis, radius):
        key = (axis, radius)
        bounds = self._bounds.get(key)
        if bounds is None:
            n = self.width if axis == 1 else self.height
            bounds = _window_bounds(n, radius)
            self._bounds[key] = bounds
        return bounds

    def blur_horizontal(self, radius, source, out):
        """Moving-sum mean along each row."""
        lo, hi, span = self._get_bounds(1, radius)
        sums = self._row_sums
        np.cumsum(source, axis=1, out=sums[:, 1:])
        np.subtract(sums[:, hi], sums[:, lo], out=out)
        out /= span
        return out

    def blur_vertical(self, radius, source, out):
        """Moving-sum mean along each column."""
        lo, hi, span = self._get_bounds(0, radius)
        sums = self._col_sums
        np.cumsum(source, axis=0, out=sums[1:, :])
        np.subtract(sums[hi, :], sums[lo, :], out=out)
        out /= span[:, None]
        return out

    def blur(self, radius, source, out=None):
        """Blur source with a square window of half-width radius.

        Args:
            radius: Non-negative window half-width in pixels
            source: (height, width) float array, left untouched
            out: Optional destination array of the same shape

        Returns:
            The blurred field (out, if given).
        """
        if radius < 0:
            raise ValueError(f"Blur radius must be non-negative, got {radius}")
        if source.shape != (self.height, self.width):
            raise ValueError(
                f"Expected field of shape {(self.height, self.width)}, "
                f"got {source.shape}")
        if out is None:
            out = np.empty((self.height, self.width), dtype=np.float64)
        if radius == 0:
            np.copyto(out, source)
            return out
        self.blur_horizontal(radius, source, self._partial)
        self.blur_vertical(radius, self._partial, out)
        return out


def box_blur(source, radius):
    """One-shot box blur of a 2D array (allocates its own buffers)."""
    source = np.asarray(source, dtype=np.float64)
    height, width = source.shape
    return BoxBlur(width, height).blur(radius, source)
