#!/usr/bin/env python3
"""
Tests for the separable moving-sum box blur.

Verifies:
1. Constant fields stay constant at every radius (shrinking span at edges)
2. An interior impulse spreads into a flat (2r+1)^2 plateau
3. Results match a brute-force clipped-window mean
4. Radius 0 is an exact copy, oversized radii give the global mean
"""

import numpy as np
import pytest

from turing_patterns.blur import BoxBlur, box_blur


def _brute_force_blur(source, radius):
    h, w = source.shape
    out = np.empty_like(source)
    for y in range(h):
        for x in range(w):
            window = source[max(y - radius, 0):y + radius + 1,
                            max(x - radius, 0):x + radius + 1]
            out[y, x] = window.mean()
    return out


def test_constant_field():
    """Mean of a constant is the constant, including at the borders."""
    print("Testing constant field blur...")
    source = np.full((5, 7), 0.37)
    for radius in range(0, 8):
        blurred = box_blur(source, radius)
        assert blurred.shape == source.shape
        assert np.allclose(blurred, 0.37), f"radius {radius}: {blurred}"
    print("  ✓ Constant field preserved")


def test_impulse_plateau():
    """Two 1-D passes compose into the 2-D box average."""
    print("Testing impulse response...")
    source = np.zeros((21, 21))
    source[10, 10] = 1.0
    for radius in (1, 2, 3):
        blurred = box_blur(source, radius)
        lo, hi = 10 - radius, 10 + radius + 1
        plateau = blurred[lo:hi, lo:hi]
        expected = 1.0 / (2 * radius + 1) ** 2
        assert np.allclose(plateau, expected), f"radius {radius}: {plateau}"

        outside = blurred.copy()
        outside[lo:hi, lo:hi] = 0.0
        assert np.allclose(outside, 0.0), "Mass must stay inside the window"
        assert abs(blurred.sum() - 1.0) < 1e-12
    print("  ✓ Impulse spreads to a flat plateau")


def test_matches_brute_force():
    """Boundary-clipped means match an explicit window average."""
    print("Testing against brute force...")
    rng = np.random.default_rng(3)
    source = rng.random((9, 13))
    blurrer = BoxBlur(13, 9)
    for radius in (1, 2, 4, 6, 12):
        assert np.allclose(blurrer.blur(radius, source),
                           _brute_force_blur(source, radius)), f"radius {radius}"
    print("  ✓ Matches brute force")


def test_radius_zero_is_exact_copy():
    rng = np.random.default_rng(5)
    source = rng.random((6, 4))
    blurred = box_blur(source, 0)
    assert np.array_equal(blurred, source)
    assert blurred is not source


def test_oversized_radius_gives_global_mean():
    """A window wider than the image covers it entirely."""
    rng = np.random.default_rng(11)
    source = rng.random((4, 6))
    blurred = box_blur(source, 50)
    assert np.allclose(blurred, source.mean())


def test_source_untouched_and_out_buffer():
    rng = np.random.default_rng(8)
    source = rng.random((8, 8))
    before = source.copy()
    out = np.empty_like(source)
    result = BoxBlur(8, 8).blur(2, source, out=out)
    assert result is out
    assert np.array_equal(source, before), "Blur must not modify its source"


def test_invalid_arguments():
    blurrer = BoxBlur(4, 4)
    with pytest.raises(ValueError):
        blurrer.blur(-1, np.zeros((4, 4)))
    with pytest.raises(ValueError):
        blurrer.blur(1, np.zeros((3, 4)))


if __name__ == "__main__":
    print("\n=== Testing Box Blur ===\n")

    test_constant_field()
    test_impulse_plateau()
    test_matches_brute_force()
    test_radius_zero_is_exact_copy()
    test_oversized_radius_gives_global_mean()
    test_source_untouched_and_out_buffer()
    test_invalid_arguments()

    print("\n✓ All tests passed!\n")
