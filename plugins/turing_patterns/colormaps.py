"""
Anchor-Color Colormaps for Pattern Visualization

A colormap is a lookup table between a field value and a color. It is
built from a short list of ARGB8888 anchor colors: a map of n anchors is
(n - 1) concatenated linear gradients, one per consecutive pair. Entries
left over by the integer division at the end are filled with the last
anchor color.
"""

import numpy as np


COLOR_DEPTH = 256  # Number of entries in a LUT


def _channels(color):
    """Split an ARGB8888 code into (a, r, g, b) ints."""
    return ((color >> 24) & 0xFF, (color >> 16) & 0xFF,
            (color >> 8) & 0xFF, color & 0xFF)


def build_argb_gradient(color_begin, color_end, gradient_depth):
    """Linear per-channel gradient between two ARGB codes.

    Entry i of each channel is begin + int(i * (end - begin) / depth), so the
    gradient starts exactly on color_begin and stops one step short of
    color_end (the next gradient starts there).

    Returns:
        (gradient_depth,) uint32 array of ARGB codes
    """
    begin = _channels(color_begin)
    end = _channels(color_end)
    gradient = np.zeros(gradient_depth, dtype=np.uint32)
    for i in range(gradient_depth):
        code = 0
        for b, e in zip(begin, end):
            step = (e - b) / gradient_depth
            code = (code << 8) | ((b + int(i * step)) & 0xFF)
        gradient[i] = code
    return gradient


def build_colormap(colors, depth=COLOR_DEPTH):
    """Build an ARGB8888 LUT from anchor colors.

    Args:
        colors: Sequence of at least two ARGB8888 anchor codes
        depth: Number of LUT entries

    Returns:
        (depth,) uint32 array
    """
    n_colors = len(colors)
    if n_colors < 2:
        raise ValueError(f"A colormap needs at least 2 anchor colors, got {n_colors}")
    if depth < n_colors - 1:
        raise ValueError(f"Depth {depth} too small for {n_colors} anchor colors")

    lut = np.zeros(depth, dtype=np.uint32)
    gradient_depth = depth // (n_colors - 1)
    for i in range(n_colors - 1):
        start = i * gradient_depth
        lut[start:start + gradient_depth] = build_argb_gradient(
            colors[i], colors[i + 1], gradient_depth)

    # Rounding remainder of gradient_depth
    lut[gradient_depth * (n_colors - 1):] = colors[-1]
    return lut


def argb_to_rgb(lut):
    """Convert a uint32 ARGB LUT to a (depth, 3) uint8 RGB LUT."""
    lut = np.asarray(lut, dtype=np.uint32)
    rgb = np.empty((lut.shape[0], 3), dtype=np.uint8)
    rgb[:, 0] = (lut >> 16) & 0xFF
    rgb[:, 1] = (lut >> 8) & 0xFF
    rgb[:, 2] = lut & 0xFF
    return rgb


# --- Anchor Definitions ---

COLORS_BW = [
    0xFF000000,  # Black
    0xFFFFFFFF,  # White
]

COLORS_RAINBOW = [
    0xFFFF0000,  # Red
    0xFFFF8000,  # Orange
    0xFFFFFF00,  # Yellow
    0xFF00FF00,  # Green
    0xFF0000FF,  # Blue
    0xFF4B0082,  # Indigo
    0xFF8000FF,  # Violet
]

COLORS_LAVA = [
    0xFF000000,  # Black
    0xFFFF0000,  # Red
    0xFFFF8000,  # Orange
    0xFFFFFF00,  # Yellow
    0xFFFFFFFF,  # White
]

COLORS_FIRE = [
    0xFF000000,
    0xFF3C0500,
    0xFFB41E00,
    0xFFF0640A,
    0xFFFFC832,
    0xFFFFFFC8,
]

COLORS_OCEAN = [
    0xFF00020F,
    0xFF051450,
    0xFF0A50A0,
    0xFF28B4DC,
    0xFFC8FAFF,
]

COLORS_MOSS = [
    0xFF050502,
    0xFF141E0A,
    0xFF285014,
    0xFF3CA028,
    0xFF64DC50,
    0xFFB4FF96,
]

# Registry of all colormaps
COLORMAPS = {
    "bw": COLORS_BW,
    "rainbow": COLORS_RAINBOW,
    "lava": COLORS_LAVA,
    "fire": COLORS_FIRE,
    "ocean": COLORS_OCEAN,
    "moss": COLORS_MOSS,
}

COLORMAP_ORDER = list(COLORMAPS.keys())


def get_colormap(name):
    """Get a colormap LUT (COLOR_DEPTH, 3) uint8 array by name."""
    if name not in COLORMAPS:
        raise ValueError(f"Unknown colormap: {name!r}. "
                         f"Available: {COLORMAP_ORDER}")
    return argb_to_rgb(build_colormap(COLORMAPS[name]))


def apply_colormap(field, lut):
    """
    Apply a colormap LUT to a 2D float field.

    Args:
        field: 2D numpy array with values in [0, 1]
        lut: (256, 3) uint8 RGB LUT or (256,) uint32 ARGB LUT

    Returns:
        (H, W, 3) uint8 RGB image, or (H, W) uint32 ARGB image
    """
    indices = (np.clip(field, 0, 1) * 255).astype(np.uint8)
    return lut[indices]
