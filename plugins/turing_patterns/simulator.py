"""
PatternSimulator — Headless simulation core used by the viewer and CLI

Couples a PatternEngine with a colormap and resolution-scaled preset radii,
with zero pygame dependency. One call to step() advances the field, one
call to render() turns the current field into an RGB frame; callers keep
the two in lock-step.

Usage:
    from turing_patterns.simulator import PatternSimulator
    sim = PatternSimulator('mottled', 640, 480)
    sim.step()
    frame = sim.render()  # (H, W, 3) uint8
"""

import os

from .colormaps import COLORMAP_ORDER, apply_colormap, get_colormap
from .engine import PatternEngine
from .presets import BASE_RES, DEFAULT_PRESET, PRESETS, get_preset
from .scales import ScaleSet


def get_screenshots_dir():
    """Directory for saved frames.

    In a source checkout this is <repo>/screenshots; an installed package
    writes to ./screenshots under the current working directory.
    """
    root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
    if not os.path.exists(os.path.join(root, "pyproject.toml")):
        root = os.getcwd()
    return os.path.join(root, "screenshots")


class PatternSimulator:

    def __init__(self, preset=DEFAULT_PRESET, width=640, height=480,
                 colormap=None, seed=None):
        """
        Args:
            preset: Preset key from presets.PRESETS
            width: Field width in pixels
            height: Field height in pixels
            colormap: Colormap name; defaults to the preset's palette
            seed: Optional integer seed for reproducible runs
        """
        p = get_preset(preset)
        if p is None:
            raise ValueError(f"Unknown preset: {preset!r}. "
                             f"Available: {list(PRESETS.keys())}")
        self.preset_key = preset
        self.preset = p
        self.width = width
        self.height = height
        self.res_scale = min(width, height) / BASE_RES

        scales = ScaleSet(p["scales"]).scaled(self.res_scale)
        self.engine = PatternEngine(width, height, scales, seed=seed)

        self.colormap_name = None
        self.lut = None
        self.set_colormap(colormap or p.get("colormap", "bw"))

    @property
    def scales(self):
        return self.engine.scales

    @property
    def generation(self):
        return self.engine.generation

    def set_colormap(self, name):
        """Switch the palette used by render()."""
        self.lut = get_colormap(name)
        self.colormap_name = name

    def cycle_colormap(self):
        """Advance to the next palette in COLORMAP_ORDER. Returns its name."""
        if self.colormap_name in COLORMAP_ORDER:
            idx = (COLORMAP_ORDER.index(self.colormap_name) + 1) % len(COLORMAP_ORDER)
        else:
            idx = 0
        self.set_colormap(COLORMAP_ORDER[idx])
        return self.colormap_name

    def randomize(self):
        self.engine.randomize()

    def step(self, n=1):
        """Advance n generations."""
        return self.engine.step_n(n)

    def render(self):
        """Map the current field through the palette.

        Returns:
            (height, width, 3) uint8 RGB frame
        """
        return apply_colormap(self.engine.current_field(), self.lut)
