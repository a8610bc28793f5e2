"""
Turing Pattern Scale Presets

Each preset defines a scale set known to produce interesting textures,
plus the palette it looks best with. Scales are
(activator_radius, inhibitor_radius, increment) triples, listed coarse to
fine. Radii are tuned for a BASE_RES pixel short side; the simulator
rescales them for other resolutions.
"""

BASE_RES = 480  # Presets are tuned for this short-side resolution

PRESETS = {
    "mottled": {
        "name": "Mottled",
        "description": "Three-scale animal-coat mottling",
        "scales": [(50, 100, 0.05), (25, 50, 0.04), (12, 25, 0.03)],
        "colormap": "bw",
    },
    "inverted": {
        "name": "Inverted",
        "description": "Wide activators over narrow inhibitors - soft blotches",
        "scales": [(100, 50, 0.05), (50, 25, 0.04), (25, 12, 0.03)],
        "colormap": "lava",
    },
    "coral": {
        "name": "Coral",
        "description": "Five nested scales, cellular coarse-to-fine structure",
        "scales": [(100, 200, 0.05), (50, 100, 0.04), (20, 40, 0.03),
                   (10, 20, 0.02), (5, 10, 0.01)],
        "colormap": "ocean",
    },
    "fine": {
        "name": "Fine Grain",
        "description": "Small radii only - dense leopard-like spots",
        "scales": [(8, 16, 0.04), (4, 8, 0.03), (2, 4, 0.02)],
        "colormap": "fire",
    },
    "labyrinth": {
        "name": "Labyrinth",
        "description": "Two close scales - winding maze-like stripes",
        "scales": [(12, 24, 0.05), (6, 12, 0.05)],
        "colormap": "moss",
    },
    "rainbow": {
        "name": "Spectrum",
        "description": "Mottled scales through the rainbow palette",
        "scales": [(40, 80, 0.05), (20, 40, 0.04), (10, 20, 0.03),
                   (5, 10, 0.02)],
        "colormap": "rainbow",
    },
}

PRESET_ORDER = ["mottled", "inverted", "coral", "fine", "labyrinth", "rainbow"]

DEFAULT_PRESET = "mottled"


def get_preset(name):
    """Get a preset by name. Returns None if not found."""
    return PRESETS.get(name)


def list_presets():
    """Return list of (key, name, description) for presets."""
    return [(k, PRESETS[k]["name"], PRESETS[k]["description"])
            for k in PRESET_ORDER if k in PRESETS]
