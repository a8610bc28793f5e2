"""
Multi-scale Turing Patterns - Entry Point

Usage:
    python -m turing_patterns [preset] [--size WxH] [--window WxH]
                              [--colormap NAME] [--seed N] [--snap STEPS]

Examples:
    python -m turing_patterns
    python -m turing_patterns coral
    python -m turing_patterns fine --colormap lava
    python -m turing_patterns mottled --size 320x240 --window 960x720
    python -m turing_patterns all --snap 200

Use --list to see all available presets and colormaps.
"""

import os
import sys

from .colormaps import COLORMAP_ORDER
from .presets import DEFAULT_PRESET, PRESET_ORDER, list_presets


def _parse_dims(text):
    parts = text.lower().split("x")
    if len(parts) != 2:
        raise ValueError(f"expected WxH, got {text!r}")
    w, h = int(parts[0]), int(parts[1])
    if w <= 0 or h <= 0:
        raise ValueError(f"dimensions must be positive, got {text!r}")
    return w, h


def snap(preset, sim_w, sim_h, steps, colormap=None, seed=None):
    """Headless mode: run N steps, save a PNG per preset, exit."""
    from PIL import Image
    from .simulator import PatternSimulator, get_screenshots_dir

    screenshots_dir = get_screenshots_dir()
    os.makedirs(screenshots_dir, exist_ok=True)

    presets_to_snap = [preset] if preset != "all" else PRESET_ORDER

    for pkey in presets_to_snap:
        sim = PatternSimulator(pkey, sim_w, sim_h, colormap=colormap, seed=seed)

        print(f"  {pkey}: running {steps} steps...", end="", flush=True)
        sim.step(steps)

        img = Image.fromarray(sim.render())
        path = os.path.join(screenshots_dir, f"turing_{pkey}.png")
        img.save(path)
        img.save(os.path.join(screenshots_dir, "latest.png"))
        print(f" saved: {path}")


def main(argv=None):
    preset = DEFAULT_PRESET
    sim_size = None
    win_w, win_h = 640, 480
    colormap = None
    seed = None
    snap_steps = 0

    args = sys.argv[1:] if argv is None else argv
    i = 0
    while i < len(args):
        arg = args[i]
        has_value = i + 1 < len(args)
        try:
            if arg == "--size" and has_value:
                sim_size = _parse_dims(args[i + 1])
                i += 2
            elif arg == "--window" and has_value:
                win_w, win_h = _parse_dims(args[i + 1])
                i += 2
            elif arg == "--seed" and has_value:
                seed = int(args[i + 1])
                i += 2
            elif arg == "--snap" and has_value:
                snap_steps = int(args[i + 1])
                i += 2
            elif arg == "--colormap" and has_value:
                colormap = args[i + 1]
                if colormap not in COLORMAP_ORDER:
                    print(f"Unknown colormap: {colormap}")
                    print(f"Available: {', '.join(COLORMAP_ORDER)}")
                    return
                i += 2
            elif arg == "--list":
                print("\nAvailable presets:")
                for key, name, desc in list_presets():
                    print(f"    {key:16s} {name:20s} {desc}")
                print(f"\nColormaps: {', '.join(COLORMAP_ORDER)}")
                print()
                return
            elif arg in ("--help", "-h"):
                print(__doc__)
                return
            elif arg in PRESET_ORDER or arg == "all":
                preset = arg
                i += 1
            else:
                print(f"Unknown argument: {arg}")
                print(f"Use --list to see available presets")
                return
        except ValueError as e:
            print(f"Invalid value for {arg}: {e}")
            print(f"Use --help for usage")
            return

    if snap_steps > 0:
        sim_w, sim_h = sim_size or (win_w, win_h)
        print(f"Headless snap mode: {preset} @ {sim_w}x{sim_h}, {snap_steps} steps")
        snap(preset, sim_w, sim_h, snap_steps, colormap=colormap, seed=seed)
        return

    if preset == "all":
        preset = DEFAULT_PRESET

    from .viewer import Viewer

    print(f"Starting Multi-scale Turing Patterns")
    print(f"  Preset: {preset}")
    if sim_size:
        print(f"  Sim size: {sim_size[0]}x{sim_size[1]}")
    print(f"  Window: {win_w}x{win_h}")
    print()

    viewer = Viewer(
        width=win_w,
        height=win_h,
        sim_size=sim_size,
        start_preset=preset,
        colormap=colormap,
        seed=seed,
    )
    viewer.run()


if __name__ == "__main__":
    main()
