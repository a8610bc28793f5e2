#!/usr/bin/env python3
"""
Tests for presets, the headless simulator and the CLI.

Verifies:
1. Every preset builds a valid, resolution-scaled scale set
2. PatternSimulator produces RGB frames in lock-step with the engine
3. CLI listing, argument errors and the viewer entry path
4. Screenshot directory in a checkout and in an installed package
"""

import contextlib
import io
import os
import sys
import tempfile
import types

import numpy as np
import pytest

from turing_patterns import simulator
from turing_patterns.__main__ import main
from turing_patterns.colormaps import COLORMAP_ORDER
from turing_patterns.presets import (
    BASE_RES, DEFAULT_PRESET, PRESET_ORDER, PRESETS, get_preset, list_presets,
)
from turing_patterns.scales import ScaleSet
from turing_patterns.simulator import PatternSimulator, get_screenshots_dir


def test_presets_are_valid():
    print("Testing presets...")
    assert DEFAULT_PRESET in PRESETS
    assert get_preset("no_such_preset") is None
    for key in PRESET_ORDER:
        preset = get_preset(key)
        scales = ScaleSet(preset["scales"])
        assert len(scales) > 0, key
        assert preset["colormap"] in COLORMAP_ORDER, key
    assert [k for k, _, _ in list_presets()] == PRESET_ORDER
    assert PRESET_ORDER == ["mottled", "inverted", "coral", "fine",
                            "labyrinth", "rainbow"]
    print("  ✓ All presets valid")


def test_simulator_frames():
    print("Testing PatternSimulator...")
    sim = PatternSimulator("fine", 48, 36, seed=1)
    assert sim.res_scale == 36 / BASE_RES
    assert all(s.inhibitor_radius >= 1 for s in sim.scales)

    frame = sim.render()
    assert frame.shape == (36, 48, 3) and frame.dtype == np.uint8

    sim.step(3)
    assert sim.generation == 3
    field = sim.engine.current_field()
    assert field.min() == 0.0 and abs(field.max() - 1.0) < 1e-12
    print("  ✓ Frames render after each step")


def test_simulator_is_reproducible():
    a = PatternSimulator("labyrinth", 40, 30, seed=12)
    b = PatternSimulator("labyrinth", 40, 30, seed=12)
    a.step(2)
    b.step(2)
    assert np.array_equal(a.render(), b.render())


def test_simulator_resolution_scaling():
    sim = PatternSimulator("mottled", BASE_RES * 2, BASE_RES, seed=0)
    assert list(sim.scales) == list(ScaleSet(PRESETS["mottled"]["scales"]))


def test_colormap_switching():
    sim = PatternSimulator(DEFAULT_PRESET, 20, 20, colormap="lava", seed=3)
    assert sim.colormap_name == "lava"
    name = sim.cycle_colormap()
    assert name == COLORMAP_ORDER[(COLORMAP_ORDER.index("lava") + 1) % len(COLORMAP_ORDER)]
    with pytest.raises(ValueError):
        sim.set_colormap("no_such_map")


def test_unknown_preset():
    with pytest.raises(ValueError):
        PatternSimulator("no_such_preset", 10, 10)


def _run_cli(args):
    """Run main() and return what it printed."""
    buf = io.StringIO()
    with contextlib.redirect_stdout(buf):
        main(args)
    return buf.getvalue()


def test_cli_list():
    print("Testing CLI...")
    out = _run_cli(["--list"])
    for key in PRESET_ORDER:
        assert key in out
    assert "Colormaps:" in out


def test_cli_unknown_argument():
    assert "Unknown argument: --bogus" in _run_cli(["--bogus"])
    assert "Unknown colormap" in _run_cli(["--colormap", "no_such_map"])


def test_cli_malformed_values():
    """Bad values print a message instead of a traceback."""
    for args in (["--size", "640"], ["--size", "0x10"], ["--window", "axb"],
                 ["--seed", "x"], ["--snap", "x"]):
        out = _run_cli(args)
        assert f"Invalid value for {args[0]}" in out, f"{args}: {out!r}"
    print("  ✓ Malformed CLI values reported")


class _FakeViewer:
    instances = []

    def __init__(self, **kwargs):
        self.kwargs = kwargs
        self.ran = False
        _FakeViewer.instances.append(self)

    def run(self):
        self.ran = True


def test_cli_default_path_reaches_viewer():
    """Without --snap, main() opens the viewer with the parsed options."""
    fake_module = types.ModuleType("turing_patterns.viewer")
    fake_module.Viewer = _FakeViewer
    saved = sys.modules.get("turing_patterns.viewer")
    sys.modules["turing_patterns.viewer"] = fake_module
    _FakeViewer.instances.clear()
    try:
        _run_cli(["coral", "--window", "320x240", "--seed", "5"])
    finally:
        if saved is None:
            del sys.modules["turing_patterns.viewer"]
        else:
            sys.modules["turing_patterns.viewer"] = saved

    assert len(_FakeViewer.instances) == 1
    viewer = _FakeViewer.instances[0]
    assert viewer.ran
    assert viewer.kwargs["start_preset"] == "coral"
    assert (viewer.kwargs["width"], viewer.kwargs["height"]) == (320, 240)
    assert viewer.kwargs["seed"] == 5


def test_viewer_module_is_packaged():
    """The build config must not strip viewer.py out of the package."""
    package_dir = os.path.dirname(os.path.abspath(simulator.__file__))
    assert os.path.exists(os.path.join(package_dir, "viewer.py"))
    repo_root = os.path.dirname(os.path.dirname(package_dir))
    assert not os.path.exists(os.path.join(repo_root, "setup.py")), \
        "No custom build step excluding modules"


def test_screenshots_dir():
    print("Testing screenshots directory...")
    package_dir = os.path.dirname(os.path.abspath(simulator.__file__))
    repo_root = os.path.dirname(os.path.dirname(package_dir))
    assert get_screenshots_dir() == os.path.join(repo_root, "screenshots")

    # Installed layout: no pyproject.toml above the package
    original_file = simulator.__file__
    original_cwd = os.getcwd()
    with tempfile.TemporaryDirectory() as tmp:
        tmp = os.path.realpath(tmp)
        simulator.__file__ = os.path.join(
            tmp, "lib", "site-packages", "turing_patterns", "simulator.py")
        os.chdir(tmp)
        try:
            assert get_screenshots_dir() == os.path.join(tmp, "screenshots")
        finally:
            simulator.__file__ = original_file
            os.chdir(original_cwd)
    print("  ✓ Screenshots go to the checkout or the working directory")


if __name__ == "__main__":
    print("\n=== Testing Simulator ===\n")

    test_presets_are_valid()
    test_simulator_frames()
    test_simulator_is_reproducible()
    test_simulator_resolution_scaling()
    test_colormap_switching()
    test_unknown_preset()
    test_cli_list()
    test_cli_unknown_argument()
    test_cli_malformed_values()
    test_cli_default_path_reaches_viewer()
    test_viewer_module_is_packaged()
    test_screenshots_dir()

    print("\n✓ All tests passed!\n")
