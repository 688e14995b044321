"""Tests for the YAML sandbox config loader."""

from __future__ import annotations

import pytest

from atomsim.config_loader import DEFAULT_CONFIG_PATH, load_config_from_yaml
from sandbox import SandboxSettings


def test_loads_template(project_root):
    bundle = load_config_from_yaml(project_root / "atomsim" / "config" / "template.yaml")
    assert bundle.settings == SandboxSettings()
    assert bundle.display.target_fps == 60
    assert bundle.seed is None
    assert bundle.metadata["name"] == "Quantum Atom Sandbox"


def test_missing_sections_use_defaults(tmp_path):
    path = tmp_path / "minimal.yaml"
    path.write_text("interaction:\n  schedule_delay_s: 0.5\nrandom:\n  seed: 3\n", encoding="utf-8")
    bundle = load_config_from_yaml(path)
    assert bundle.settings.schedule_delay_s == 0.5
    assert bundle.settings.sidebar_width == SandboxSettings().sidebar_width
    assert bundle.seed == 3


def test_root_must_be_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError, match="mapping at the root"):
        load_config_from_yaml(path)


def test_section_must_be_mapping(tmp_path):
    path = tmp_path / "bad_section.yaml"
    path.write_text("canvas: 12\n", encoding="utf-8")
    with pytest.raises(ValueError, match="canvas"):
        load_config_from_yaml(path)


@pytest.mark.parametrize(
    "content",
    [
        "interaction:\n  schedule_delay_s: 0\n",
        "interaction:\n  atom_radius: -1\n",
        "window:\n  target_fps: 0\n",
        "window:\n  width: 300\n",
    ],
)
def test_invalid_values_rejected(tmp_path, content):
    path = tmp_path / "invalid.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ValueError):
        load_config_from_yaml(path)


def test_default_template_ships_inside_package():
    assert DEFAULT_CONFIG_PATH.parent.parent.name == "atomsim"
    assert DEFAULT_CONFIG_PATH.exists()
