"""
Utilities for loading sandbox settings from YAML configuration files.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from sandbox import SandboxSettings


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "config" / "template.yaml"


@dataclass
class DisplaySettings:
    title: str = "Quantum Atom Sandbox"
    target_fps: int = 60
    enable_vsync: bool = False
    font_path: Optional[str] = "DejaVuSans.ttf"
    font_size: int = 16


@dataclass
class SandboxBundle:
    """Container returned by configuration loader."""

    settings: SandboxSettings = field(default_factory=SandboxSettings)
    display: DisplaySettings = field(default_factory=DisplaySettings)
    seed: Optional[int] = None
    metadata: Dict[str, Any] = field(default_factory=dict)


def load_config_from_yaml(path: Path) -> SandboxBundle:
    """Load sandbox and display settings plus metadata from a YAML config."""
    data = _load_yaml(path)
    window = _section(data, "window", path)
    canvas = _section(data, "canvas", path)
    interaction = _section(data, "interaction", path)
    rendering = _section(data, "rendering", path)
    randomness = _section(data, "random", path)

    target_fps = int(window.get("target_fps", 60))
    settings = _build_settings(window, canvas, interaction, target_fps)
    display = DisplaySettings(
        title=str(window.get("title", DisplaySettings.title)),
        target_fps=target_fps,
        enable_vsync=bool(window.get("enable_vsync", False)),
        font_path=rendering.get("font_path", DisplaySettings.font_path),
        font_size=int(rendering.get("font_size", DisplaySettings.font_size)),
    )
    seed = randomness.get("seed")
    bundle = SandboxBundle(
        settings=settings,
        display=display,
        seed=int(seed) if seed is not None else None,
        metadata=data.get("metadata") or {},
    )
    logger.info("Loaded sandbox config from %s", path)
    return bundle


def _load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        content = yaml.safe_load(handle)
    if not isinstance(content, dict):
        raise ValueError(f"YAML file {path} must contain a mapping at the root.")
    return content


def _section(data: Dict[str, Any], name: str, path: Path) -> Dict[str, Any]:
    section = data.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ValueError(f"Section '{name}' in {path} must be a mapping.")
    return section


def _build_settings(
    window: Dict[str, Any],
    canvas: Dict[str, Any],
    interaction: Dict[str, Any],
    target_fps: int,
) -> SandboxSettings:
    defaults = SandboxSettings()
    if target_fps <= 0:
        raise ValueError("window.target_fps must be positive.")
    return SandboxSettings(
        canvas_width=float(window.get("width", defaults.canvas_width)),
        canvas_height=float(window.get("height", defaults.canvas_height)),
        sidebar_width=float(canvas.get("sidebar_width", defaults.sidebar_width)),
        margin=float(canvas.get("margin", defaults.margin)),
        hit_margin=float(interaction.get("hit_margin", defaults.hit_margin)),
        atom_radius=float(interaction.get("atom_radius", defaults.atom_radius)),
        schedule_delay_s=float(interaction.get("schedule_delay_s", defaults.schedule_delay_s)),
        frame_dt_s=1.0 / target_fps,
    )
