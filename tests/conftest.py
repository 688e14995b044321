"""
Shared pytest fixtures for the sandbox test-suite.

Fixtures build sandbox objects with a seeded RNG and a manually advanced
clock so tests never depend on wall-clock time.
"""

from __future__ import annotations

import pathlib
import random
import sys
from typing import Any, Dict

import pytest
import yaml

REPO_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from sandbox import EntityStore, SandboxSettings, SimulationClock  # noqa: E402
from atomsim.layout import SidebarLayout  # noqa: E402
from atomsim.selection import SelectionController  # noqa: E402


class ManualTime:
    """Callable time source advanced explicitly by tests."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class ModifierKey:
    def __init__(self) -> None:
        self.held = False

    def __call__(self) -> bool:
        return self.held


@pytest.fixture(scope="session")
def project_root() -> pathlib.Path:
    """Return repository root directory."""
    return REPO_ROOT


@pytest.fixture(scope="session")
def config_template(project_root: pathlib.Path) -> Dict[str, Any]:
    """Parsed representation of the default sandbox config template."""
    with (project_root / "atomsim" / "config" / "template.yaml").open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle)


@pytest.fixture
def settings() -> SandboxSettings:
    return SandboxSettings()


@pytest.fixture
def store(settings: SandboxSettings) -> EntityStore:
    return EntityStore(settings, rng=random.Random(1234))


@pytest.fixture
def manual_time() -> ManualTime:
    return ManualTime()


@pytest.fixture
def fake_clock(manual_time: ManualTime) -> SimulationClock:
    return SimulationClock(time_source=manual_time)


@pytest.fixture
def layout(settings: SandboxSettings) -> SidebarLayout:
    return SidebarLayout(settings.sidebar_width, settings.schedule_delay_s)


@pytest.fixture
def modifier() -> ModifierKey:
    return ModifierKey()


@pytest.fixture
def controller(store, layout, fake_clock, modifier) -> SelectionController:
    return SelectionController(store, layout, fake_clock, modifier_held=modifier)
