"""Headless tests for pygame event routing and drawing."""

from __future__ import annotations

import pygame
import pytest

from atomsim.commands import Command
from atomsim.config_loader import DEFAULT_CONFIG_PATH
from atomsim.ui.app import load_bundle, parse_args
from atomsim.ui.controllers import SimulationController, UIController, default_key_bindings
from atomsim.ui.panels import SidebarPanel
from atomsim.ui.viewport import CanvasViewport
from sandbox import SelectionMode


@pytest.fixture
def ui(controller, fake_clock, settings) -> UIController:
    controller.key_bindings = default_key_bindings()
    return UIController(
        simulation_controller=SimulationController(controller.store, fake_clock, settings.frame_dt_s),
        selection=controller,
        viewport=CanvasViewport(),
        sidebar=SidebarPanel(layout=controller.layout, height=int(settings.canvas_height)),
    )


def test_mouse_events_drive_drag(ui: UIController) -> None:
    atom = ui.selection.store.add_atom(0, (500.0, 400.0))
    ui.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(500, 400), button=1))
    ui.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(600, 450), rel=(100, 50), buttons=(1, 0, 0)))
    ui.handle_event(pygame.event.Event(pygame.MOUSEBUTTONUP, pos=(600, 450), button=1))
    ui.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(700, 450), rel=(100, 0), buttons=(0, 0, 0)))
    assert atom.selected
    assert atom.position == pytest.approx((600.0, 450.0))


def test_key_shortcuts_dispatch_commands(ui: UIController) -> None:
    ui.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RIGHT, mod=0))
    ui.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a, mod=0))
    store = ui.selection.store
    assert [atom.symbol for atom in store.atoms] == ["He"]
    store.set_selection({1}, SelectionMode.REPLACE)
    ui.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_DELETE, mod=0))
    assert store.atoms == []


def test_update_runs_tick(ui: UIController, manual_time) -> None:
    store = ui.selection.store
    atom = store.add_atom(0, (500.0, 400.0))
    store.set_selection({atom.id}, SelectionMode.REPLACE)
    ui.selection.dispatch(Command.SCHEDULE)
    manual_time.advance(store.settings.schedule_delay_s)
    snapshot = ui.update()
    assert snapshot.atom_states[0].active
    assert not snapshot.atom_states[0].scheduled


def test_render_without_font(ui: UIController) -> None:
    store = ui.selection.store
    store.add_atom(7, (500.0, 400.0))
    store.add_atom(8, (700.0, 400.0))
    store.set_selection({1, 2}, SelectionMode.REPLACE)
    store.link_selected_pair()
    surface = pygame.Surface((1200, 800))
    ui.render(surface, ui.update())
    assert tuple(surface.get_at((500, 400)))[:3] != (0, 0, 0)


def test_cli_defaults_load_template() -> None:
    args = parse_args([])
    assert args.config is None
    bundle = load_bundle(args.config)
    assert bundle.metadata["name"] == "Quantum Atom Sandbox"
    assert bundle.settings == load_bundle(DEFAULT_CONFIG_PATH).settings


def test_unbound_key_is_ignored(ui: UIController) -> None:
    ui.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_z, mod=0))
    assert ui.selection.store.atoms == []
    assert ui.selection.element_index == 0
