"""
Controller scaffolding connecting the pygame UI and the sandbox state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, TYPE_CHECKING

try:
    import pygame
except ImportError:  # pragma: no cover
    pygame = None  # type: ignore

from sandbox import DEFAULT_FRAME_DT_S, tick
from ..commands import Command
from .viewport import CanvasViewport
from .panels import SidebarPanel

if TYPE_CHECKING:  # pragma: no cover
    from sandbox import EntityStore, SandboxSnapshot, SimulationClock
    from ..selection import SelectionController


def default_key_bindings() -> Dict[int, Command]:
    if pygame is None:
        raise RuntimeError("pygame must be installed to build key bindings.")
    return {
        pygame.K_a: Command.ADD_ATOM,
        pygame.K_t: Command.TOGGLE_ACTIVE,
        pygame.K_s: Command.SCHEDULE,
        pygame.K_l: Command.LINK_PAIR,
        pygame.K_DELETE: Command.REMOVE_SELECTED,
        pygame.K_BACKSPACE: Command.REMOVE_SELECTED,
        pygame.K_c: Command.CLEAR_ALL,
        pygame.K_LEFT: Command.PREVIOUS_ELEMENT,
        pygame.K_RIGHT: Command.NEXT_ELEMENT,
    }


@dataclass
class SimulationController:
    store: "EntityStore"
    clock: "SimulationClock"
    frame_dt_s: float = DEFAULT_FRAME_DT_S

    def update(self) -> List[int]:
        # Angles advance by the fixed frame delta; schedules use wall-clock elapsed time.
        return tick(self.store, self.clock.elapsed(), self.frame_dt_s)


class UIController:
    """
    Routes pygame events to the selection controller and draws the frame.
    """

    def __init__(
        self,
        simulation_controller: SimulationController,
        selection: "SelectionController",
        viewport: CanvasViewport,
        sidebar: SidebarPanel,
    ):
        if pygame is None:
            raise RuntimeError("pygame must be installed to use UIController.")
        self.simulation_controller = simulation_controller
        self.selection = selection
        self.viewport = viewport
        self.sidebar = sidebar

    def handle_event(self, event: "pygame.event.Event") -> None:
        if event.type == pygame.MOUSEMOTION:
            self.selection.pointer_moved(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            self.selection.pointer_pressed(event.pos, event.button)
        elif event.type == pygame.MOUSEBUTTONUP:
            self.selection.pointer_released(event.pos, event.button)
        elif event.type == pygame.KEYDOWN:
            self.selection.key_pressed(event.key)

    def update(self) -> "SandboxSnapshot":
        self.simulation_controller.update()
        return self.selection.snapshot()

    def render(self, screen: "pygame.Surface", snapshot: "SandboxSnapshot") -> None:
        self.sidebar.render(screen, snapshot)
        self.viewport.render(screen, snapshot)
