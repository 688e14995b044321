"""
Pointer input interpretation for the sandbox.

`SelectionController` turns pointer presses, moves and releases (already
translated out of pygame) into selection changes, drag sessions and command
dispatch against an `EntityStore`.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import Callable, Dict, Optional, Tuple, TYPE_CHECKING

from sandbox import SelectionMode

from .commands import Command
from .elements import get_element, next_index, previous_index
from .layout import SidebarLayout

if TYPE_CHECKING:  # pragma: no cover
    from sandbox import Atom, EntityStore, SandboxSnapshot, SimulationClock
    from .elements import Element


logger = logging.getLogger(__name__)

PRIMARY_BUTTON = 1

Point = Tuple[float, float]


@dataclass(frozen=True)
class DragSession:
    atom_id: int
    offset: Point


class SelectionController:
    def __init__(
        self,
        store: "EntityStore",
        layout: SidebarLayout,
        clock: "SimulationClock",
        modifier_held: Callable[[], bool] = lambda: False,
        element_index: int = 0,
        key_bindings: Optional[Dict[int, Command]] = None,
    ):
        self.store = store
        self.layout = layout
        self.clock = clock
        self.modifier_held = modifier_held
        self.element_index = element_index
        self.key_bindings: Dict[int, Command] = dict(key_bindings or {})
        self.drag: Optional[DragSession] = None

    @property
    def selected_element(self) -> "Element":
        return get_element(self.element_index)

    def pointer_pressed(self, position: Point, button: int = PRIMARY_BUTTON) -> None:
        if button != PRIMARY_BUTTON:
            return
        command = self.layout.command_at(position)
        if command is not None:
            self.dispatch(command)
            return
        if self.layout.panel_contains(position):
            atom_id = self.layout.row_at(position, [atom.id for atom in self.store.atoms])
            if atom_id is not None:
                self.store.set_selection({atom_id}, self._selection_mode())
            return
        hit = self.hit_test(position)
        if hit is None:
            self.store.clear_selection()
            return
        self.store.set_selection({hit.id}, self._selection_mode())
        self.drag = DragSession(
            atom_id=hit.id,
            offset=(position[0] - hit.position[0], position[1] - hit.position[1]),
        )

    def pointer_moved(self, position: Point) -> None:
        self.layout.update_hover(position)
        if self.drag is None:
            return
        target = (position[0] - self.drag.offset[0], position[1] - self.drag.offset[1])
        if not self.store.move_atom(self.drag.atom_id, target):
            # Atom was removed mid-drag.
            self.drag = None

    def pointer_released(self, position: Point, button: int = PRIMARY_BUTTON) -> None:
        if button != PRIMARY_BUTTON:
            return
        self.drag = None

    def key_pressed(self, key: int) -> bool:
        """Dispatch the command bound to key. Returns False for unbound keys."""
        command = self.key_bindings.get(key)
        if command is None:
            return False
        self.dispatch(command)
        return True

    def hit_test(self, position: Point) -> Optional["Atom"]:
        """Topmost atom under position; later atoms are drawn over earlier ones."""
        hit = None
        for atom in self.store.atoms:
            distance = math.hypot(position[0] - atom.position[0], position[1] - atom.position[1])
            if distance <= atom.radius + self.store.settings.hit_margin:
                hit = atom
        return hit

    def dispatch(self, command: Command) -> None:
        logger.debug("Dispatching %s", command.value)
        if command is Command.ADD_ATOM:
            self.store.add_atom(self.element_index, self.store.random_position())
        elif command is Command.TOGGLE_ACTIVE:
            self.store.toggle_active_selected()
        elif command is Command.SCHEDULE:
            self.store.schedule_selected(self.clock.elapsed())
        elif command is Command.LINK_PAIR:
            self.store.link_selected_pair()
        elif command is Command.REMOVE_SELECTED:
            self.store.remove_selected()
        elif command is Command.CLEAR_ALL:
            self.store.clear_all()
        elif command is Command.NEXT_ELEMENT:
            self.element_index = next_index(self.element_index)
        elif command is Command.PREVIOUS_ELEMENT:
            self.element_index = previous_index(self.element_index)
        else:  # pragma: no cover
            raise ValueError(f"Unhandled command {command!r}")

    def snapshot(self) -> "SandboxSnapshot":
        return self.store.snapshot(self.clock.elapsed(), self.element_index)

    def _selection_mode(self) -> SelectionMode:
        return SelectionMode.TOGGLE if self.modifier_held() else SelectionMode.REPLACE
