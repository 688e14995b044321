"""
Entity and interaction state for the quantum atom sandbox.

Coordinate conventions:
    - Positions: screen pixels, origin at the top-left of the window
    - Time: simulation seconds since the clock started
    - Electron angles: radians, normalised into [0, 2*pi)

Everything in this module is independent of pygame. The UI layer reads
`SandboxSnapshot` objects and mutates state only through `EntityStore`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import logging
import math
import random
import time
from typing import Callable, Iterable, List, Optional, Tuple, Union

from atomsim.elements import ELEMENTS, get_element
from atomsim.shells import Electron, allocate_electrons


logger = logging.getLogger(__name__)

Vector = Tuple[float, float]

TWO_PI = 2.0 * math.pi
DEFAULT_CANVAS_WIDTH = 1200.0
DEFAULT_CANVAS_HEIGHT = 800.0
DEFAULT_SIDEBAR_WIDTH = 320.0
DEFAULT_CANVAS_MARGIN = 20.0
DEFAULT_HIT_MARGIN = 8.0
DEFAULT_ATOM_RADIUS = 16.0
DEFAULT_SCHEDULE_DELAY_S = 2.0
DEFAULT_FRAME_DT_S = 1.0 / 60.0
SPAWN_INSET_X = 80.0
SPAWN_SPAN = (600.0, 500.0)
SPAWN_TOP = 100.0


@dataclass(frozen=True)
class CanvasBounds:
    left: float
    top: float
    right: float
    bottom: float

    def clamp(self, position: Vector) -> Vector:
        x = min(max(position[0], self.left), self.right)
        y = min(max(position[1], self.top), self.bottom)
        return (x, y)

    def contains(self, position: Vector) -> bool:
        return self.left <= position[0] <= self.right and self.top <= position[1] <= self.bottom


@dataclass
class SandboxSettings:
    canvas_width: float = DEFAULT_CANVAS_WIDTH
    canvas_height: float = DEFAULT_CANVAS_HEIGHT
    sidebar_width: float = DEFAULT_SIDEBAR_WIDTH
    margin: float = DEFAULT_CANVAS_MARGIN
    hit_margin: float = DEFAULT_HIT_MARGIN
    atom_radius: float = DEFAULT_ATOM_RADIUS
    schedule_delay_s: float = DEFAULT_SCHEDULE_DELAY_S
    frame_dt_s: float = DEFAULT_FRAME_DT_S

    def __post_init__(self) -> None:
        # Schedules must land strictly after the moment they are set.
        if self.schedule_delay_s <= 0:
            raise ValueError("schedule_delay_s must be positive.")
        if self.atom_radius <= 0:
            raise ValueError("atom_radius must be positive.")
        if self.frame_dt_s <= 0:
            raise ValueError("frame_dt_s must be positive.")
        bounds = self.canvas_bounds()
        if bounds.left > bounds.right or bounds.top > bounds.bottom:
            raise ValueError("Window is too small for the sidebar and canvas margins.")

    def canvas_bounds(self) -> CanvasBounds:
        """Rectangle atom centres may occupy: right of the sidebar, inset by the margin."""
        return CanvasBounds(
            left=self.sidebar_width + self.margin,
            top=self.margin,
            right=self.canvas_width - self.margin,
            bottom=self.canvas_height - self.margin,
        )


@dataclass(frozen=True)
class NoSchedule:
    pass


@dataclass(frozen=True)
class ScheduledAt:
    time: float

    def is_due(self, now: float) -> bool:
        return now >= self.time


Schedule = Union[NoSchedule, ScheduledAt]
NO_SCHEDULE = NoSchedule()


@dataclass
class Atom:
    id: int
    element_index: int
    position: Vector
    radius: float = DEFAULT_ATOM_RADIUS
    active: bool = False
    selected: bool = False
    electrons: List[Electron] = field(default_factory=list)
    schedule: Schedule = NO_SCHEDULE

    @property
    def symbol(self) -> str:
        return get_element(self.element_index).symbol

    @property
    def is_scheduled(self) -> bool:
        return isinstance(self.schedule, ScheduledAt)


@dataclass(frozen=True)
class Link:
    """Unordered atom pair; always stored with the smaller id first."""

    a_id: int
    b_id: int

    @classmethod
    def between(cls, first: int, second: int) -> "Link":
        low, high = sorted((first, second))
        return cls(low, high)

    def touches(self, atom_id: int) -> bool:
        return atom_id in (self.a_id, self.b_id)


class SelectionMode(Enum):
    REPLACE = "replace"
    TOGGLE = "toggle"


@dataclass(frozen=True)
class ElectronState:
    radius: float
    angle: float


@dataclass(frozen=True)
class AtomState:
    id: int
    element_index: int
    symbol: str
    position: Vector
    radius: float
    active: bool
    selected: bool
    scheduled: bool
    electrons: Tuple[ElectronState, ...]


@dataclass(frozen=True)
class LinkState:
    a_id: int
    b_id: int
    start: Vector
    end: Vector


@dataclass(frozen=True)
class SandboxSnapshot:
    time_s: float
    atom_states: Tuple[AtomState, ...]
    links: Tuple[LinkState, ...]
    selected_element_index: int


class SimulationClock:
    """
    Monotonic elapsed-time source.

    `time_source` defaults to `time.monotonic`; tests inject a callable they
    control. Elapsed time is measured from construction or the last reset.
    """

    def __init__(self, time_source: Callable[[], float] = time.monotonic):
        self._time_source = time_source
        self._start = time_source()

    def elapsed(self) -> float:
        return self._time_source() - self._start

    def reset(self) -> None:
        self._start = self._time_source()


class EntityStore:
    """
    Owns the atoms and links of the sandbox.

    Atoms keep insertion order, which doubles as draw order: later atoms are
    drawn on top and win hit-tests.
    """

    def __init__(self, settings: Optional[SandboxSettings] = None, rng: Optional[random.Random] = None):
        self.settings = settings or SandboxSettings()
        self.bounds = self.settings.canvas_bounds()
        self.rng = rng or random.Random()
        self.atoms: List[Atom] = []
        self.links: List[Link] = []
        self._next_id = 1

    def add_atom(self, element_index: int, position: Vector) -> Atom:
        element_index = element_index % len(ELEMENTS)
        element = ELEMENTS[element_index]
        atom = Atom(
            id=self._next_id,
            element_index=element_index,
            position=self.bounds.clamp(position),
            radius=self.settings.atom_radius,
            electrons=allocate_electrons(element.atomic_number, self.rng),
        )
        self._next_id += 1
        self.atoms.append(atom)
        logger.debug("Added atom %d (%s) at %.1f, %.1f", atom.id, element.symbol, *atom.position)
        return atom

    def random_position(self) -> Vector:
        """Spawn point for new atoms, somewhere in the upper-left part of the canvas."""
        x = self.bounds.left + SPAWN_INSET_X + self.rng.uniform(0.0, SPAWN_SPAN[0])
        y = SPAWN_TOP + self.rng.uniform(0.0, SPAWN_SPAN[1])
        return self.bounds.clamp((x, y))

    def get_atom(self, atom_id: int) -> Optional[Atom]:
        return next((atom for atom in self.atoms if atom.id == atom_id), None)

    def selected_atoms(self) -> List[Atom]:
        return [atom for atom in self.atoms if atom.selected]

    def selected_ids(self) -> List[int]:
        return [atom.id for atom in self.atoms if atom.selected]

    def move_atom(self, atom_id: int, position: Vector) -> bool:
        atom = self.get_atom(atom_id)
        if atom is None:
            return False
        atom.position = self.bounds.clamp(position)
        return True

    def remove_selected(self) -> List[int]:
        removed = set(self.selected_ids())
        if not removed:
            return []
        self.atoms = [atom for atom in self.atoms if atom.id not in removed]
        self.links = [
            link for link in self.links if link.a_id not in removed and link.b_id not in removed
        ]
        logger.debug("Removed atoms %s", sorted(removed))
        return sorted(removed)

    def toggle_active_selected(self) -> None:
        # Schedules are left alone; a pending schedule still activates later.
        for atom in self.selected_atoms():
            atom.active = not atom.active

    def schedule_selected(self, now: float) -> None:
        activation_time = now + self.settings.schedule_delay_s
        for atom in self.selected_atoms():
            atom.schedule = ScheduledAt(activation_time)
            logger.debug("Atom %d scheduled for t=%.2f", atom.id, activation_time)

    def clear_all(self) -> None:
        self.atoms = []
        self.links = []
        logger.debug("Cleared all atoms and links")

    def link_selected_pair(self) -> Optional[Link]:
        selected = self.selected_ids()
        if len(selected) != 2:
            return None
        link = Link.between(*selected)
        if link in self.links:
            return None
        self.links.append(link)
        logger.debug("Linked atoms %d and %d", link.a_id, link.b_id)
        return link

    def set_selection(self, ids: Iterable[int], mode: SelectionMode) -> None:
        wanted = set(ids)
        if mode is SelectionMode.REPLACE:
            for atom in self.atoms:
                atom.selected = atom.id in wanted
        else:
            for atom in self.atoms:
                if atom.id in wanted:
                    atom.selected = not atom.selected

    def clear_selection(self) -> None:
        self.set_selection((), SelectionMode.REPLACE)

    def snapshot(self, now: float = 0.0, selected_element_index: int = 0) -> SandboxSnapshot:
        atom_states = tuple(
            AtomState(
                id=atom.id,
                element_index=atom.element_index,
                symbol=atom.symbol,
                position=atom.position,
                radius=atom.radius,
                active=atom.active,
                selected=atom.selected,
                scheduled=atom.is_scheduled,
                electrons=tuple(ElectronState(e.radius, e.angle) for e in atom.electrons),
            )
            for atom in self.atoms
        )
        positions = {atom.id: atom.position for atom in self.atoms}
        link_states = tuple(
            LinkState(link.a_id, link.b_id, positions[link.a_id], positions[link.b_id])
            for link in self.links
            if link.a_id in positions and link.b_id in positions
        )
        return SandboxSnapshot(
            time_s=now,
            atom_states=atom_states,
            links=link_states,
            selected_element_index=selected_element_index,
        )


def tick(store: EntityStore, now: float, dt_seconds: float) -> List[int]:
    """
    Advance the sandbox by one frame.

    Due schedules activate their atom and are cleared, then every active
    atom's electrons advance by speed * dt. Returns the ids activated by a
    schedule during this call.
    """
    activated: List[int] = []
    for atom in store.atoms:
        schedule = atom.schedule
        if isinstance(schedule, ScheduledAt) and schedule.is_due(now):
            atom.active = True
            atom.schedule = NO_SCHEDULE
            activated.append(atom.id)
        if atom.active:
            for electron in atom.electrons:
                electron.angle = (electron.angle + electron.speed * dt_seconds) % TWO_PI
    if activated:
        logger.debug("Scheduled activation at t=%.2f for atoms %s", now, activated)
    return activated
