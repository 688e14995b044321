"""
Sidebar geometry: command buttons and the atom list.

The layout is plain geometry built on `pygame.Rect`; it never draws. Both
the panel renderer and the selection controller read it, so hit regions and
what is drawn always agree.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import pygame

from .commands import BUTTON_LABELS, Command

PANEL_PADDING = 16
BUTTON_HEIGHT = 32
BUTTON_STRIDE = 40
ROW_HEIGHT = 22
ROW_STRIDE = 24

STACKED_COMMANDS = (
    Command.ADD_ATOM,
    Command.TOGGLE_ACTIVE,
    Command.SCHEDULE,
    Command.LINK_PAIR,
    Command.REMOVE_SELECTED,
    Command.CLEAR_ALL,
)


@dataclass
class Button:
    command: Command
    rect: pygame.Rect
    label: str
    hover: bool = False


def _point(position: Tuple[float, float]) -> Tuple[int, int]:
    return int(position[0]), int(position[1])


class SidebarLayout:
    """
    Positions of everything in the left-hand panel.

    Two half-width element cycling buttons sit on top, followed by a stack of
    full-width command buttons, the selected element caption and the atom list.
    """

    def __init__(self, sidebar_width: float = 320.0, schedule_delay_s: float = 2.0):
        self.sidebar_width = sidebar_width
        inner_width = int(sidebar_width) - 2 * PANEL_PADDING
        half_width = (inner_width - 20) // 2
        x = PANEL_PADDING
        y = 20
        self.buttons: List[Button] = [
            Button(Command.PREVIOUS_ELEMENT, pygame.Rect(x, y, half_width, BUTTON_HEIGHT), BUTTON_LABELS[Command.PREVIOUS_ELEMENT]),
            Button(
                Command.NEXT_ELEMENT,
                pygame.Rect(x + half_width + 20, y, half_width, BUTTON_HEIGHT),
                BUTTON_LABELS[Command.NEXT_ELEMENT],
            ),
        ]
        y += 48
        for command in STACKED_COMMANDS:
            label = BUTTON_LABELS[command].format(delay=schedule_delay_s)
            self.buttons.append(Button(command, pygame.Rect(x, y, inner_width, BUTTON_HEIGHT), label))
            y += BUTTON_STRIDE
        self.element_caption_pos = (x, y + 8)
        y += 48
        self.list_label_pos = (x, y)
        self.list_top = y + 24
        self.row_width = inner_width

    def panel_contains(self, position: Tuple[float, float]) -> bool:
        return position[0] < self.sidebar_width

    def command_at(self, position: Tuple[float, float]) -> Optional[Command]:
        point = _point(position)
        for button in self.buttons:
            if button.rect.collidepoint(point):
                return button.command
        return None

    def update_hover(self, position: Tuple[float, float]) -> None:
        point = _point(position)
        for button in self.buttons:
            button.hover = bool(button.rect.collidepoint(point))

    def row_rect(self, row: int) -> pygame.Rect:
        return pygame.Rect(PANEL_PADDING, self.list_top + row * ROW_STRIDE, self.row_width, ROW_HEIGHT)

    def row_at(self, position: Tuple[float, float], atom_ids: Sequence[int]) -> Optional[int]:
        """Atom id whose list row contains position, if any."""
        point = _point(position)
        for row, atom_id in enumerate(atom_ids):
            if self.row_rect(row).collidepoint(point):
                return atom_id
        return None
