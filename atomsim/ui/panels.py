"""
Sidebar panel rendering: command buttons, element caption and atom list.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

try:
    import pygame
except ImportError:  # pragma: no cover
    pygame = None  # type: ignore

from sandbox import SandboxSnapshot
from ..elements import get_element
from ..layout import SidebarLayout

Color = Tuple[int, int, int]


@dataclass
class SidebarPanel:
    layout: SidebarLayout
    height: int
    font: Optional["pygame.font.Font"] = None
    background_color: Color = (22, 22, 30)
    button_color: Color = (40, 40, 50)
    button_hover_color: Color = (55, 55, 70)
    button_outline_color: Color = (90, 90, 110)
    text_color: Color = (255, 255, 255)
    row_color: Color = (200, 200, 210)
    selected_row_color: Color = (255, 255, 180)

    def render(self, surface: "pygame.Surface", snapshot: SandboxSnapshot) -> None:
        if pygame is None:
            return
        panel_rect = pygame.Rect(0, 0, int(self.layout.sidebar_width), self.height)
        pygame.draw.rect(surface, self.background_color, panel_rect)

        for button in self.layout.buttons:
            color = self.button_hover_color if button.hover else self.button_color
            pygame.draw.rect(surface, color, button.rect)
            pygame.draw.rect(surface, self.button_outline_color, button.rect, width=1)
            self._blit_text(surface, button.label, (button.rect.x + 12, button.rect.y + 8), self.text_color)

        element = get_element(snapshot.selected_element_index)
        self._blit_text(
            surface,
            f"Selected: {element.name} ({element.symbol})",
            self.layout.element_caption_pos,
            self.text_color,
        )
        self._blit_text(surface, "Atoms:", self.layout.list_label_pos, (220, 220, 220))
        for row, atom in enumerate(snapshot.atom_states):
            rect = self.layout.row_rect(row)
            if rect.top > self.height:
                break  # list overflows the window
            status = "[Active]" if atom.active else "[Scheduled]" if atom.scheduled else "[Idle]"
            color = self.selected_row_color if atom.selected else self.row_color
            self._blit_text(surface, f"ID {atom.id}  {atom.symbol}  {status}", rect.topleft, color)

    def _blit_text(self, surface: "pygame.Surface", text: str, position: Tuple[int, int], color: Color) -> None:
        if self.font is None:
            return
        surface.blit(self.font.render(text, True, color), position)
