"""
Canvas rendering helpers for the pygame UI.

The viewport consumes `SandboxSnapshot` objects from `sandbox.py` and draws
links, nuclei, orbit rings and electrons using basic pygame primitives.
Positions are already in screen pixels, so no world transform is needed.
"""

from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Optional, Tuple

try:
    import pygame
except ImportError:  # pragma: no cover
    pygame = None  # type: ignore

from sandbox import AtomState, SandboxSnapshot
from ..elements import get_element

Color = Tuple[int, int, int]


@dataclass
class ViewportConfig:
    background_color: Color = (12, 12, 16)
    link_color: Color = (120, 200, 255)
    orbit_color: Color = (60, 60, 70)
    outline_color: Color = (90, 90, 110)
    active_outline_color: Color = (255, 255, 180)
    electron_color: Color = (160, 180, 200)
    active_electron_color: Color = (180, 255, 255)
    label_color: Color = (0, 0, 0)
    electron_radius_px: int = 4


class CanvasViewport:
    """
    Draws the atom canvas to the right of the sidebar.
    """

    def __init__(self, font: Optional["pygame.font.Font"] = None, config: Optional[ViewportConfig] = None):
        if pygame is None:
            raise RuntimeError("pygame must be installed to use CanvasViewport.")
        self.font = font
        self.config = config or ViewportConfig()

    def render(self, surface: "pygame.Surface", snapshot: SandboxSnapshot) -> None:
        # Links first so atoms sit on top.
        for link in snapshot.links:
            pygame.draw.line(surface, self.config.link_color, link.start, link.end, width=1)
        for atom in snapshot.atom_states:
            self._draw_atom(surface, atom)

    def _draw_atom(self, surface: "pygame.Surface", atom: AtomState) -> None:
        element = get_element(atom.element_index)
        center = (int(atom.position[0]), int(atom.position[1]))
        fill = element.color if atom.selected else _dim(element.color, 220 / 255)
        radius = int(atom.radius)
        pygame.draw.circle(surface, fill, center, radius)
        if atom.active:
            pygame.draw.circle(surface, self.config.active_outline_color, center, radius + 3, width=3)
        else:
            pygame.draw.circle(surface, self.config.outline_color, center, radius + 1, width=1)

        for radius_px in sorted({electron.radius for electron in atom.electrons}):
            pygame.draw.circle(surface, self.config.orbit_color, center, int(radius_px), width=1)

        electron_color = self.config.active_electron_color if atom.active else self.config.electron_color
        for electron in atom.electrons:
            ex = atom.position[0] + math.cos(electron.angle) * electron.radius
            ey = atom.position[1] + math.sin(electron.angle) * electron.radius
            pygame.draw.circle(surface, electron_color, (int(ex), int(ey)), self.config.electron_radius_px)

        if self.font is not None:
            label = self.font.render(atom.symbol, True, self.config.label_color)
            surface.blit(label, label.get_rect(center=center))


def _dim(color: Color, factor: float) -> Color:
    return (int(color[0] * factor), int(color[1] * factor), int(color[2] * factor))
