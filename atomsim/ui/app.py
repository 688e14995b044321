"""
pygame application for the quantum atom sandbox.

The app owns the window, the event loop and font loading. All sandbox state
lives in `sandbox.EntityStore`; the app only wires pygame input and drawing
around it.
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass, field
from pathlib import Path
import random
from typing import List, Optional


try:
    import pygame
except ImportError:  # pragma: no cover
    pygame = None  # type: ignore

from sandbox import EntityStore, SandboxSnapshot, SimulationClock
from ..config_loader import DEFAULT_CONFIG_PATH, SandboxBundle, load_config_from_yaml
from ..layout import SidebarLayout
from ..selection import SelectionController
from .viewport import CanvasViewport
from .panels import SidebarPanel
from .controllers import SimulationController, UIController, default_key_bindings


logger = logging.getLogger(__name__)


@dataclass
class AppState:
    running: bool = True
    clock: Optional["pygame.time.Clock"] = field(default=None, repr=False)


class SandboxApp:
    """
    High-level pygame application manager.

    Responsibilities:
      - Initialize pygame, the window and the font.
      - Route events to the UI controller.
      - Run the per-frame tick and render the resulting snapshot.
    """

    def __init__(self, bundle: Optional[SandboxBundle] = None):
        if pygame is None:
            raise RuntimeError("pygame is not installed. Install it to run the sandbox.")
        self.bundle = bundle or SandboxBundle()
        self.state = AppState()
        self.screen: Optional["pygame.Surface"] = None
        self.store = EntityStore(self.bundle.settings, rng=random.Random(self.bundle.seed))
        self.sim_clock = SimulationClock()
        self.layout = SidebarLayout(
            sidebar_width=self.bundle.settings.sidebar_width,
            schedule_delay_s=self.bundle.settings.schedule_delay_s,
        )
        self.selection = SelectionController(
            self.store,
            self.layout,
            self.sim_clock,
            modifier_held=_ctrl_held,
            key_bindings=default_key_bindings(),
        )
        self.sim_controller = SimulationController(
            self.store, self.sim_clock, frame_dt_s=self.bundle.settings.frame_dt_s
        )
        self.ui_controller: Optional[UIController] = None
        self._latest_snapshot: Optional[SandboxSnapshot] = None

    def setup(self) -> None:
        """Initialize pygame context and create root surfaces."""
        pygame.init()
        display = self.bundle.display
        settings = self.bundle.settings
        flags = pygame.SCALED if display.enable_vsync else 0
        size = (int(settings.canvas_width), int(settings.canvas_height))
        self.screen = pygame.display.set_mode(size, flags)
        pygame.display.set_caption(display.title)
        self.state.clock = pygame.time.Clock()

        font = self._load_font()
        self.ui_controller = UIController(
            simulation_controller=self.sim_controller,
            selection=self.selection,
            viewport=CanvasViewport(font=font),
            sidebar=SidebarPanel(layout=self.layout, height=size[1], font=font),
        )
        self.sim_clock.reset()
        self._latest_snapshot = self.selection.snapshot()
        logger.info("Sandbox window ready (%dx%d)", *size)

    def handle_event(self, event: "pygame.event.Event") -> None:
        """Dispatch a single pygame event."""
        if event.type == pygame.QUIT:
            self.state.running = False
            return
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.state.running = False
            return
        if self.ui_controller:
            self.ui_controller.handle_event(event)

    def update(self) -> None:
        """Advance sandbox state by one frame."""
        if self.ui_controller:
            self._latest_snapshot = self.ui_controller.update()

    def render(self) -> None:
        """Render the current frame."""
        if self.screen is None or self._latest_snapshot is None or self.ui_controller is None:
            return
        self.screen.fill(self.ui_controller.viewport.config.background_color)
        self.ui_controller.render(self.screen, self._latest_snapshot)
        pygame.display.flip()

    def run(self) -> None:
        """Main loop entry point."""
        if self.screen is None or self.state.clock is None:
            self.setup()

        assert self.state.clock is not None
        while self.state.running:
            self.state.clock.tick(self.bundle.display.target_fps)
            for event in pygame.event.get():
                self.handle_event(event)
            self.update()
            self.render()

        pygame.quit()

    def _load_font(self) -> Optional["pygame.font.Font"]:
        display = self.bundle.display
        try:
            return pygame.font.Font(display.font_path, display.font_size)
        except (FileNotFoundError, OSError):
            logger.warning("Font %s not found. Text will not render.", display.font_path)
            return None


def _ctrl_held() -> bool:
    return bool(pygame.key.get_mods() & pygame.KMOD_CTRL)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Interactive quantum atom sandbox.")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a sandbox YAML config (defaults to the bundled template.yaml).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for atom placement and electron speed jitter.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ...).",
    )
    return parser.parse_args(argv)


def load_bundle(config_path: Optional[Path]) -> SandboxBundle:
    """Load the requested config; fall back to defaults when the default file is missing."""
    if config_path is not None:
        return load_config_from_yaml(config_path)
    if DEFAULT_CONFIG_PATH.exists():
        return load_config_from_yaml(DEFAULT_CONFIG_PATH)
    logger.warning("Default config %s not found, using built-in settings.", DEFAULT_CONFIG_PATH)
    return SandboxBundle()


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    bundle = load_bundle(args.config)
    if args.seed is not None:
        bundle.seed = args.seed
    app = SandboxApp(bundle)
    app.run()


if __name__ == "__main__":
    main()
