"""Tests for sidebar geometry."""

from __future__ import annotations

from atomsim.commands import Command
from atomsim.layout import SidebarLayout


def test_every_command_has_a_button() -> None:
    layout = SidebarLayout()
    assert {button.command for button in layout.buttons} == set(Command)


def test_buttons_do_not_overlap_and_stay_in_panel() -> None:
    layout = SidebarLayout(sidebar_width=320)
    rects = [button.rect for button in layout.buttons]
    for index, rect in enumerate(rects):
        assert rect.right <= 320
        assert rect.collidelist(rects[index + 1:]) == -1
        assert rect.bottom < layout.list_top


def test_schedule_label_shows_delay() -> None:
    layout = SidebarLayout(schedule_delay_s=3.5)
    labels = {button.command: button.label for button in layout.buttons}
    assert labels[Command.SCHEDULE] == "Schedule +3.5s"


def test_row_lookup_matches_row_rects() -> None:
    layout = SidebarLayout()
    ids = [4, 9, 12]
    assert layout.row_at(layout.row_rect(2).center, ids) == 12
    assert layout.row_at(layout.row_rect(3).center, ids) is None
    assert layout.row_at((5, layout.row_rect(0).centery), ids) is None


def test_panel_contains_splits_on_sidebar_width() -> None:
    layout = SidebarLayout(sidebar_width=320)
    assert layout.panel_contains((319.5, 10))
    assert not layout.panel_contains((320, 10))
