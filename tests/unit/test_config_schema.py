"""
Schema-oriented tests for the default configuration template.

These tests provide early warnings if template structures change in ways
that the loader is not expecting.
"""

from __future__ import annotations

from typing import Set


def test_config_template_sections(config_template) -> None:
    required_sections: Set[str] = {
        "metadata",
        "window",
        "canvas",
        "interaction",
        "rendering",
        "random",
    }
    assert required_sections.issubset(
        config_template
    ), f"Missing sections: {required_sections - set(config_template)}"


def test_interaction_fields(config_template) -> None:
    interaction = config_template["interaction"]
    assert {"hit_margin", "atom_radius", "schedule_delay_s"} <= interaction.keys()
    assert interaction["schedule_delay_s"] > 0


def test_window_leaves_room_for_canvas(config_template) -> None:
    window = config_template["window"]
    canvas = config_template["canvas"]
    assert window["width"] > canvas["sidebar_width"] + 2 * canvas["margin"]
