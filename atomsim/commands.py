"""Commands the sandbox understands, independent of how they are triggered."""

from __future__ import annotations

from enum import Enum


class Command(Enum):
    ADD_ATOM = "add_atom"
    TOGGLE_ACTIVE = "toggle_active"
    SCHEDULE = "schedule"
    LINK_PAIR = "link_pair"
    REMOVE_SELECTED = "remove_selected"
    CLEAR_ALL = "clear_all"
    PREVIOUS_ELEMENT = "previous_element"
    NEXT_ELEMENT = "next_element"


BUTTON_LABELS = {
    Command.PREVIOUS_ELEMENT: "< Element",
    Command.NEXT_ELEMENT: "Element >",
    Command.ADD_ATOM: "Add Atom",
    Command.TOGGLE_ACTIVE: "Toggle Active",
    Command.SCHEDULE: "Schedule +{delay:g}s",
    Command.LINK_PAIR: "Link Pair",
    Command.REMOVE_SELECTED: "Remove Selected",
    Command.CLEAR_ALL: "Clear All",
}
