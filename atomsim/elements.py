"""Element catalog used when placing atoms in the sandbox."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Color = Tuple[int, int, int]


@dataclass(frozen=True)
class Element:
    name: str
    symbol: str
    atomic_number: int
    color: Color


ELEMENTS: Tuple[Element, ...] = (
    Element("Hydrogen", "H", 1, (200, 200, 255)),
    Element("Helium", "He", 2, (255, 200, 200)),
    Element("Lithium", "Li", 3, (200, 255, 200)),
    Element("Beryllium", "Be", 4, (200, 255, 255)),
    Element("Boron", "B", 5, (255, 220, 180)),
    Element("Carbon", "C", 6, (180, 180, 180)),
    Element("Nitrogen", "N", 7, (150, 200, 255)),
    Element("Oxygen", "O", 8, (255, 120, 120)),
    Element("Sodium", "Na", 11, (255, 255, 120)),
    Element("Chlorine", "Cl", 17, (120, 255, 120)),
)


def get_element(index: int) -> Element:
    """Return the catalog entry for index, wrapping around the catalog."""

    return ELEMENTS[index % len(ELEMENTS)]


def next_index(index: int) -> int:
    return (index + 1) % len(ELEMENTS)


def previous_index(index: int) -> int:
    return (index - 1 + len(ELEMENTS)) % len(ELEMENTS)


def find_index(symbol: str) -> int:
    for index, element in enumerate(ELEMENTS):
        if element.symbol == symbol:
            return index
    raise KeyError(f"Unknown element symbol {symbol!r}.")
