"""Tests for the element catalog."""

from __future__ import annotations

import pytest

from atomsim.elements import ELEMENTS, find_index, get_element, next_index, previous_index


def test_catalog_order_starts_with_hydrogen_and_ends_with_chlorine() -> None:
    assert ELEMENTS[0].symbol == "H"
    assert ELEMENTS[0].atomic_number == 1
    assert ELEMENTS[-1].symbol == "Cl"
    assert ELEMENTS[-1].atomic_number == 17


def test_cycling_wraps_in_both_directions() -> None:
    last = len(ELEMENTS) - 1
    assert next_index(last) == 0
    assert previous_index(0) == last
    assert next_index(previous_index(3)) == 3


def test_get_element_wraps_out_of_range_indices() -> None:
    assert get_element(len(ELEMENTS)) is ELEMENTS[0]
    assert get_element(-1) is ELEMENTS[-1]


def test_find_index() -> None:
    assert find_index("O") == 7
    with pytest.raises(KeyError):
        find_index("Xx")
