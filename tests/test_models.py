from __future__ import annotations

import pytest

from abbr_cli.errors import InvalidValueError
from abbr_cli.models import (
    Abbreviation,
    Entry,
    Item,
    StorageModification,
    is_normalized_abbreviation,
    normalize_abbreviation,
)


def test_normalize_abbreviation_uppercases_and_strips():
    assert normalize_abbreviation(" cpu ") == "CPU"
    assert normalize_abbreviation("Ram") == "RAM"


@pytest.mark.parametrize("raw", ["", "   "])
def test_normalize_abbreviation_rejects_empty(raw):
    with pytest.raises(InvalidValueError):
        normalize_abbreviation(raw)


def test_is_normalized_abbreviation():
    assert is_normalized_abbreviation("CPU")
    assert not is_normalized_abbreviation("cpu")
    assert not is_normalized_abbreviation(" CPU")
    assert not is_normalized_abbreviation("")
    assert not is_normalized_abbreviation(3)


def test_item_dict_always_carries_description():
    assert Item("Central Processing Unit").to_dict() == {
        "name": "Central Processing Unit",
        "description": None,
    }
    item = Item.from_dict({"name": "Random Access Memory", "description": "volatile"})
    assert item == Item("Random Access Memory", "volatile")


def test_item_render_with_and_without_description():
    assert Item("Central Processing Unit").render(1) == " 1) Central Processing Unit"
    assert Item("Critical Path Utility", "Project planning").render(2) == (
        " 2) Critical Path Utility\n    Project planning"
    )


def test_empty_entry_renders_no_matches():
    assert str(Entry(Abbreviation("GPU"))) == "GPU has no matches"


def test_single_item_entry_renders_header_and_item():
    entry = Entry(Abbreviation("CPU"), [Item("Central Processing Unit")])
    assert str(entry) == "CPU:\n 1) Central Processing Unit"


def test_multi_item_entry_renders_numbered_listing():
    entry = Entry(
        Abbreviation("CPU"),
        [Item("Central Processing Unit"), Item("Critical Path Utility", "Project planning")],
    )
    assert str(entry) == (
        "CPU is one of the following:\n"
        " 1) Central Processing Unit\n"
        " 2) Critical Path Utility\n"
        "    Project planning"
    )


def test_entry_copy_is_independent():
    entry = Entry(Abbreviation("CPU"), [Item("Central Processing Unit")])
    duplicate = entry.copy()
    duplicate.items[0].name = "changed"
    duplicate.items.append(Item("other"))

    assert entry.items == [Item("Central Processing Unit")]


def test_entry_find_item():
    entry = Entry(Abbreviation("CPU"), [Item("a"), Item("b")])
    assert entry.find_item("b") == 1
    assert entry.find_item("c") is None
    assert entry.has_item("a")


def test_modification_tracks_requested_fields():
    modification = StorageModification("cpu", item_id=1)
    assert modification.abbreviation == "CPU"
    assert not modification.has_changes

    modification.with_name("Central Processing Unit")
    assert modification.name_requested
    assert not modification.description_requested
    assert modification.has_changes


def test_modification_clear_description_is_a_request():
    modification = StorageModification("CPU").clear_description()
    assert modification.description_requested
    assert modification.description is None


def test_modification_builder_chains():
    modification = StorageModification("CPU").with_name("x").with_description("y")
    assert (modification.name, modification.description) == ("x", "y")
