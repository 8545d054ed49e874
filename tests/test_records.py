from __future__ import annotations

import dataclasses

import pytest

from stockroom.core.records import StoredRecord


def test_fields_are_read_only() -> None:
    rec = StoredRecord("ITEM001", "LED Light", "Aisle 3, Shelf 1")

    assert rec.id == "ITEM001"
    assert rec.description == "LED Light"
    assert rec.location == "Aisle 3, Shelf 1"
    with pytest.raises(dataclasses.FrozenInstanceError):
        rec.location = "Aisle 9"  # type: ignore[misc]


def test_equality_and_hash_use_id_only() -> None:
    a = StoredRecord("ITEM001", "LED Light", "Aisle 3, Shelf 1")
    b = StoredRecord("ITEM001", "Something else", "Back room")
    c = StoredRecord("ITEM002", "LED Light", "Aisle 3, Shelf 1")

    assert a == b
    assert hash(a) == hash(b)
    assert a != c
    assert len({a, b, c}) == 2


def test_empty_strings_are_accepted() -> None:
    rec = StoredRecord("", "", "")
    assert rec.as_dict() == {"id": "", "description": "", "location": ""}


def test_non_string_fields_are_rejected() -> None:
    with pytest.raises(TypeError, match="id must be a str"):
        StoredRecord(1, "LED Light", "Aisle 3")  # type: ignore[arg-type]
    with pytest.raises(TypeError, match="description must be a str"):
        StoredRecord("ITEM001", None, "Aisle 3")  # type: ignore[arg-type]
