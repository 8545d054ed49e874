"""Sample inventory session.

Drives an `InMemoryRegistry` purely through its public operations: two adds, a
rejected duplicate, a lookup, a failed removal and the description listing.
"""

from __future__ import annotations

from collections.abc import Callable

from .core.errors import DuplicateIdentifierError, RecordNotFoundError
from .core.records import StoredRecord
from .core.registry import InMemoryRegistry
from .listing import format_listing

SAMPLE_RECORDS: tuple[StoredRecord, ...] = (
    StoredRecord("ITEM001", "LED Light", "Aisle 3, Shelf 1"),
    StoredRecord("ITEM002", "Fan Motor", "Aisle 2, Shelf 5"),
)


def _try_duplicate(registry: InMemoryRegistry, out: Callable[[str], object]) -> None:
    duplicate = StoredRecord("ITEM001", "LED Light", "Aisle 3, Shelf 1")
    out("Attempting to add ITEM001 again...")
    try:
        registry.add(duplicate)
    except DuplicateIdentifierError as exc:
        out(f"Error: {exc}")


def _try_missing_removal(registry: InMemoryRegistry, out: Callable[[str], object]) -> None:
    out("Removing ITEM003...")
    try:
        registry.remove("ITEM003")
    except RecordNotFoundError as exc:
        out(f"Error: {exc}")


def run_demo(registry: InMemoryRegistry | None = None, *, out: Callable[[str], object] = print) -> InMemoryRegistry:
    reg = registry if registry is not None else InMemoryRegistry()

    for record in SAMPLE_RECORDS:
        reg.add(record)
        out(f"Adding item: {record.id} - {record.description}")

    _try_duplicate(reg, out)

    out("Retrieving ITEM002...")
    try:
        found = reg.find_by_id("ITEM002")
        out(f"Found: {found.description} at {found.location}")
    except RecordNotFoundError as exc:
        out(f"Error: {exc}")

    _try_missing_removal(reg, out)

    out(format_listing(reg.list_by_description()))
    return reg
