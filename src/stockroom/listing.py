from __future__ import annotations

from collections.abc import Iterable

from .core.records import StoredRecord

LISTING_HEADER = "Items in Description Order:"


def listing_pairs(records: Iterable[StoredRecord]) -> list[tuple[str, str]]:
    """Return (description, location) pairs, keeping the input order."""
    return [(r.description, r.location) for r in records]


def format_listing(records: Iterable[StoredRecord]) -> str:
    lines = [LISTING_HEADER]
    lines.extend(f"- {description}: {location}" for description, location in listing_pairs(records))
    return "\n".join(lines)
