from __future__ import annotations

from .core.errors import DuplicateIdentifierError, RecordNotFoundError, RegistryError
from .core.records import StoredRecord
from .core.registry import InMemoryRegistry
from .demo import run_demo
from .listing import format_listing, listing_pairs

__all__ = [
    "StoredRecord",
    "InMemoryRegistry",
    "RegistryError",
    "DuplicateIdentifierError",
    "RecordNotFoundError",
    "format_listing",
    "listing_pairs",
    "run_demo",
]
