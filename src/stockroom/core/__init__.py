from __future__ import annotations

from .description_index import DescriptionIndex
from .errors import DuplicateIdentifierError, RecordNotFoundError, RegistryError
from .records import StoredRecord
from .registry import InMemoryRegistry

__all__ = [
    "StoredRecord",
    "DescriptionIndex",
    "InMemoryRegistry",
    "RegistryError",
    "DuplicateIdentifierError",
    "RecordNotFoundError",
]
