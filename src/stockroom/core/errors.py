"""Domain errors raised by the registry."""

from __future__ import annotations

from typing import Any


class RegistryError(Exception):
    """Base exception for registry domain errors."""

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.details = details or {}


class DuplicateIdentifierError(RegistryError):
    """A record with the same id is already stored."""

    def __init__(self, record_id: str) -> None:
        super().__init__(f"Item with ID {record_id} already exists!", details={"id": record_id})
        self.record_id = record_id


class RecordNotFoundError(RegistryError, LookupError):
    """No record is stored under the requested id."""

    def __init__(self, record_id: str) -> None:
        super().__init__(f"Item with ID {record_id} not found!", details={"id": record_id})
        self.record_id = record_id
