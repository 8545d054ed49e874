from __future__ import annotations

import logging
import threading
from collections.abc import Iterator

from ..description_index import DescriptionIndex
from ..errors import DuplicateIdentifierError, RecordNotFoundError
from ..records import StoredRecord

logger = logging.getLogger(__name__)


class InMemoryRegistry:
    """Inventory records indexed by id and by description.

    Both indexes live behind a single lock and are only mutated by `add` and
    `remove`, so every reader sees them describe the same set of records.
    """

    def __init__(self, *, log: logging.Logger | None = None) -> None:
        self._lock = threading.RLock()
        self._by_id: dict[str, StoredRecord] = {}
        self._by_description = DescriptionIndex()
        self._log = log if log is not None else logger

    def add(self, record: StoredRecord) -> StoredRecord:
        """Store `record` in both indexes.

        Raises DuplicateIdentifierError, leaving the registry untouched, if the id
        is already present.
        """
        if not isinstance(record, StoredRecord):
            raise TypeError(f"record must be a StoredRecord, got {type(record).__name__}")

        with self._lock:
            if record.id in self._by_id:
                self._log.debug("Rejected duplicate item %s", record.id)
                raise DuplicateIdentifierError(record.id)
            self._by_description.add(record.description, record.id)
            self._by_id[record.id] = record

        self._log.info("Adding item: %s - %s", record.id, record.description)
        return record

    def find_by_id(self, record_id: str) -> StoredRecord:
        with self._lock:
            record = self._by_id.get(record_id)
        if record is None:
            self._log.debug("Lookup failed for item %s", record_id)
            raise RecordNotFoundError(record_id)
        return record

    def get(self, record_id: str, default: StoredRecord | None = None) -> StoredRecord | None:
        with self._lock:
            return self._by_id.get(record_id, default)

    def remove(self, record_id: str) -> StoredRecord:
        """Delete the record stored under `record_id` and return it.

        Only this record's entry leaves its description bucket; other records
        sharing the description stay listed.
        """
        with self._lock:
            record = self._by_id.get(record_id)
            if record is None:
                self._log.debug("Removal failed for item %s", record_id)
                raise RecordNotFoundError(record_id)
            self._by_description.discard(record.description, record.id)
            del self._by_id[record_id]

        self._log.info("Removed item with ID %s", record_id)
        return record

    def list_by_description(self) -> list[StoredRecord]:
        """Snapshot of all records ordered by description, then id."""
        with self._lock:
            return [self._by_id[rid] for _, rid in self._by_description]

    def iter_by_description(self) -> Iterator[StoredRecord]:
        # Snapshot now; later writes do not affect an iterator already handed out.
        return iter(self.list_by_description())

    def find_by_description(self, description: str) -> list[StoredRecord]:
        """Exact-match lookup of every record sharing `description`."""
        with self._lock:
            return [self._by_id[rid] for rid in self._by_description.bucket(description)]

    def ids(self) -> list[str]:
        with self._lock:
            return sorted(self._by_id)

    def consistency_problems(self) -> list[str]:
        """Audit the two indexes against each other.

        Returns an empty list when they describe exactly the same records.
        """
        problems: list[str] = []
        with self._lock:
            primary = set(self._by_id)
            secondary = self._by_description.ids()
            if len(self._by_description) != len(secondary):
                problems.append("secondary index holds the same id more than once")
            for rid in sorted(primary - secondary):
                problems.append(f"'{rid}' is missing from the description index")
            for rid in sorted(secondary - primary):
                problems.append(f"'{rid}' is indexed by description but not stored")
            for description, rid in self._by_description:
                record = self._by_id.get(rid)
                if record is not None and record.description != description:
                    problems.append(
                        f"'{rid}' is indexed under '{description}' but its description is '{record.description}'"
                    )
            if self._by_description.descriptions() != sorted(self._by_description.descriptions()):
                problems.append("description keys are out of order")
        return problems

    def __len__(self) -> int:
        with self._lock:
            return len(self._by_id)

    def __contains__(self, record_id: object) -> bool:
        with self._lock:
            return record_id in self._by_id
