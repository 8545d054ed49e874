from __future__ import annotations

from bisect import bisect_left, insort
from collections.abc import Iterator


class DescriptionIndex:
    """Sorted multimap from description to the ids stored under it.

    Keys are kept in ascending code point order. Each bucket keeps its ids sorted,
    so enumeration order is (description, id) and fully deterministic.
    """

    def __init__(self) -> None:
        self._keys: list[str] = []
        self._buckets: dict[str, list[str]] = {}
        self._size = 0

    def add(self, description: str, record_id: str) -> None:
        bucket = self._buckets.get(description)
        if bucket is None:
            bucket = []
            self._buckets[description] = bucket
            insort(self._keys, description)

        idx = bisect_left(bucket, record_id)
        if idx < len(bucket) and bucket[idx] == record_id:
            raise ValueError(f"'{record_id}' is already indexed under '{description}'")
        bucket.insert(idx, record_id)
        self._size += 1

    def discard(self, description: str, record_id: str) -> bool:
        bucket = self._buckets.get(description)
        if bucket is None:
            return False
        idx = bisect_left(bucket, record_id)
        if idx >= len(bucket) or bucket[idx] != record_id:
            return False

        del bucket[idx]
        self._size -= 1
        if not bucket:
            # Last id for this description: drop the key too.
            del self._buckets[description]
            del self._keys[bisect_left(self._keys, description)]
        return True

    def bucket(self, description: str) -> tuple[str, ...]:
        return tuple(self._buckets.get(description, ()))

    def descriptions(self) -> list[str]:
        return list(self._keys)

    def ids(self) -> set[str]:
        return {rid for bucket in self._buckets.values() for rid in bucket}

    def __iter__(self) -> Iterator[tuple[str, str]]:
        for description in self._keys:
            for rid in self._buckets[description]:
                yield description, rid

    def __len__(self) -> int:
        return self._size

    def __contains__(self, description: object) -> bool:
        return description in self._buckets
