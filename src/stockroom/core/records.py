from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class StoredRecord:
    """One inventory entry.

    Notes:
    - Records are immutable, so the registry and its callers can safely share them.
    - Equality and hashing only look at `id`; two records with the same id are the same item.
    """

    id: str
    description: str = field(compare=False)
    location: str = field(compare=False)

    def __post_init__(self) -> None:
        for name in ("id", "description", "location"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise TypeError(f"{name} must be a str, got {type(value).__name__}")

    def as_dict(self) -> dict[str, str]:
        return {"id": self.id, "description": self.description, "location": self.location}
