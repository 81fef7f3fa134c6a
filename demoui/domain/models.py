from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


# --- Errors ---

class ResourceError(Exception):
    """Base class for failures while resolving the list data resource."""


class ResourceNotFound(ResourceError):
    pass


class ResourceUnreadable(ResourceError):
    pass


class ResourceMalformed(ResourceError):
    pass


# --- List Models ---

@dataclass(frozen=True)
class ListItem:
    """One row of the list screen. Order in the owning sequence is display order."""
    id: int
    title: str

    @classmethod
    def from_record(cls, record: Any) -> "ListItem":
        """Build an item from a decoded JSON object.

        Extra keys are ignored. `id` must be a JSON integer (bools are rejected
        even though they are ints in Python) and `title` a string.
        """
        if not isinstance(record, dict):
            raise ResourceMalformed(f"expected an object, got {type(record).__name__}")
        if "id" not in record or "title" not in record:
            missing = [k for k in ("id", "title") if k not in record]
            raise ResourceMalformed(f"missing field(s): {', '.join(missing)}")
        item_id = record["id"]
        title = record["title"]
        if isinstance(item_id, bool) or not isinstance(item_id, int):
            raise ResourceMalformed(f"'id' must be an integer, got {type(item_id).__name__}")
        if not isinstance(title, str):
            raise ResourceMalformed(f"'title' must be a string, got {type(title).__name__}")
        return cls(id=item_id, title=title)

    def to_record(self) -> Dict[str, Any]:
        return {"id": self.id, "title": self.title}
