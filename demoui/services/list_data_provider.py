from __future__ import annotations

import json
import logging
from typing import List, Optional

from .. import config
from ..domain.models import (
    ListItem,
    ResourceError,
    ResourceMalformed,
    ResourceNotFound,
    ResourceUnreadable,
)
from .resource_locator import ResourceLocator, default_locator

logger = logging.getLogger(__name__)


def fallback_items() -> List[ListItem]:
    """Placeholder sequence: ids 1..20 with titles "Item <id>"."""
    return [
        ListItem(id=i, title=f"{config.FALLBACK_TITLE_PREFIX}{i}")
        for i in range(1, config.FALLBACK_ITEM_COUNT + 1)
    ]


def read_resource(path: str) -> bytes:
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        raise ResourceUnreadable(f"could not read {path}: {e}") from e


def parse_items(raw: bytes) -> List[ListItem]:
    """Decode UTF-8 JSON bytes into list items. A leading BOM is skipped.

    The document must be an array of objects.
    """
    try:
        data = json.loads(raw.decode("utf-8-sig"))
    except (ValueError, RecursionError) as e:
        # ValueError covers both UnicodeDecodeError and JSONDecodeError
        raise ResourceMalformed(f"invalid JSON: {e}") from e
    if not isinstance(data, list):
        raise ResourceMalformed(f"expected a JSON array, got {type(data).__name__}")
    items: List[ListItem] = []
    for index, record in enumerate(data):
        try:
            items.append(ListItem.from_record(record))
        except ResourceMalformed as e:
            raise ResourceMalformed(f"record {index}: {e}") from e
    return items


class ListDataProvider:
    """
    Produces the items shown on the list screen.

    load() is total: any failure to locate, read or parse the resource is
    logged and replaced with the fallback sequence. A valid empty array is
    returned as an empty list.
    """

    def __init__(
        self,
        locator: Optional[ResourceLocator] = None,
        resource_name: str = config.ITEMS_RESOURCE_NAME,
    ) -> None:
        self.locator = locator if locator is not None else default_locator()
        self.resource_name = resource_name

    def load(self) -> List[ListItem]:
        try:
            items = self._load_resource()
        except ResourceNotFound:
            logger.warning(f"{self.resource_name} not found; using fallback")
            return fallback_items()
        except ResourceError as e:
            logger.warning(f"Failed to decode {self.resource_name}: {e}")
            return fallback_items()
        logger.info(f"Loaded {len(items)} item(s) from {self.resource_name}")
        return items

    def _load_resource(self) -> List[ListItem]:
        path = self.locator.locate(self.resource_name)
        if path is None:
            raise ResourceNotFound(self.resource_name)
        return parse_items(read_resource(path))
