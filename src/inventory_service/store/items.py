from __future__ import annotations

import json
from pathlib import Path

from inventory_service.errors import PersistenceError
from inventory_service.models.item import Item
from inventory_service.utils import logging

logger = logging.get_logger(__name__)


class ItemStore:
    """Mirror of the item collection as a single JSON document."""

    def __init__(self, path: str | Path = "inventory.json") -> None:
        self.path = Path(path)

    def load(self) -> list[Item]:
        """Read every item from disk.

        An unreadable document, or one whose top level is not a list, yields an
        empty collection. Individual records that cannot be decoded are skipped.
        """
        if not self.path.is_file():
            logger.debug("No inventory document at %s, starting empty", self.path)
            return []
        try:
            records = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable inventory document %s: %s", self.path, exc)
            return []
        if not isinstance(records, list):
            logger.warning("Ignoring inventory document %s: top level is not a list", self.path)
            return []

        items: list[Item] = []
        for index, record in enumerate(records):
            try:
                items.append(Item.decode(record))
            except (ValueError, KeyError, TypeError) as exc:
                logger.warning("Skipping inventory record #%d in %s: %s", index, self.path, exc)
        return items

    def save(self, items: list[Item]) -> None:
        try:
            payload = json.dumps([item.encode() for item in items], indent=2)
            self.path.write_text(payload, encoding="utf-8")
        except (OSError, TypeError, ValueError) as exc:
            raise PersistenceError(str(self.path), exc) from exc
