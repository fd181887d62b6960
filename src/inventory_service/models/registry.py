from __future__ import annotations

from pathlib import Path
import threading

from inventory_service.errors import ItemNotFoundError, ValidationError
from inventory_service.models.item import Item
from inventory_service.store import LocalStore
from inventory_service.utils import logging

PHOTO_NOTE = "\nPhoto: {url}"


class ItemRegistry:
    """In-memory authoritative collection of inventory items.

    The collection is loaded once from the item store and written back in full
    after every mutation. Mutations hold ``self._lock`` for the whole
    read-modify-persist sequence.
    """

    def __init__(self, store: LocalStore) -> None:
        self.logger = logging.get_logger(__name__)
        self.store = store
        self._lock = threading.RLock()
        self.items: list[Item] = store.items.load()
        self.logger.info("Loaded %d item(s) from %s", len(self.items), store.items.path)

    def _find(self, item_id: str | None) -> Item | None:
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    def _require(self, item_id: str | None) -> Item:
        item = self._find(item_id)
        if item is None:
            raise ItemNotFoundError(item_id)
        return item

    def _next_id(self) -> str:
        return str(max((int(item.id) for item in self.items), default=0) + 1)

    def _persist(self) -> None:
        self.store.items.save(self.items)

    def _discard_blob(self, name: str) -> None:
        try:
            self.store.blobs.delete(name)
        except OSError as exc:
            self.logger.warning("Could not delete photo %s: %s", name, exc)

    def has_resolvable_photo(self, item: Item) -> bool:
        return item.has_photo and self.store.blobs.exists(item.photo_filename)  # type: ignore[arg-type]

    def create(self, inventory_name: str | None, description: str | None = None, photo: bytes | None = None) -> Item:
        if not inventory_name or not inventory_name.strip():
            raise ValidationError("inventory_name")
        with self._lock:
            photo_filename = self.store.blobs.put(photo) if photo is not None else None
            item = Item(
                id=self._next_id(),
                inventory_name=inventory_name,
                description=description or "",
                photo_filename=photo_filename,
            )
            self.items.append(item)
            self._persist()
        self.logger.info("Created item %s (%s)", item.id, item.inventory_name)
        return item

    def list(self) -> list[Item]:
        with self._lock:
            return list(self.items)

    def get(self, item_id: str) -> Item:
        with self._lock:
            return self._require(item_id)

    def update(self, item_id: str, inventory_name: str | None = None, description: str | None = None) -> Item:
        """Overwrite the supplied fields; ``None`` leaves a field untouched.

        The name is not re-validated, so an empty string is accepted here.
        """
        with self._lock:
            item = self._require(item_id)
            if inventory_name is not None:
                item.inventory_name = inventory_name
            if description is not None:
                item.description = description
            self._persist()
        self.logger.info("Updated item %s", item_id)
        return item

    def delete(self, item_id: str) -> None:
        with self._lock:
            item = self._require(item_id)
            self.items.remove(item)
            if item.photo_filename:
                self._discard_blob(item.photo_filename)
            self._persist()
        self.logger.info("Deleted item %s", item_id)

    def photo_path(self, item_id: str) -> Path:
        with self._lock:
            item = self._require(item_id)
            path = self.store.blobs.get_path(item.photo_filename) if item.photo_filename else None
        if path is None:
            raise ItemNotFoundError(item_id)
        return path

    def replace_photo(self, item_id: str, photo: bytes | None) -> Item:
        with self._lock:
            item = self._require(item_id)
            if photo is None:
                raise ValidationError("photo", "photo file is required")
            if item.photo_filename:
                self._discard_blob(item.photo_filename)
            item.photo_filename = self.store.blobs.put(photo)
            self._persist()
        self.logger.info("Replaced photo of item %s", item_id)
        return item

    def search(self, item_id: str | None, photo_url: str | None = None, annotate: bool = False) -> Item:
        """Look up an item by id, optionally annotating its description with ``photo_url``.

        When ``annotate`` is set and the item has a resolvable photo, the note
        ``"\\nPhoto: <photo_url>"`` is appended to the stored description and
        persisted. Repeated annotated searches append the note again.
        """
        if not item_id:
            raise ValidationError("id")
        with self._lock:
            item = self._require(item_id)
            if annotate and photo_url and self.has_resolvable_photo(item):
                item.description = item.description + PHOTO_NOTE.format(url=photo_url)
                self._persist()
                self.logger.info("Annotated item %s with its photo url", item_id)
        return item
