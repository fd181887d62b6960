from __future__ import annotations

from pathlib import Path

from inventory_service.store.blobs import BlobStore
from inventory_service.store.items import ItemStore

DB_FILENAME = "inventory.json"
PHOTOS_DIRNAME = "photos"


class LocalStore:
    """Local filesystem-backed storage rooted at the cache directory.

    Composes the item document and the photo blobs so the registry only has
    to wire up a single dependency.
    """

    def __init__(
        self,
        cache_dir: str | Path = "cache",
        *,
        db_file: str | Path | None = None,
        photos_dir: str | Path | None = None,
    ) -> None:
        self.root = Path(cache_dir).resolve()
        self.root.mkdir(parents=True, exist_ok=True)
        self._items = ItemStore(Path(db_file).resolve() if db_file else self.root / DB_FILENAME)
        self._blobs = BlobStore(root=Path(photos_dir).resolve() if photos_dir else self.root / PHOTOS_DIRNAME)

    @property
    def items(self) -> ItemStore:
        return self._items

    @property
    def blobs(self) -> BlobStore:
        return self._blobs
