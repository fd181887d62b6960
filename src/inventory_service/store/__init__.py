"""Local on-disk storage primitives.

This package groups together the local filesystem stores used by the registry:
- `BlobStore`: photo files addressed by generated filename.
- `ItemStore`: the JSON document holding the full item collection.
- `LocalStore`: a small façade that composes both under one cache directory.
"""

from inventory_service.store.blobs import BlobStore
from inventory_service.store.items import ItemStore
from inventory_service.store.local import LocalStore

__all__ = ["BlobStore", "ItemStore", "LocalStore"]
