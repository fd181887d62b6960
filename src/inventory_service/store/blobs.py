"""Photo blob storage.

Each photo is a single file under ``<cache>/photos`` named by an opaque
generated filename. Items only keep that filename.
"""

from __future__ import annotations

from pathlib import Path
import uuid


class BlobStore:
    def __init__(self, root: str | Path = "photos") -> None:
        self.root = Path(root)
        self.root.mkdir(parents=True, exist_ok=True)

    def _path(self, name: str) -> Path | None:
        if not name or Path(name).name != name:
            return None
        return self.root / name

    def exists(self, name: str) -> bool:
        return self.get_path(name) is not None

    def put(self, content: bytes) -> str:
        name = uuid.uuid4().hex
        (self.root / name).write_bytes(content)
        return name

    def get_path(self, name: str) -> Path | None:
        path = self._path(name)
        return path if path is not None and path.is_file() else None

    def delete(self, name: str) -> None:
        path = self._path(name)
        if path is None:
            raise FileNotFoundError(f"No blob named {name!r} in {self.root}")
        path.unlink()
