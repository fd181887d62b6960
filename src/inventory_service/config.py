"""Runtime configuration for the inventory service."""

import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from pydantic.dataclasses import dataclass

from inventory_service.store.local import DB_FILENAME, PHOTOS_DIRNAME

DEFAULT_HOST = "0.0.0.0"  # noqa: S104
DEFAULT_PORT = 3000
DEFAULT_CACHE_DIR = "cache"


@dataclass
class Settings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    cache_dir: Path = Path(DEFAULT_CACHE_DIR)
    log_level: str = "info"

    @property
    def db_file(self) -> Path:
        return self.cache_dir / DB_FILENAME

    @property
    def photos_dir(self) -> Path:
        return self.cache_dir / PHOTOS_DIRNAME

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}/"

    @classmethod
    def from_env(cls) -> "Settings":
        """Read settings from the environment, after loading a ``.env`` file if present.

        Recognised variables: ``INVENTORY_HOST``, ``INVENTORY_PORT``,
        ``INVENTORY_CACHE`` and ``LOG_LEVEL``.
        """
        load_dotenv(find_dotenv(usecwd=True))
        return cls(
            host=os.environ.get("INVENTORY_HOST", DEFAULT_HOST),
            port=int(os.environ.get("INVENTORY_PORT", DEFAULT_PORT)),
            cache_dir=Path(os.environ.get("INVENTORY_CACHE", DEFAULT_CACHE_DIR)),
            log_level=os.environ.get("LOG_LEVEL", "info"),
        )
