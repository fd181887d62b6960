"""Integration test fixtures.

Builds an isolated inventory app on a temporary cache directory and provides
a ``TestClient`` for it.
"""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

from fastapi import FastAPI
from fastapi.testclient import TestClient
import pytest

from inventory_service.server.api import create_app

JPEG = b"\xff\xd8\xff\xe0fake-jpeg\xff\xd9"


@pytest.fixture
def jpeg() -> bytes:
    return JPEG


@pytest.fixture
def cache_dir(tmp_path: Path) -> Path:
    return tmp_path / "cache"


@pytest.fixture
def app(cache_dir: Path) -> FastAPI:
    return create_app(cache_dir)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c


@pytest.fixture
def photo_item(client: TestClient) -> dict:
    """Register an item with a photo and return its DTO."""
    r = client.post(
        "/register",
        data={"inventory_name": "Camera", "description": "mirrorless"},
        files={"photo": ("camera.jpg", JPEG, "image/jpeg")},
    )
    assert r.status_code == 201
    return r.json()
