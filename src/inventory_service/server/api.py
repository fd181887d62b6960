from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from inventory_service.__about__ import __version__
from inventory_service.config import Settings
from inventory_service.errors import PersistenceError
from inventory_service.models.registry import ItemRegistry
from inventory_service.server.inventory import InventoryApi, error_response, not_found_text
from inventory_service.server.spec import InventorySpec
from inventory_service.store import LocalStore
from inventory_service.utils import logging

logger = logging.get_logger(__name__)


async def _persistence_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Inventory could not be saved while handling %s %s: %s", request.method, request.url.path, exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to persist inventory")


async def _http_error_handler(request: Request, exc: Exception) -> Response:
    if isinstance(exc, StarletteHTTPException) and exc.status_code == status.HTTP_404_NOT_FOUND:
        return not_found_text()
    return await http_exception_handler(request, exc)  # type: ignore[arg-type]


async def _request_validation_handler(request: Request, exc: Exception) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, "Malformed request")


def create_app(settings: Settings | str | Path) -> FastAPI:
    """Build the inventory service application.

    ``settings`` may be a full :class:`Settings` or just the cache directory.
    Every call creates its own stores and registry.
    """
    if not isinstance(settings, Settings):
        settings = Settings(cache_dir=Path(settings))

    store = LocalStore(settings.cache_dir, db_file=settings.db_file, photos_dir=settings.photos_dir)
    registry = ItemRegistry(store)
    api = InventoryApi(registry)

    app = FastAPI(
        title="Inventory Service API",
        version=__version__,
        description="Simple inventory service: register, list, update, delete and search items with photos.",
    )
    app.state.registry = registry

    InventorySpec(api).setup(app)
    app.add_exception_handler(PersistenceError, _persistence_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    logger.info("Inventory Service API ready (cache: %s)", store.root)
    return app
