from dataclasses import asdict
import json
from pathlib import Path
from typing import Any

from fastapi import Request, status
from fastapi.responses import FileResponse, JSONResponse, PlainTextResponse
from pydantic import ValidationError as SchemaValidationError
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile

from inventory_service.errors import ItemNotFoundError, ValidationError
from inventory_service.models.item import Item
from inventory_service.models.registry import ItemRegistry
from inventory_service.server.schema.delete import DeleteResponse
from inventory_service.server.schema.error import ErrorResponse
from inventory_service.server.schema.item import ItemResponse
from inventory_service.server.schema.photo import PhotoUpdateResponse
from inventory_service.server.schema.search import SearchRequest
from inventory_service.server.schema.update import UpdateRequest
from inventory_service.utils import logging

STATIC_DIR = Path(__file__).parent / "static"
HTML_MEDIA_TYPE = "text/html; charset=utf-8"
PHOTO_MEDIA_TYPE = "image/jpeg"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(asdict(ErrorResponse(error=message)), status_code=status_code)


def not_found_text() -> PlainTextResponse:
    return PlainTextResponse("Not found", status_code=status.HTTP_404_NOT_FOUND)


async def _read_photo(photo: Any) -> bytes | None:
    # A plain text part is not a file; browsers also send an unnamed empty part when no file was picked.
    if not isinstance(photo, UploadFile) or not photo.filename:
        return None
    return await photo.read()


def _text_field(fields: Any, name: str) -> str | None:
    value = fields.get(name)
    return value if isinstance(value, str) else None


class InventoryApi:
    """Inventory Web API handlers backed by a single :class:`ItemRegistry`."""

    def __init__(self, registry: ItemRegistry) -> None:
        self.logger = logging.get_logger(__name__)
        self.registry = registry

    def photo_url(self, request: Request, item_id: str) -> str:
        host = request.headers.get("host") or request.url.netloc
        return f"{request.url.scheme}://{host}/inventory/{item_id}/photo"

    def _item_dto(self, request: Request, item: Item) -> dict[str, Any]:
        url = self.photo_url(request, item.id) if self.registry.has_resolvable_photo(item) else None
        return ItemResponse.from_item(item, url).serialize()

    async def register(self, request: Request) -> JSONResponse:
        """Register a new inventory item from multipart fields ``inventory_name``, ``description`` and ``photo``."""
        fields = await self._form_or_json(request)
        photo = await _read_photo(fields.get("photo"))
        try:
            item = await run_in_threadpool(
                self.registry.create,
                _text_field(fields, "inventory_name"),
                _text_field(fields, "description"),
                photo,
            )
        except ValidationError as exc:
            return error_response(status.HTTP_400_BAD_REQUEST, str(exc))
        return JSONResponse(self._item_dto(request, item), status_code=status.HTTP_201_CREATED)

    def list_items(self, request: Request) -> JSONResponse:
        """Get all inventory items."""
        return JSONResponse([self._item_dto(request, item) for item in self.registry.list()])

    def get_item(self, request: Request, id: str) -> JSONResponse:
        """Get inventory item by id."""
        try:
            item = self.registry.get(id)
        except ItemNotFoundError as exc:
            return error_response(status.HTTP_404_NOT_FOUND, str(exc))
        return JSONResponse(self._item_dto(request, item))

    async def update_item(self, request: Request, id: str) -> JSONResponse:
        """Update inventory item name and/or description."""
        try:
            self.registry.get(id)
        except ItemNotFoundError as exc:
            return error_response(status.HTTP_404_NOT_FOUND, str(exc))

        body = await self._json_body(request)
        try:
            data = UpdateRequest(inventory_name=body.get("inventory_name"), description=body.get("description"))
        except SchemaValidationError:
            return error_response(status.HTTP_400_BAD_REQUEST, "inventory_name and description must be strings")

        try:
            item = await run_in_threadpool(
                self.registry.update, id, inventory_name=data.inventory_name, description=data.description
            )
        except ItemNotFoundError as exc:
            return error_response(status.HTTP_404_NOT_FOUND, str(exc))
        return JSONResponse(self._item_dto(request, item))

    def delete_item(self, request: Request, id: str) -> JSONResponse:
        """Delete inventory item by id."""
        try:
            self.registry.delete(id)
        except ItemNotFoundError as exc:
            return error_response(status.HTTP_404_NOT_FOUND, str(exc))
        return JSONResponse(asdict(DeleteResponse()))

    def get_photo(self, request: Request, id: str) -> FileResponse | PlainTextResponse:
        """Get inventory item photo."""
        try:
            path = self.registry.photo_path(id)
        except ItemNotFoundError:
            return not_found_text()
        return FileResponse(path, media_type=PHOTO_MEDIA_TYPE)

    async def update_photo(self, request: Request, id: str) -> JSONResponse:
        """Replace inventory item photo from the multipart field ``photo``."""
        fields = await self._form_or_json(request)
        photo = await _read_photo(fields.get("photo"))
        try:
            item = await run_in_threadpool(self.registry.replace_photo, id, photo)
        except ItemNotFoundError as exc:
            return error_response(status.HTTP_404_NOT_FOUND, str(exc))
        except ValidationError as exc:
            return error_response(status.HTTP_400_BAD_REQUEST, str(exc))
        return JSONResponse(PhotoUpdateResponse(id=item.id, photo_url=self.photo_url(request, item.id)).serialize())

    async def search(self, request: Request) -> JSONResponse:
        """Search inventory item by id.

        GET reads ``id``/``has_photo`` from the query string, POST from the
        submitted form (or JSON) body. With ``has_photo`` set and a photo on
        file, the photo URL is appended to the item's stored description.
        """
        if request.method == "POST":
            fields = await self._form_or_json(request)
        else:
            fields = request.query_params
        data = SearchRequest(id=_text_field(fields, "id"), has_photo=_text_field(fields, "has_photo"))

        try:
            item = await run_in_threadpool(
                self.registry.search, data.id, photo_url=self.photo_url(request, data.id or ""), annotate=data.annotate
            )
        except ValidationError as exc:
            return error_response(status.HTTP_400_BAD_REQUEST, str(exc))
        except ItemNotFoundError as exc:
            return error_response(status.HTTP_404_NOT_FOUND, str(exc))
        return JSONResponse(self._item_dto(request, item))

    def register_form(self, request: Request) -> FileResponse:
        """HTML form for registering an item."""
        return FileResponse(STATIC_DIR / "RegisterForm.html", media_type=HTML_MEDIA_TYPE)

    def search_form(self, request: Request) -> FileResponse:
        """HTML form for searching an item."""
        return FileResponse(STATIC_DIR / "SearchForm.html", media_type=HTML_MEDIA_TYPE)

    @staticmethod
    async def _json_body(request: Request) -> dict[str, Any]:
        """Parse the request body as a JSON object; anything else counts as an empty object."""
        raw = await request.body()
        if not raw:
            return {}
        try:
            body = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError):
            return {}
        return body if isinstance(body, dict) else {}

    async def _form_or_json(self, request: Request) -> Any:
        if request.headers.get("content-type", "").startswith("application/json"):
            return await self._json_body(request)
        return await request.form()
