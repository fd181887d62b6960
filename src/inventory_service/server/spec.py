from collections.abc import Awaitable, Callable
import re

from fastapi import FastAPI, Request, Response, status
from fastapi.responses import PlainTextResponse
from starlette.routing import compile_path

from inventory_service.server.inventory import InventoryApi
from inventory_service.utils import logging

logger = logging.get_logger(__name__)


class InventorySpec:
    """Declarative route table for the inventory API.

    Each path has an allow-list made of the methods of every endpoint
    registered on it. Requests to a known path with any other method get a
    405 before routing takes place.
    """

    def __init__(self, api: InventoryApi) -> None:
        self.api = api
        self._endpoints: list[tuple[str, Callable, list[str]]] = []
        self.add_endpoint("/register", api.register, ["POST"])
        self.add_endpoint("/inventory", api.list_items, ["GET"])
        self.add_endpoint("/inventory/{id}", api.get_item, ["GET"])
        self.add_endpoint("/inventory/{id}", api.update_item, ["PUT"])
        self.add_endpoint("/inventory/{id}", api.delete_item, ["DELETE"])
        self.add_endpoint("/inventory/{id}/photo", api.get_photo, ["GET"])
        self.add_endpoint("/inventory/{id}/photo", api.update_photo, ["PUT"])
        self.add_endpoint("/search", api.search, ["GET"])
        self.add_endpoint("/search", api.search, ["POST"])
        self.add_endpoint("/RegisterForm.html", api.register_form, ["GET"])
        self.add_endpoint("/SearchForm.html", api.search_form, ["GET"])

    def add_endpoint(self, path: str, endpoint: Callable, methods: list[str]) -> None:
        """Register an endpoint in the spec."""
        self._endpoints.append((path, endpoint, [m.upper() for m in methods]))

    @property
    def endpoints(self) -> list[tuple[str, Callable, list[str]]]:
        return self._endpoints.copy()

    def allowed_methods(self) -> dict[str, set[str]]:
        allowed: dict[str, set[str]] = {}
        for path, _, methods in self._endpoints:
            allowed.setdefault(path, set()).update(methods)
        return allowed

    def setup(self, app: FastAPI) -> None:
        for path, endpoint, methods in self._endpoints:
            app.add_api_route(path, endpoint, methods=methods, response_model=None)

        guards: list[tuple[re.Pattern[str], set[str]]] = [
            (compile_path(path)[0], methods) for path, methods in self.allowed_methods().items()
        ]

        @app.middleware("http")
        async def method_guard(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
            for regex, methods in guards:
                if regex.match(request.url.path) and request.method not in methods:
                    logger.debug("Rejecting %s %s", request.method, request.url.path)
                    return PlainTextResponse("Method not allowed", status_code=status.HTTP_405_METHOD_NOT_ALLOWED)
            return await call_next(request)

        logger.info("Registered %d endpoint(s) on %d path(s)", len(self._endpoints), len(guards))
