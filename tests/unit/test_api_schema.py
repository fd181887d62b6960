import pydantic
import pytest

from inventory_service.models.item import Item
from inventory_service.server.schema.delete import DeleteResponse
from inventory_service.server.schema.error import ErrorResponse
from inventory_service.server.schema.item import ItemResponse
from inventory_service.server.schema.photo import PhotoUpdateResponse
from inventory_service.server.schema.search import SearchRequest
from inventory_service.server.schema.update import UpdateRequest


def test_item_response_from_item() -> None:
    item = Item(id="1", inventory_name="Widget", photo_filename="f00")
    dto = ItemResponse.from_item(item, "http://host/inventory/1/photo")
    assert dto.serialize() == {
        "id": "1",
        "inventory_name": "Widget",
        "description": "",
        "photo_url": "http://host/inventory/1/photo",
    }


def test_item_response_without_photo() -> None:
    dto = ItemResponse.from_item(Item(id="1", inventory_name="Widget"), None)
    assert dto.serialize()["photo_url"] is None


def test_photo_update_response() -> None:
    p = PhotoUpdateResponse("1", "http://host/inventory/1/photo")
    assert p.serialize() == {"id": "1", "photo_url": "http://host/inventory/1/photo", "message": "Photo updated"}


def test_delete_response() -> None:
    assert DeleteResponse().message == "Deleted"


def test_error_response() -> None:
    assert ErrorResponse("Not found").error == "Not found"


def test_update_request_defaults_to_unset() -> None:
    u = UpdateRequest(description="d")
    assert u.inventory_name is None
    assert u.description == "d"


def test_update_request_rejects_non_strings() -> None:
    with pytest.raises(pydantic.ValidationError):
        UpdateRequest(inventory_name=5)  # type: ignore[arg-type]


@pytest.mark.parametrize(("flag", "expected"), [(None, False), ("", False), ("on", True), ("1", True)])
def test_search_request_annotate(flag: str | None, expected: bool) -> None:
    assert SearchRequest(id="1", has_photo=flag).annotate is expected
