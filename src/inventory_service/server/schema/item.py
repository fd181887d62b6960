from typing import Any

from pydantic.dataclasses import dataclass

from inventory_service.models.item import Item


@dataclass
class ItemResponse:
    id: str
    inventory_name: str
    description: str
    photo_url: str | None = None

    @classmethod
    def from_item(cls, item: Item, photo_url: str | None) -> "ItemResponse":
        return cls(
            id=item.id,
            inventory_name=item.inventory_name,
            description=item.description,
            photo_url=photo_url,
        )

    def serialize(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "inventory_name": self.inventory_name,
            "description": self.description,
            "photo_url": self.photo_url,
        }
