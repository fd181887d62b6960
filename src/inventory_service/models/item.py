from typing import Any

from pydantic.dataclasses import dataclass

# Key used for the photo filename in inventory.json; the public DTO exposes a derived photo_url instead.
PHOTO_FIELD = "photoFilename"


def _text(value: Any) -> str:
    """Coerce a scalar document value to text; null becomes the empty string."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str | int | float):
        return str(value)
    raise ValueError(f"Expected a scalar, got {type(value).__name__}")


@dataclass
class Item:
    id: str
    inventory_name: str
    description: str = ""
    photo_filename: str | None = None

    @property
    def has_photo(self) -> bool:
        return bool(self.photo_filename)

    def encode(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "inventory_name": self.inventory_name,
            "description": self.description,
            PHOTO_FIELD: self.photo_filename,
        }

    @classmethod
    def decode(cls, record: dict[str, Any]) -> "Item":
        item_id = str(record["id"])
        if not item_id.isdigit():
            raise ValueError(f"Invalid item id: {item_id!r}")
        return cls(
            id=item_id,
            inventory_name=_text(record["inventory_name"]),
            description=_text(record.get("description")),
            photo_filename=record.get(PHOTO_FIELD),
        )
