from typing import Any

from pydantic.dataclasses import dataclass


@dataclass
class PhotoUpdateResponse:
    id: str
    photo_url: str
    message: str = "Photo updated"

    def serialize(self) -> dict[str, Any]:
        return {"id": self.id, "photo_url": self.photo_url, "message": self.message}
