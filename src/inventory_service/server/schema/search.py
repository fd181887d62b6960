from pydantic.dataclasses import dataclass


@dataclass
class SearchRequest:
    id: str | None = None
    has_photo: str | None = None

    @property
    def annotate(self) -> bool:
        return bool(self.has_photo)
