from pydantic.dataclasses import dataclass


@dataclass
class DeleteResponse:
    message: str = "Deleted"
