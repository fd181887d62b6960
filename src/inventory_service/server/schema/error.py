from pydantic.dataclasses import dataclass


@dataclass
class ErrorResponse:
    error: str
