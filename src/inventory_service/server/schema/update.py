from pydantic.dataclasses import dataclass


@dataclass
class UpdateRequest:
    # None means the field was not supplied.
    inventory_name: str | None = None
    description: str | None = None
