"""Base value object - immutable, compared by value."""
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Base class for immutable domain values."""
    model_config = ConfigDict(
        frozen=True,  # Value objects never change after creation
        arbitrary_types_allowed=True,
    )

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()
