"""Base DTO class with stable API and clean snake_case format."""
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


class BaseDTO(BaseModel):
    """
    Base class for all DTOs with stable API and clean snake_case format.

    This class provides an abstraction layer that:
    - Uses pure snake_case internally
    - Provides stable to_dict()/from_dict() API
    - Abstracts away Pydantic implementation details
    """
    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> Dict[str, Any]:
        """
        Stable public API - returns clean snake_case dictionary.

        Returns:
            Dict with snake_case keys, enums serialized to their values
        """
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BaseDTO":
        """
        Stable public API - creates instance from snake_case dictionary.

        Args:
            data: Dictionary with snake_case keys

        Returns:
            New instance of the DTO
        """
        return cls.model_validate(data)
