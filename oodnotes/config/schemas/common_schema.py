"""Common configuration schemas shared by the examples and the CLI."""

from enum import Enum

from pydantic import BaseModel, Field


class UndoPolicyType(str, Enum):
    """Undo policy selection for the memento caretaker."""
    RESTORE_LATEST = "restore_latest"
    STEP_BACK = "step_back"


class OutputFormat(str, Enum):
    """Output format enumeration."""
    JSON = "json"
    YAML = "yaml"
    TABLE = "table"
    LIST = "list"


class MementoConfig(BaseModel):
    """Memento caretaker configuration."""

    undo_policy: UndoPolicyType = Field(
        UndoPolicyType.RESTORE_LATEST, description="How History.undo picks the snapshot to restore"
    )
    max_history: int = Field(0, ge=0, description="Maximum snapshots kept, 0 for unbounded")


class OutputConfig(BaseModel):
    """CLI output configuration."""

    format: OutputFormat = Field(OutputFormat.JSON, description="Default output format")
