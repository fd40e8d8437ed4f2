# oodnotes/domain/core/exceptions.py
from typing import Any, List, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass


class ValidationError(DomainException):
    """Raised when domain validation fails."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class UnknownProductError(ValidationError):
    """Raised when a factory is asked for a product kind it cannot create."""
    def __init__(self, factory: str, kind: str):
        super().__init__(f"{factory} cannot create product of kind '{kind}'")
        self.factory = factory
        self.kind = kind


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []


class CollaboratorNotAttachedError(DomainException):
    """Raised when a subject delegates through a slot with no collaborator attached."""
    def __init__(self, subject_type: str, slot_name: str):
        super().__init__(
            f"{subject_type} has no collaborator attached to slot '{slot_name}'"
        )
        self.subject_type = subject_type
        self.slot_name = slot_name


class CollaboratorContractError(DomainException):
    """Raised when a collaborator does not satisfy the capability of its slot."""
    def __init__(self, slot_name: str, expected: str, actual: str):
        super().__init__(
            f"Slot '{slot_name}' requires {expected}, got {actual}"
        )
        self.slot_name = slot_name
        self.expected = expected
        self.actual = actual


class UnsupportedOperationError(DomainException):
    """Raised when a variant is asked for an operation its contract promised but it cannot do."""
    def __init__(self, subject_type: str, operation: str):
        super().__init__(f"{subject_type} does not support '{operation}'")
        self.subject_type = subject_type
        self.operation = operation


class NothingToUndoError(DomainException):
    """Raised when an undo is requested but the history cannot satisfy it."""
    def __init__(self, message: str = "Nothing to undo"):
        super().__init__(message)


class ExampleNotFoundError(DomainException):
    """Raised when a requested example is not registered."""
    def __init__(self, example_name: str):
        super().__init__(f"Example '{example_name}' not found")
        self.example_name = example_name
