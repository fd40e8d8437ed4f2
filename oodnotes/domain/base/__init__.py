"""Domain base - the pluggable-behavior object model shared by every example."""
from .capability import Capability, CollaboratorSlot, Subject
from .value_object import ValueObject

__all__ = ["Capability", "CollaboratorSlot", "Subject", "ValueObject"]
