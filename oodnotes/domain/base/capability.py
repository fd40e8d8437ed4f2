"""Pluggable-behavior object model.

A Capability is an abstract operation contract. Concrete collaborators
implement one capability each and are freely substitutable. A Subject owns
zero or more CollaboratorSlot references, one per capability it depends on,
and delegates part of its behavior to whatever collaborator is attached at
call time.

Slots are rebindable at any moment; there are no transition rules. Reading
a slot that has nothing attached raises CollaboratorNotAttachedError instead
of failing somewhere inside the delegating operation.
"""
import logging
from abc import ABC
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, overload

from oodnotes.domain.core.exceptions import (
    CollaboratorContractError,
    CollaboratorNotAttachedError,
    ValidationError,
)

C = TypeVar("C")
logger = logging.getLogger(__name__)


class Capability(ABC):
    """Base class for all capability contracts. Stateless by convention."""


class CollaboratorSlot(Generic[C]):
    """
    Descriptor declaring a replaceable collaborator on a Subject.

    Example:
        class Duck(Subject):
            quack_behavior = CollaboratorSlot(QuackBehavior)

    Assigning None clears the slot.
    """

    def __init__(self, capability: Type[C], doc: Optional[str] = None):
        self.capability = capability
        self.name = ""
        self.storage_name = ""
        self.__doc__ = doc or f"Collaborator implementing {capability.__name__}"

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        self.storage_name = f"_slot_{name}"

    @overload
    def __get__(self, instance: None, owner: type) -> "CollaboratorSlot[C]": ...

    @overload
    def __get__(self, instance: object, owner: type) -> C: ...

    def __get__(self, instance, owner):
        if instance is None:
            return self
        collaborator = instance.__dict__.get(self.storage_name)
        if collaborator is None:
            raise CollaboratorNotAttachedError(type(instance).__name__, self.name)
        return collaborator

    def __set__(self, instance: object, value: Optional[C]) -> None:
        if value is not None and not isinstance(value, self.capability):
            raise CollaboratorContractError(
                self.name, self.capability.__name__, type(value).__name__
            )
        instance.__dict__[self.storage_name] = value

    def peek(self, instance: object) -> Optional[C]:
        """Return the attached collaborator or None, without raising."""
        return instance.__dict__.get(self.storage_name)


class Subject:
    """Base class for entities that delegate behavior to attached collaborators."""

    def __init__(self, **collaborators: Any):
        for slot_name, collaborator in collaborators.items():
            self._slot(slot_name)
            setattr(self, slot_name, collaborator)

    @classmethod
    def slot_names(cls) -> List[str]:
        """Declared slot names, base classes first, in declaration order."""
        names: List[str] = []
        for klass in reversed(cls.__mro__):
            for attr, value in vars(klass).items():
                if isinstance(value, CollaboratorSlot) and attr not in names:
                    names.append(attr)
        return names

    @classmethod
    def _slot(cls, slot_name: str) -> CollaboratorSlot:
        slot = getattr(cls, slot_name, None)
        if not isinstance(slot, CollaboratorSlot):
            raise ValidationError(f"{cls.__name__} has no collaborator slot '{slot_name}'")
        return slot

    def attach(self, slot_name: str, collaborator: Any) -> None:
        """Attach or replace the collaborator bound to a slot."""
        slot = self._slot(slot_name)
        previous = slot.peek(self)
        setattr(self, slot_name, collaborator)
        logger.debug(
            f"{type(self).__name__}.{slot_name}: "
            f"{type(previous).__name__ if previous is not None else 'unset'} -> "
            f"{type(collaborator).__name__ if collaborator is not None else 'unset'}"
        )

    def detach(self, slot_name: str) -> None:
        """Clear a slot; delegating through it afterwards raises."""
        self.attach(slot_name, None)

    def is_attached(self, slot_name: str) -> bool:
        return self._slot(slot_name).peek(self) is not None

    def collaborators(self) -> Dict[str, Any]:
        """Currently attached collaborators keyed by slot name."""
        attached = {}
        for name in self.slot_names():
            collaborator = self._slot(name).peek(self)
            if collaborator is not None:
                attached[name] = collaborator
        return attached
