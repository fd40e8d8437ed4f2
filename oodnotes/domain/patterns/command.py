"""Command pattern - a remote control whose buttons hold request objects.

Each command bundles a receiver with the operation to call on it. Pressing
a button is one synchronous execute() call.
"""
from abc import abstractmethod
from typing import List, Optional, Sequence

from oodnotes.domain.base.capability import Capability
from oodnotes.domain.core.exceptions import (
    CollaboratorContractError,
    CollaboratorNotAttachedError,
    ValidationError,
)


class Command(Capability):
    @abstractmethod
    def execute(self) -> str:
        """Perform the request and return a trace of what happened."""


class Light:
    def __init__(self, location: str):
        self.location = location
        self.is_on = False

    def on(self) -> str:
        self.is_on = True
        return f"{self.location} light is on"

    def off(self) -> str:
        self.is_on = False
        return f"{self.location} light is off"


class GarageDoor:
    def __init__(self):
        self.is_open = False

    def up(self) -> str:
        self.is_open = True
        return "Garage door is open"

    def down(self) -> str:
        self.is_open = False
        return "Garage door is closed"


class LightOnCommand(Command):
    def __init__(self, light: Light):
        self.light = light

    def execute(self) -> str:
        return self.light.on()


class LightOffCommand(Command):
    def __init__(self, light: Light):
        self.light = light

    def execute(self) -> str:
        return self.light.off()


class GarageDoorOpenCommand(Command):
    def __init__(self, door: GarageDoor):
        self.door = door

    def execute(self) -> str:
        return self.door.up()


class GarageDoorCloseCommand(Command):
    def __init__(self, door: GarageDoor):
        self.door = door

    def execute(self) -> str:
        return self.door.down()


class MacroCommand(Command):
    """Runs its commands in order and joins their traces."""

    def __init__(self, commands: Sequence[Command]):
        self.commands = list(commands)

    def execute(self) -> str:
        return "; ".join(command.execute() for command in self.commands)


class RemoteControl:
    """Invoker with a fixed number of programmable slots."""

    def __init__(self, slot_count: int = 7):
        if slot_count < 1:
            raise ValidationError("Remote control needs at least one slot")
        self._slots: List[Optional[Command]] = [None] * slot_count

    @property
    def slot_count(self) -> int:
        return len(self._slots)

    def _check_slot(self, slot: int) -> None:
        if not 0 <= slot < len(self._slots):
            raise ValidationError(f"Slot {slot} out of range 0..{len(self._slots) - 1}")

    def set_command(self, slot: int, command: Optional[Command]) -> None:
        self._check_slot(slot)
        if command is not None and not isinstance(command, Command):
            raise CollaboratorContractError(f"slot {slot}", "Command", type(command).__name__)
        self._slots[slot] = command

    def press(self, slot: int) -> str:
        self._check_slot(slot)
        command = self._slots[slot]
        if command is None:
            raise CollaboratorNotAttachedError(type(self).__name__, f"slot {slot}")
        return command.execute()

    def describe(self) -> List[str]:
        return [
            f"[slot {index}] {type(command).__name__ if command else 'empty'}"
            for index, command in enumerate(self._slots)
        ]
