"""Memento pattern - editor snapshots kept by a caretaker for undo.

The editor produces immutable snapshots of its own state and can be reset
to any of them. History stores snapshots last-in-first-out. Which snapshot
undo restores is itself a pluggable policy:

* RestoreLatestPolicy pops the most recent snapshot and restores it, so
  save -> edit -> undo returns exactly the saved state.
* StepBackPolicy pops the most recent snapshot and restores the one below
  it. This treats the latest snapshot as the current state; undo with a
  single snapshot raises and leaves the history untouched.
"""
import logging
from abc import abstractmethod
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

from pydantic import Field

from oodnotes.domain.base.capability import Capability, CollaboratorSlot, Subject
from oodnotes.domain.base.value_object import ValueObject
from oodnotes.domain.core.exceptions import NothingToUndoError, ValidationError

logger = logging.getLogger(__name__)


class EditorMemento(ValueObject):
    """Opaque, immutable snapshot of an editor's state."""
    content: str
    cursor: int
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class Editor:
    """Originator."""

    def __init__(self, content: str = ""):
        self._content = content
        self._cursor = len(content)

    @property
    def content(self) -> str:
        return self._content

    @property
    def cursor(self) -> int:
        return self._cursor

    def type(self, text: str) -> None:
        self._content = self._content[:self._cursor] + text + self._content[self._cursor:]
        self._cursor += len(text)

    def move_cursor(self, position: int) -> None:
        if not 0 <= position <= len(self._content):
            raise ValidationError(f"Cursor position {position} outside 0..{len(self._content)}")
        self._cursor = position

    def delete(self, count: int = 1) -> None:
        """Delete up to count characters before the cursor."""
        if count < 0:
            raise ValidationError(f"Delete count must be non-negative, got {count}")
        start = max(0, self._cursor - count)
        self._content = self._content[:start] + self._content[self._cursor:]
        self._cursor = start

    def save(self) -> EditorMemento:
        return EditorMemento(content=self._content, cursor=self._cursor)

    def restore(self, memento: EditorMemento) -> None:
        self._content = memento.content
        self._cursor = memento.cursor


class UndoPolicy(Capability):
    @abstractmethod
    def select(self, snapshots: List[EditorMemento]) -> EditorMemento:
        """Remove entries from snapshots as needed and return the one to restore."""


class RestoreLatestPolicy(UndoPolicy):
    def select(self, snapshots: List[EditorMemento]) -> EditorMemento:
        if not snapshots:
            raise NothingToUndoError()
        return snapshots.pop()


class StepBackPolicy(UndoPolicy):
    def select(self, snapshots: List[EditorMemento]) -> EditorMemento:
        if len(snapshots) < 2:
            raise NothingToUndoError("Nothing to step back to")
        snapshots.pop()
        return snapshots[-1]


UNDO_POLICIES: Dict[str, Callable[[], UndoPolicy]] = {
    "restore_latest": RestoreLatestPolicy,
    "step_back": StepBackPolicy,
}


def create_undo_policy(name: str) -> UndoPolicy:
    factory = UNDO_POLICIES.get(name)
    if factory is None:
        raise ValidationError(f"Unknown undo policy '{name}', expected one of {sorted(UNDO_POLICIES)}")
    return factory()


class History(Subject):
    """Caretaker holding snapshots last-in-first-out."""

    undo_policy = CollaboratorSlot(UndoPolicy)

    def __init__(
        self,
        editor: Editor,
        undo_policy: Optional[UndoPolicy] = None,
        max_size: int = 0,
    ):
        if max_size < 0:
            raise ValidationError("max_size cannot be negative")
        super().__init__(undo_policy=undo_policy or RestoreLatestPolicy())
        self.editor = editor
        self.max_size = max_size
        self._snapshots: List[EditorMemento] = []

    def __len__(self) -> int:
        return len(self._snapshots)

    @property
    def snapshots(self) -> List[EditorMemento]:
        return list(self._snapshots)

    def backup(self) -> EditorMemento:
        memento = self.editor.save()
        self._snapshots.append(memento)
        if self.max_size and len(self._snapshots) > self.max_size:
            # Drop the oldest snapshot
            self._snapshots.pop(0)
        logger.debug(f"Saved snapshot ({len(self._snapshots)} in history)")
        return memento

    def undo(self) -> EditorMemento:
        memento = self.undo_policy.select(self._snapshots)
        self.editor.restore(memento)
        logger.debug(
            f"Restored snapshot via {type(self.undo_policy).__name__} "
            f"({len(self._snapshots)} left in history)"
        )
        return memento
