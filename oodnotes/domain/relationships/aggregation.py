"""Aggregation - a whole that groups parts created elsewhere.

The parts outlive the whole: removing a professor from a department, or
discarding the department, leaves the professor intact.
"""
from typing import List, Optional

from oodnotes.domain.core.exceptions import ValidationError


class Professor:
    def __init__(self, name: str, subject: str):
        self.name = name
        self.subject = subject

    def lecture(self) -> str:
        return f"{self.name} lectures on {self.subject}"


class Department:
    """Department holding references to existing professors."""

    def __init__(self, name: str, professors: Optional[List[Professor]] = None):
        self.name = name
        self._professors: List[Professor] = list(professors or [])

    @property
    def professors(self) -> List[Professor]:
        return list(self._professors)

    def add_professor(self, professor: Professor) -> None:
        self._professors.append(professor)

    def remove_professor(self, professor: Professor) -> Professor:
        if professor not in self._professors:
            raise ValidationError(f"{professor.name} is not a member of {self.name}")
        self._professors.remove(professor)
        return professor

    def lectures(self) -> List[str]:
        return [professor.lecture() for professor in self._professors]
