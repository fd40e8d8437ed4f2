"""Association - two independent objects that know about each other.

Neither side owns the other; both are created and destroyed on their own.
"""
from typing import List


class Student:
    def __init__(self, name: str):
        self.name = name

    def __repr__(self) -> str:
        return f"Student({self.name!r})"


class Teacher:
    """A teacher linked to students it does not own."""

    def __init__(self, name: str):
        self.name = name
        self._students: List[Student] = []

    @property
    def students(self) -> List[Student]:
        return list(self._students)

    def add_student(self, student: Student) -> None:
        if student not in self._students:
            self._students.append(student)

    def remove_student(self, student: Student) -> None:
        if student in self._students:
            self._students.remove(student)

    def teach(self) -> List[str]:
        return [f"{self.name} teaches {student.name}" for student in self._students]
