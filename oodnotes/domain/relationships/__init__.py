"""Class relationships: association, aggregation, composition and inheritance."""
from .aggregation import Department, Professor
from .association import Student, Teacher
from .composition import House, Room
from .inheritance import Animal, Cat, Dog

__all__ = [
    "Animal",
    "Cat",
    "Department",
    "Dog",
    "House",
    "Professor",
    "Room",
    "Student",
    "Teacher",
]
