"""Open/Closed Principle.

ShapeAreaCalculator must be edited for every new shape. With a Shape
capability, new shapes are added without touching total_area.
"""
import math
from abc import abstractmethod
from typing import Any, Dict, Iterable

from oodnotes.domain.base.capability import Capability
from oodnotes.domain.core.exceptions import ValidationError


# Violating

class ShapeAreaCalculator:
    def area(self, shape: Dict[str, Any]) -> float:
        kind = shape.get("kind")
        if kind == "rectangle":
            return shape["width"] * shape["height"]
        elif kind == "circle":
            return math.pi * shape["radius"] ** 2
        raise ValidationError(f"Unsupported shape kind: {kind}")

    def total_area(self, shapes: Iterable[Dict[str, Any]]) -> float:
        return sum(self.area(shape) for shape in shapes)


# Compliant

class Shape(Capability):
    @abstractmethod
    def area(self) -> float:
        """Area of the shape."""


class Rectangle(Shape):
    def __init__(self, width: float, height: float):
        self.width = width
        self.height = height

    def area(self) -> float:
        return self.width * self.height


class Circle(Shape):
    def __init__(self, radius: float):
        self.radius = radius

    def area(self) -> float:
        return math.pi * self.radius ** 2


class Triangle(Shape):
    def __init__(self, base: float, height: float):
        self.base = base
        self.height = height

    def area(self) -> float:
        return 0.5 * self.base * self.height


def total_area(shapes: Iterable[Shape]) -> float:
    return sum(shape.area() for shape in shapes)
