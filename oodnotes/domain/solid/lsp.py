"""Liskov Substitution Principle.

Penguin cannot honour Bird.fly, so code written against Bird breaks when
handed a Penguin. The compliant hierarchy narrows the contract: only
FlyingBird promises flight.
"""
from typing import Iterable, List

from oodnotes.domain.core.exceptions import UnsupportedOperationError


# Violating

class Bird:
    def __init__(self, name: str):
        self.name = name

    def fly(self) -> str:
        return f"{self.name} flies"


class Penguin(Bird):
    def fly(self) -> str:
        raise UnsupportedOperationError(type(self).__name__, "fly")


def make_birds_fly(birds: Iterable[Bird]) -> List[str]:
    return [bird.fly() for bird in birds]


# Compliant

class GoodBird:
    def __init__(self, name: str):
        self.name = name

    def eat(self) -> str:
        return f"{self.name} eats"


class FlyingBird(GoodBird):
    def fly(self) -> str:
        return f"{self.name} flies"


class Sparrow(FlyingBird):
    pass


class GoodPenguin(GoodBird):
    def swim(self) -> str:
        return f"{self.name} swims"


def make_flying_birds_fly(birds: Iterable[FlyingBird]) -> List[str]:
    return [bird.fly() for bird in birds]
