"""Interface Segregation Principle.

The fat Worker contract forces Robot to implement eat(). Splitting it into
Workable and Eatable lets each class depend only on what it uses.
"""
from abc import abstractmethod

from oodnotes.domain.base.capability import Capability
from oodnotes.domain.core.exceptions import UnsupportedOperationError


# Violating

class Worker(Capability):
    @abstractmethod
    def work(self) -> str: ...

    @abstractmethod
    def eat(self) -> str: ...


class HumanWorker(Worker):
    def work(self) -> str:
        return "Human works"

    def eat(self) -> str:
        return "Human eats lunch"


class RobotWorker(Worker):
    def work(self) -> str:
        return "Robot works"

    def eat(self) -> str:
        raise UnsupportedOperationError(type(self).__name__, "eat")


# Compliant

class Workable(Capability):
    @abstractmethod
    def work(self) -> str: ...


class Eatable(Capability):
    @abstractmethod
    def eat(self) -> str: ...


class Human(Workable, Eatable):
    def work(self) -> str:
        return "Human works"

    def eat(self) -> str:
        return "Human eats lunch"


class Robot(Workable):
    def work(self) -> str:
        return "Robot works"
