"""Adapter pattern - making a turkey usable wherever a duck-like Quacker is expected."""
from abc import abstractmethod
from typing import Iterable, List

from oodnotes.domain.base.capability import Capability

# A turkey covers in five short hops what a duck covers in one flight
TURKEY_FLIGHTS_PER_DUCK_FLIGHT = 5


class Quacker(Capability):
    """Target interface the client code is written against."""

    @abstractmethod
    def quack(self) -> str: ...

    @abstractmethod
    def fly(self) -> List[str]: ...


class MallardQuacker(Quacker):
    def quack(self) -> str:
        return "Quack"

    def fly(self) -> List[str]:
        return ["I'm flying"]


class WildTurkey:
    """Adaptee with an incompatible interface."""

    def gobble(self) -> str:
        return "Gobble gobble"

    def fly_short(self) -> str:
        return "I'm flying a short distance"


class TurkeyAdapter(Quacker):
    def __init__(self, turkey: WildTurkey):
        self.turkey = turkey

    def quack(self) -> str:
        return self.turkey.gobble()

    def fly(self) -> List[str]:
        return [self.turkey.fly_short() for _ in range(TURKEY_FLIGHTS_PER_DUCK_FLIGHT)]


def exercise_quacker(quacker: Quacker) -> List[str]:
    """Client code that only knows the Quacker interface."""
    return [quacker.quack(), *quacker.fly()]


def quack_all(quackers: Iterable[Quacker]) -> List[str]:
    return [quacker.quack() for quacker in quackers]
