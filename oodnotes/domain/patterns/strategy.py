"""Strategy pattern - ducks with swappable quack and fly behaviors.

Behaviors are selected by value when a duck is built and can be rebound at
any time; the next call delegates to the new behavior.
"""
from abc import abstractmethod
from typing import Optional

from oodnotes.domain.base.capability import Capability, CollaboratorSlot, Subject


class QuackBehavior(Capability):
    @abstractmethod
    def quack(self) -> str:
        """Produce the duck's sound."""


class Quack(QuackBehavior):
    def quack(self) -> str:
        return "Quack!"


class Squeak(QuackBehavior):
    def quack(self) -> str:
        return "Squeak!"


class MuteQuack(QuackBehavior):
    def quack(self) -> str:
        return "<< Silence >>"


class FlyBehavior(Capability):
    @abstractmethod
    def fly(self) -> str:
        """Describe how the duck flies."""


class FlyWithWings(FlyBehavior):
    def fly(self) -> str:
        return "I'm flying!!"


class FlyNoWay(FlyBehavior):
    def fly(self) -> str:
        return "I can't fly"


class FlyRocketPowered(FlyBehavior):
    def fly(self) -> str:
        return "I'm flying with a rocket!"


class Duck(Subject):
    """A duck delegating quacking and flying to its attached behaviors."""

    quack_behavior = CollaboratorSlot(QuackBehavior)
    fly_behavior = CollaboratorSlot(FlyBehavior)

    def __init__(
        self,
        quack_behavior: Optional[QuackBehavior] = None,
        fly_behavior: Optional[FlyBehavior] = None,
    ):
        super().__init__(quack_behavior=quack_behavior, fly_behavior=fly_behavior)

    def display(self) -> str:
        return f"I'm a {type(self).__name__}"

    def swim(self) -> str:
        return "All ducks float, even decoys!"

    def perform_quack(self) -> str:
        return self.quack_behavior.quack()

    def perform_fly(self) -> str:
        return self.fly_behavior.fly()

    def set_quack_behavior(self, behavior: QuackBehavior) -> None:
        self.attach("quack_behavior", behavior)

    def set_fly_behavior(self, behavior: FlyBehavior) -> None:
        self.attach("fly_behavior", behavior)


class MallardDuck(Duck):
    def __init__(self):
        super().__init__(quack_behavior=Quack(), fly_behavior=FlyWithWings())

    def display(self) -> str:
        return "I'm a real Mallard duck"


class RubberDuck(Duck):
    def __init__(self):
        super().__init__(quack_behavior=Squeak(), fly_behavior=FlyNoWay())

    def display(self) -> str:
        return "I'm a rubber duckie"


class ModelDuck(Duck):
    def __init__(self):
        super().__init__(quack_behavior=Quack(), fly_behavior=FlyNoWay())

    def display(self) -> str:
        return "I'm a model duck"
