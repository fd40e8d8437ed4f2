"""Decorator pattern - beverages wrapped by condiments that add to the cost.

Costs are integer cents. Each condiment holds the beverage it wraps in a
collaborator slot, so wrappers stack to any depth.
"""
from abc import abstractmethod

from oodnotes.domain.base.capability import Capability, CollaboratorSlot, Subject
from oodnotes.domain.core.exceptions import ValidationError


class Beverage(Capability):
    @abstractmethod
    def description(self) -> str: ...

    @abstractmethod
    def cost(self) -> int: ...


class PlainBeverage(Beverage):
    def __init__(self, name: str, cost: int):
        if cost < 0:
            raise ValidationError("Beverage cost cannot be negative")
        self._name = name
        self._cost = cost

    def description(self) -> str:
        return self._name

    def cost(self) -> int:
        return self._cost


class Espresso(PlainBeverage):
    def __init__(self):
        super().__init__("Espresso", 199)


class HouseBlend(PlainBeverage):
    def __init__(self):
        super().__init__("House Blend Coffee", 89)


class CondimentDecorator(Subject, Beverage):
    """A beverage that wraps another beverage and adds a fixed amount."""

    beverage = CollaboratorSlot(Beverage)
    name = "Condiment"
    amount = 0

    def __init__(self, beverage: Beverage):
        super().__init__(beverage=beverage)

    def description(self) -> str:
        return f"{self.beverage.description()}, {self.name}"

    def cost(self) -> int:
        return self.beverage.cost() + self.amount


class Milk(CondimentDecorator):
    name = "Milk"
    amount = 10


class Mocha(CondimentDecorator):
    name = "Mocha"
    amount = 20


class Whip(CondimentDecorator):
    name = "Whip"
    amount = 10


class Surcharge(CondimentDecorator):
    def __init__(self, beverage: Beverage, name: str, amount: int):
        if amount < 0:
            raise ValidationError("Surcharge amount cannot be negative")
        super().__init__(beverage)
        self.name = name
        self.amount = amount
