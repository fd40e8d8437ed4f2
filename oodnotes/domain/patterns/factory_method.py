"""Factory Method pattern - pizza stores that decide which pizza to create.

PizzaStore.order_pizza fixes the ordering workflow; each regional store
overrides create_pizza to pick the concrete product.
"""
from abc import ABC, abstractmethod
from typing import Dict, List, Tuple, Type

from oodnotes.domain.core.exceptions import UnknownProductError


class Pizza:
    name = "Unknown Pizza"
    dough = "Regular dough"
    sauce = "Tomato sauce"
    toppings: Tuple[str, ...] = ()

    def __init__(self):
        self.steps: List[str] = []

    def prepare(self) -> None:
        self.steps.append(f"Preparing {self.name}")
        self.steps.append(f"Tossing {self.dough}")
        self.steps.append(f"Adding {self.sauce}")
        for topping in self.toppings:
            self.steps.append(f"Adding topping: {topping}")

    def bake(self) -> None:
        self.steps.append("Bake for 25 minutes at 350")

    def cut(self) -> None:
        self.steps.append("Cutting the pizza into diagonal slices")

    def box(self) -> None:
        self.steps.append("Place pizza in official PizzaStore box")


class NYStyleCheesePizza(Pizza):
    name = "NY Style Sauce and Cheese Pizza"
    dough = "Thin Crust Dough"
    sauce = "Marinara Sauce"
    toppings = ("Grated Reggiano Cheese",)


class NYStyleVeggiePizza(Pizza):
    name = "NY Style Veggie Pizza"
    dough = "Thin Crust Dough"
    sauce = "Marinara Sauce"
    toppings = ("Grated Reggiano Cheese", "Garlic", "Onion", "Mushrooms")


class ChicagoStyleCheesePizza(Pizza):
    name = "Chicago Style Deep Dish Cheese Pizza"
    dough = "Extra Thick Crust Dough"
    sauce = "Plum Tomato Sauce"
    toppings = ("Shredded Mozzarella Cheese",)

    def cut(self) -> None:
        self.steps.append("Cutting the pizza into square slices")


class ChicagoStyleVeggiePizza(ChicagoStyleCheesePizza):
    name = "Chicago Deep Dish Veggie Pizza"
    toppings = ("Shredded Mozzarella Cheese", "Black Olives", "Spinach", "Eggplant")


class PizzaStore(ABC):
    def order_pizza(self, kind: str) -> Pizza:
        pizza = self.create_pizza(kind)
        pizza.prepare()
        pizza.bake()
        pizza.cut()
        pizza.box()
        return pizza

    @abstractmethod
    def create_pizza(self, kind: str) -> Pizza:
        """Create the concrete pizza for a kind such as "cheese"."""


class _MenuPizzaStore(PizzaStore):
    menu: Dict[str, Type[Pizza]] = {}

    def create_pizza(self, kind: str) -> Pizza:
        pizza_class = self.menu.get(kind)
        if pizza_class is None:
            raise UnknownProductError(type(self).__name__, kind)
        return pizza_class()


class NYPizzaStore(_MenuPizzaStore):
    menu = {"cheese": NYStyleCheesePizza, "veggie": NYStyleVeggiePizza}


class ChicagoPizzaStore(_MenuPizzaStore):
    menu = {"cheese": ChicagoStyleCheesePizza, "veggie": ChicagoStyleVeggiePizza}
