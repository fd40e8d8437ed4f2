"""Template Method pattern - a fixed recipe with overridable steps and a hook."""
from abc import ABC, abstractmethod
from typing import List


class CaffeineBeverageRecipe(ABC):
    def prepare_recipe(self) -> List[str]:
        """The template method; subclasses never override it."""
        steps = [self.boil_water(), self.brew(), self.pour_in_cup()]
        if self.customer_wants_condiments():
            steps.append(self.add_condiments())
        return steps

    def boil_water(self) -> str:
        return "Boiling water"

    def pour_in_cup(self) -> str:
        return "Pouring into cup"

    @abstractmethod
    def brew(self) -> str: ...

    @abstractmethod
    def add_condiments(self) -> str: ...

    def customer_wants_condiments(self) -> bool:
        """Hook: subclasses may override."""
        return True


class Tea(CaffeineBeverageRecipe):
    def brew(self) -> str:
        return "Steeping the tea"

    def add_condiments(self) -> str:
        return "Adding lemon"


class Coffee(CaffeineBeverageRecipe):
    def brew(self) -> str:
        return "Dripping coffee through filter"

    def add_condiments(self) -> str:
        return "Adding sugar and milk"


class BlackCoffee(Coffee):
    def customer_wants_condiments(self) -> bool:
        return False
