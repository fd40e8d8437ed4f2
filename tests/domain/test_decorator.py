import pytest

from oodnotes.domain.core.exceptions import CollaboratorNotAttachedError, ValidationError
from oodnotes.domain.patterns.decorator import (
    CondimentDecorator,
    Espresso,
    HouseBlend,
    Milk,
    Mocha,
    PlainBeverage,
    Surcharge,
    Whip,
)


def test_stacked_surcharges_add_up():
    # Arrange
    base = PlainBeverage("Base", 100)

    # Act
    wrapped = Surcharge(Surcharge(base, "First", 20), "Second", 40)

    # Assert
    assert wrapped.cost() == 160
    assert wrapped.description() == "Base, First, Second"


def test_condiments_on_espresso():
    beverage = Whip(Mocha(Mocha(Espresso())))

    assert beverage.cost() == 199 + 20 + 20 + 10
    assert beverage.description() == "Espresso, Mocha, Mocha, Whip"


def test_house_blend_with_milk():
    beverage = Milk(HouseBlend())

    assert beverage.cost() == 99


def test_rewrapping_changes_cost_on_next_call():
    mocha = Mocha(Espresso())
    assert mocha.cost() == 219

    mocha.attach("beverage", PlainBeverage("Tea", 50))

    assert mocha.cost() == 70


def test_detached_condiment_raises():
    milk = Milk(Espresso())
    milk.detach("beverage")

    with pytest.raises(CollaboratorNotAttachedError):
        milk.cost()


def test_negative_prices_rejected():
    with pytest.raises(ValidationError):
        PlainBeverage("Free lunch", -1)
    with pytest.raises(ValidationError):
        Surcharge(Espresso(), "Discount", -5)


def test_condiment_is_a_beverage():
    assert isinstance(Milk(Espresso()), CondimentDecorator)
