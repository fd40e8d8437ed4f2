import pytest

from oodnotes.domain.core.exceptions import CollaboratorNotAttachedError
from oodnotes.domain.patterns.strategy import (
    Duck,
    FlyNoWay,
    FlyRocketPowered,
    MallardDuck,
    ModelDuck,
    MuteQuack,
    Quack,
    RubberDuck,
    Squeak,
)


def test_mallard_uses_default_behaviors():
    duck = MallardDuck()

    assert duck.perform_quack() == "Quack!"
    assert duck.perform_fly() == "I'm flying!!"


def test_rubber_duck_squeaks_and_cannot_fly():
    duck = RubberDuck()

    assert duck.perform_quack() == "Squeak!"
    assert duck.perform_fly() == "I can't fly"


def test_set_quack_behavior_switches_immediately():
    # Arrange
    duck = MallardDuck()
    assert duck.perform_quack() == "Quack!"

    # Act
    duck.set_quack_behavior(Squeak())

    # Assert
    assert duck.perform_quack() == "Squeak!"


def test_model_duck_gains_rocket():
    duck = ModelDuck()
    assert duck.perform_fly() == "I can't fly"

    duck.set_fly_behavior(FlyRocketPowered())

    assert duck.perform_fly() == "I'm flying with a rocket!"


def test_unconfigured_duck_raises():
    duck = Duck()

    with pytest.raises(CollaboratorNotAttachedError):
        duck.perform_quack()
    with pytest.raises(CollaboratorNotAttachedError):
        duck.perform_fly()


def test_behaviors_selected_at_construction():
    duck = Duck(quack_behavior=MuteQuack(), fly_behavior=FlyNoWay())

    assert duck.perform_quack() == "<< Silence >>"
    assert duck.swim() == "All ducks float, even decoys!"


def test_behavior_instance_is_not_mutated_by_rebind():
    quack = Quack()
    first, second = MallardDuck(), MallardDuck()
    first.set_quack_behavior(quack)
    second.set_quack_behavior(quack)

    first.set_quack_behavior(Squeak())

    assert second.perform_quack() == "Quack!"
