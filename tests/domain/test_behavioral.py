import pytest

from oodnotes.domain.core.exceptions import ValidationError
from oodnotes.domain.patterns.iterator import DinerMenu, DinerMenuIterator, PancakeHouseMenu, Waitress
from oodnotes.domain.patterns.template_method import BlackCoffee, Coffee, Tea


def test_tea_recipe_order():
    assert Tea().prepare_recipe() == [
        "Boiling water",
        "Steeping the tea",
        "Pouring into cup",
        "Adding lemon",
    ]


def test_hook_skips_condiments():
    steps = BlackCoffee().prepare_recipe()

    assert "Adding sugar and milk" not in steps
    assert steps == Coffee().prepare_recipe()[:3]


@pytest.fixture
def menus():
    pancakes = PancakeHouseMenu()
    pancakes.add_item("Waffles", "Waffles with blueberries", True, 359)
    diner = DinerMenu()
    diner.add_item("Hotdog", "A hot dog", False, 305)
    diner.add_item("Soup", "Soup of the day", True, 329)
    return pancakes, diner


def test_diner_menu_has_own_iterator(menus):
    _, diner = menus

    iterator = iter(diner)

    assert isinstance(iterator, DinerMenuIterator)
    assert [item.name for item in iterator] == ["Hotdog", "Soup"]
    with pytest.raises(StopIteration):
        next(iterator)


def test_diner_menu_capacity():
    diner = DinerMenu()
    for index in range(DinerMenu.MAX_ITEMS):
        diner.add_item(f"Item {index}", "", True, 100)

    with pytest.raises(ValidationError):
        diner.add_item("One too many", "", True, 100)
    assert len(diner) == DinerMenu.MAX_ITEMS


def test_waitress_prints_all_menus(menus):
    lines = Waitress(menus).print_menu()

    assert lines == [
        "BREAKFAST",
        "Waffles, 359 -- Waffles with blueberries",
        "LUNCH",
        "Hotdog, 305 -- A hot dog",
        "Soup, 329 -- Soup of the day",
    ]


def test_waitress_vegetarian_filter(menus):
    lines = Waitress(menus).print_vegetarian_menu()

    assert [line.split(",")[0] for line in lines] == ["Waffles", "Soup"]
