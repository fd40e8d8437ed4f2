"""Iterator pattern - menus with different storage traversed the same way."""
from typing import Iterable, Iterator, List, Optional

from oodnotes.domain.base.value_object import ValueObject
from oodnotes.domain.core.exceptions import ValidationError


class MenuItem(ValueObject):
    name: str
    description: str
    vegetarian: bool
    price: int


class PancakeHouseMenu:
    """List-backed menu."""

    title = "BREAKFAST"

    def __init__(self):
        self._items: List[MenuItem] = []

    def add_item(self, name: str, description: str, vegetarian: bool, price: int) -> None:
        self._items.append(
            MenuItem(name=name, description=description, vegetarian=vegetarian, price=price)
        )

    def __iter__(self) -> Iterator[MenuItem]:
        return iter(self._items)


class DinerMenu:
    """Fixed-capacity array-style menu with its own iterator."""

    title = "LUNCH"
    MAX_ITEMS = 6

    def __init__(self):
        self._items: List[Optional[MenuItem]] = [None] * self.MAX_ITEMS
        self._count = 0

    def add_item(self, name: str, description: str, vegetarian: bool, price: int) -> None:
        if self._count >= self.MAX_ITEMS:
            raise ValidationError(f"Menu is full, can't add {name}")
        self._items[self._count] = MenuItem(
            name=name, description=description, vegetarian=vegetarian, price=price
        )
        self._count += 1

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> "DinerMenuIterator":
        return DinerMenuIterator(self._items, self._count)


class DinerMenuIterator:
    def __init__(self, items: List[Optional[MenuItem]], count: int):
        self._items = items
        self._count = count
        self._position = 0

    def __iter__(self) -> "DinerMenuIterator":
        return self

    def __next__(self) -> MenuItem:
        if self._position >= self._count:
            raise StopIteration
        item = self._items[self._position]
        self._position += 1
        return item


class Waitress:
    def __init__(self, menus: Iterable):
        self.menus = list(menus)

    def print_menu(self) -> List[str]:
        lines: List[str] = []
        for menu in self.menus:
            lines.append(f"{getattr(menu, 'title', 'MENU')}")
            lines.extend(self._format(item) for item in menu)
        return lines

    def print_vegetarian_menu(self) -> List[str]:
        return [self._format(item) for menu in self.menus for item in menu if item.vegetarian]

    @staticmethod
    def _format(item: MenuItem) -> str:
        return f"{item.name}, {item.price} -- {item.description}"
