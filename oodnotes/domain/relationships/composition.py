"""Composition - a whole that creates and exclusively owns its parts.

Rooms are built by the house from their names and never accepted from
outside; demolishing the house destroys them.
"""
from typing import List, Tuple


class Room:
    def __init__(self, name: str, house_address: str):
        self.name = name
        self.house_address = house_address

    def describe(self) -> str:
        return f"{self.name} at {self.house_address}"


class House:
    def __init__(self, address: str, room_names: List[str]):
        self.address = address
        self._rooms: List[Room] = [Room(name, address) for name in room_names]

    @property
    def rooms(self) -> Tuple[Room, ...]:
        # Tuple so callers cannot splice foreign rooms in
        return tuple(self._rooms)

    def add_room(self, name: str) -> Room:
        room = Room(name, self.address)
        self._rooms.append(room)
        return room

    def demolish(self) -> int:
        """Destroy the house together with its rooms. Returns the number of rooms destroyed."""
        destroyed = len(self._rooms)
        self._rooms.clear()
        return destroyed
