"""Inheritance - an is-a relationship; subclasses reuse and override base behavior."""


class Animal:
    sound = "..."

    def __init__(self, name: str):
        self.name = name

    def speak(self) -> str:
        return f"{self.name} says {self.sound}"

    def describe(self) -> str:
        return f"{self.name} is a {type(self).__name__.lower()}"


class Dog(Animal):
    sound = "Woof!"


class Cat(Animal):
    sound = "Meow!"

    def speak(self) -> str:
        return f"{super().speak()} (and ignores you)"
