"""Abstract Factory pattern - widget families for light and dark themes."""
from abc import abstractmethod
from typing import List, Optional

from oodnotes.domain.base.capability import Capability, CollaboratorSlot, Subject


class Button(Capability):
    @abstractmethod
    def render(self) -> str: ...


class Checkbox(Capability):
    @abstractmethod
    def render(self) -> str: ...


class WidgetFactory(Capability):
    theme = "base"

    @abstractmethod
    def create_button(self, label: str) -> Button: ...

    @abstractmethod
    def create_checkbox(self, label: str) -> Checkbox: ...


class _LabelledWidget:
    kind = "widget"
    theme = "base"

    def __init__(self, label: str):
        self.label = label

    def render(self) -> str:
        return f"[{self.theme} {self.kind}: {self.label}]"


class LightButton(_LabelledWidget, Button):
    kind = "button"
    theme = "light"


class LightCheckbox(_LabelledWidget, Checkbox):
    kind = "checkbox"
    theme = "light"


class DarkButton(_LabelledWidget, Button):
    kind = "button"
    theme = "dark"


class DarkCheckbox(_LabelledWidget, Checkbox):
    kind = "checkbox"
    theme = "dark"


class LightThemeFactory(WidgetFactory):
    theme = "light"

    def create_button(self, label: str) -> Button:
        return LightButton(label)

    def create_checkbox(self, label: str) -> Checkbox:
        return LightCheckbox(label)


class DarkThemeFactory(WidgetFactory):
    theme = "dark"

    def create_button(self, label: str) -> Button:
        return DarkButton(label)

    def create_checkbox(self, label: str) -> Checkbox:
        return DarkCheckbox(label)


class Dialog(Subject):
    """Builds all of its widgets from the attached factory so they share a family."""

    widget_factory = CollaboratorSlot(WidgetFactory)

    def __init__(self, title: str, widget_factory: Optional[WidgetFactory] = None):
        super().__init__(widget_factory=widget_factory)
        self.title = title

    def render(self) -> List[str]:
        factory = self.widget_factory
        return [
            f"{self.title} ({factory.theme})",
            factory.create_checkbox("Remember me").render(),
            factory.create_button("OK").render(),
            factory.create_button("Cancel").render(),
        ]
