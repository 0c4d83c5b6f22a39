"""
Абстрактная фабрика (Abstract Factory).

Фабрика создаёт семейство согласованных продуктов: кнопку и флажок
одного стиля.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class Button(ABC):
    @abstractmethod
    def paint(self) -> str: ...


class Checkbox(ABC):
    @abstractmethod
    def paint(self) -> str: ...


class WindowsButton(Button):
    def paint(self) -> str:
        return "Кнопка в стиле Windows"


class WindowsCheckbox(Checkbox):
    def paint(self) -> str:
        return "Флажок в стиле Windows"


class MacButton(Button):
    def paint(self) -> str:
        return "Кнопка в стиле macOS"


class MacCheckbox(Checkbox):
    def paint(self) -> str:
        return "Флажок в стиле macOS"


class GUIFactory(ABC):
    @abstractmethod
    def create_button(self) -> Button: ...

    @abstractmethod
    def create_checkbox(self) -> Checkbox: ...


class WindowsFactory(GUIFactory):
    def create_button(self) -> Button:
        return WindowsButton()

    def create_checkbox(self) -> Checkbox:
        return WindowsCheckbox()


class MacFactory(GUIFactory):
    def create_button(self) -> Button:
        return MacButton()

    def create_checkbox(self) -> Checkbox:
        return MacCheckbox()


class Application:
    """Клиент знает только абстрактную фабрику."""

    def __init__(self, factory: GUIFactory) -> None:
        self.button = factory.create_button()
        self.checkbox = factory.create_checkbox()

    def render(self) -> list[str]:
        return [self.button.paint(), self.checkbox.paint()]


def demo() -> None:
    for factory in (WindowsFactory(), MacFactory()):
        for line in Application(factory).render():
            print(line)
