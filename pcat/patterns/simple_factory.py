"""
Простая фабрика (Simple Factory).

Один метод выбирает конкретный класс по строковому ключу.
Неизвестный ключ — ValueError.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Type


class Animal(ABC):
    @abstractmethod
    def speak(self) -> str: ...


class Dog(Animal):
    def speak(self) -> str:
        return "Гав!"


class Cat(Animal):
    def speak(self) -> str:
        return "Мяу!"


class AnimalFactory:
    _KINDS: Dict[str, Type[Animal]] = {
        "dog": Dog,
        "cat": Cat,
    }

    @classmethod
    def create(cls, kind: str) -> Animal:
        animal_cls = cls._KINDS.get(kind.strip().lower())
        if animal_cls is None:
            raise ValueError(f"Неизвестный тип животного: {kind}")
        return animal_cls()


def demo() -> None:
    print(AnimalFactory.create("dog").speak())
    print(AnimalFactory.create("cat").speak())
    try:
        AnimalFactory.create("bird")
    except ValueError as e:
        print(f"Ошибка: {e}")
