"""
Прототип (Prototype).

Новый объект получается копированием существующего.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import List


@dataclass
class Person:
    name: str
    age: int
    hobbies: List[str] = field(default_factory=list)

    def clone(self) -> "Person":
        # глубокая копия: список хобби у клона свой
        return copy.deepcopy(self)

    def __str__(self) -> str:
        return f"Person(name={self.name}, age={self.age})"


def demo() -> None:
    original = Person("Алиса", 30)
    clone = original.clone()
    clone.name = "Боб"
    clone.age = 25
    print(f"Оригинал: {original}")
    print(f"Клон: {clone}")
