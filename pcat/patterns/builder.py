"""
Строитель (Builder).

Пошаговое конструирование объекта через fluent-интерфейс.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Car:
    make: str
    model: str
    year: int

    def __str__(self) -> str:
        return f"Car(make={self.make}, model={self.model}, year={self.year})"


class CarBuilder:
    def __init__(self) -> None:
        self._make: Optional[str] = None
        self._model: Optional[str] = None
        self._year: Optional[int] = None

    def make(self, make: str) -> "CarBuilder":
        self._make = make
        return self

    def model(self, model: str) -> "CarBuilder":
        self._model = model
        return self

    def year(self, year: int) -> "CarBuilder":
        self._year = year
        return self

    def build(self) -> Car:
        """Собирает автомобиль. Все три поля обязательны."""
        missing = [
            name for name, value in (("make", self._make), ("model", self._model), ("year", self._year))
            if value is None
        ]
        if missing:
            raise ValueError(f"Car is missing required fields: {', '.join(missing)}")
        return Car(make=self._make, model=self._model, year=self._year)  # type: ignore[arg-type]


def demo() -> None:
    car = (
        CarBuilder()
        .make("Toyota")
        .model("Camry")
        .year(2022)
        .build()
    )
    print(car)
