import pytest

from pcat.patterns.builder import Car, CarBuilder


def test_fluent_builder_returns_car():
    car = CarBuilder().make("Lada").model("Vesta").year(2020).build()
    assert car == Car(make="Lada", model="Vesta", year=2020)
    assert str(car) == "Car(make=Lada, model=Vesta, year=2020)"


def test_each_step_returns_same_builder():
    b = CarBuilder()
    assert b.make("X") is b
    assert b.model("Y") is b
    assert b.year(1) is b


def test_missing_fields_are_named():
    with pytest.raises(ValueError) as ei:
        CarBuilder().make("Lada").build()
    msg = str(ei.value)
    assert "model" in msg and "year" in msg
    assert "make" not in msg.split(":", 1)[1]


def test_car_is_immutable():
    car = CarBuilder().make("A").model("B").year(1).build()
    with pytest.raises(Exception):
        car.year = 2  # type: ignore[misc]
