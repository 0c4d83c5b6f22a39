"""
Фабричный метод (Factory Method).

Создатель объявляет метод create_transport(), подклассы решают,
какой именно транспорт создавать.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class Transport(ABC):
    @abstractmethod
    def deliver(self) -> str: ...


class Truck(Transport):
    def deliver(self) -> str:
        return "Доставка грузовиком по дороге"


class Ship(Transport):
    def deliver(self) -> str:
        return "Доставка кораблём по морю"


class Logistics(ABC):
    @abstractmethod
    def create_transport(self) -> Transport: ...

    def plan_delivery(self) -> str:
        transport = self.create_transport()
        return transport.deliver()


class RoadLogistics(Logistics):
    def create_transport(self) -> Transport:
        return Truck()


class SeaLogistics(Logistics):
    def create_transport(self) -> Transport:
        return Ship()


def demo() -> None:
    for logistics in (RoadLogistics(), SeaLogistics()):
        print(logistics.plan_delivery())
