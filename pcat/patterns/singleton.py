"""
Одиночка (Singleton).

Два варианта:
  • Singleton — единственный экземпляр через __new__;
  • ThreadSafeSingleton — ленивая инициализация с двойной проверкой под блокировкой;
    прямой вызов конструктора запрещён, экземпляр выдаёт только get_instance().
"""

from __future__ import annotations

import threading
from typing import Optional


class Singleton:
    _instance: Optional["Singleton"] = None

    def __new__(cls) -> "Singleton":
        if cls._instance is None:
            inst = super().__new__(cls)
            inst.counter = 0
            cls._instance = inst
        return cls._instance

    def increment(self) -> int:
        self.counter += 1
        return self.counter

    @classmethod
    def reset(cls) -> None:
        cls._instance = None


class ThreadSafeSingleton:
    _instance: Optional["ThreadSafeSingleton"] = None
    _lock = threading.Lock()
    _create_key = object()

    def __init__(self, _key: object = None) -> None:
        if _key is not ThreadSafeSingleton._create_key:
            raise TypeError("ThreadSafeSingleton is created only via get_instance()")
        self.counter = 0
        self._counter_lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> "ThreadSafeSingleton":
        # первая проверка без блокировки, вторая — под ней
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls(cls._create_key)
        return cls._instance

    def increment(self) -> int:
        with self._counter_lock:
            self.counter += 1
            return self.counter

    @classmethod
    def reset(cls) -> None:
        with cls._lock:
            cls._instance = None


def demo() -> None:
    Singleton.reset()
    ThreadSafeSingleton.reset()

    first = Singleton()
    second = Singleton()
    first.increment()
    second.increment()
    print(f"Счётчик: {first.counter}")
    print(f"Один и тот же объект: {first is second}")

    safe = ThreadSafeSingleton.get_instance()
    safe.increment()
    print(f"Потокобезопасный счётчик: {ThreadSafeSingleton.get_instance().counter}")
