from __future__ import annotations

import importlib
from dataclasses import dataclass
from typing import Callable, Dict, List

from .errors import UnknownPatternError
from .logs import get_logger

__all__ = [
    "DemoFn",
    "register_lazy",
    "get_demo",
    "list_registered",
]

DemoFn = Callable[[], None]

_LOG = get_logger("pcat.registry")


@dataclass(frozen=True)
class _LazySpec:
    module: str
    func_name: str


# Ленивые спецификации: id паттерна → где лежит demo()
_LAZY_BY_ID: Dict[str, _LazySpec] = {}

# Разрешённые функции: по id паттерна
_DEMO_BY_ID: Dict[str, DemoFn] = {}


def register_lazy(*, pattern_id: str, module: str, func_name: str = "demo") -> None:
    """
    Зарегистрировать демо «по строкам» без импорта модуля.
    Повторная регистрация того же id перекрывает прежнюю.
    """
    key = pattern_id.strip().lower()
    _LAZY_BY_ID[key] = _LazySpec(module=module, func_name=func_name)
    _DEMO_BY_ID.pop(key, None)


def _load_demo_from_spec(pattern_id: str, spec: _LazySpec) -> DemoFn:
    # Поддерживаем как относительные (".patterns.builder") так и абсолютные имена модулей.
    mod = importlib.import_module(spec.module, package=__package__)
    fn = getattr(mod, spec.func_name, None)
    if fn is None:
        raise RuntimeError(f"Demo function '{spec.func_name}' not found in {spec.module}")
    if not callable(fn):
        raise TypeError(f"{spec.module}.{spec.func_name} is not callable")
    _LOG.debug("resolved demo %s -> %s.%s", pattern_id, spec.module, spec.func_name)
    _DEMO_BY_ID[pattern_id] = fn
    return fn


def get_demo(pattern_id: str) -> DemoFn:
    """Вернуть функцию demo() по id паттерна. Модуль импортируется при первом обращении."""
    key = pattern_id.strip().lower()
    fn = _DEMO_BY_ID.get(key)
    if fn:
        return fn
    spec = _LAZY_BY_ID.get(key)
    if spec is None:
        raise UnknownPatternError(pattern_id, list(_LAZY_BY_ID))
    return _load_demo_from_spec(key, spec)


def list_registered() -> List[str]:
    """Id всех зарегистрированных паттернов в порядке регистрации."""
    return list(_LAZY_BY_ID)


# ---- встроенные демо ----
register_lazy(pattern_id="builder", module=".patterns.builder")
register_lazy(pattern_id="prototype", module=".patterns.prototype")
register_lazy(pattern_id="singleton", module=".patterns.singleton")
register_lazy(pattern_id="factory-method", module=".patterns.factory_method")
register_lazy(pattern_id="abstract-factory", module=".patterns.abstract_factory")
register_lazy(pattern_id="simple-factory", module=".patterns.simple_factory")
