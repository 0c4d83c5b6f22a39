from __future__ import annotations

import logging
import os

# -------------------- Logging setup --------------------

_ROOT = "pcat"


def _setup_logging_once() -> None:
    if getattr(_setup_logging_once, "_inited", False):
        return
    _setup_logging_once._inited = True  # type: ignore[attr-defined]
    log = logging.getLogger(_ROOT)
    level = logging.DEBUG if os.environ.get("PCAT_DEBUG") else logging.WARNING
    log.setLevel(level)
    if not log.handlers:
        h = logging.StreamHandler()
        fmt = logging.Formatter("[%(levelname)s] %(message)s")
        h.setFormatter(fmt)
        log.addHandler(h)


def get_logger(name: str) -> logging.Logger:
    """Логгер в иерархии 'pcat.*' с однократной настройкой обработчика."""
    _setup_logging_once()
    if name != _ROOT and not name.startswith(_ROOT + "."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)


__all__ = ["get_logger"]
