"""
Base exception for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from PCatUserError.

Programming errors and bugs should NOT inherit from PCatUserError —
they will propagate with full tracebacks.
"""

from __future__ import annotations


class PCatUserError(Exception):
    """
    Base class for all user-facing errors in the pattern catalogue.

    These errors indicate problems that the user can fix:
    a broken catalogue file, an unknown pattern id, etc.
    """
    pass


class CatalogError(PCatUserError):
    """Каталог не найден или имеет неверную структуру."""
    pass


class UnknownPatternError(PCatUserError):
    """Запрошен паттерн, которого нет в каталоге или реестре."""

    def __init__(self, pattern_id: str, known: list[str] | None = None):
        self.pattern_id = pattern_id
        self.known = sorted(known or [])
        msg = f"Unknown pattern '{pattern_id}'"
        if self.known:
            msg += f" (available: {', '.join(self.known)})"
        super().__init__(msg)


__all__ = ["PCatUserError", "CatalogError", "UnknownPatternError"]
