"""
Запуск демо-сниппетов с перехватом stdout и сверка вывода с каталогом.
"""

from __future__ import annotations

import io
from contextlib import redirect_stdout
from typing import Iterable, List, Optional

from .catalog import Catalog, PatternEntry
from .errors import UnknownPatternError
from .logs import get_logger
from .registry import get_demo
from .report_schema import DemoRun, PatternCheck, VerifyReport
from .version import tool_version

_LOG = get_logger("pcat.runner")


def _split_lines(text: str) -> List[str]:
    return [ln.rstrip() for ln in text.splitlines()]


def run_demo(pattern_id: str) -> DemoRun:
    """
    Выполняет demo() паттерна и возвращает напечатанные строки.

    Исключение внутри демо не пробрасывается: оно попадает в поле error,
    а строки, напечатанные до сбоя, сохраняются. UnknownPatternError
    пробрасывается — это ошибка пользователя, а не демо.
    """
    demo = get_demo(pattern_id)
    buf = io.StringIO()
    try:
        with redirect_stdout(buf):
            demo()
    except Exception as e:
        _LOG.warning("demo '%s' failed: %s: %s", pattern_id, type(e).__name__, e)
        return DemoRun(
            pattern_id=pattern_id,
            lines=_split_lines(buf.getvalue()),
            ok=False,
            error=f"{type(e).__name__}: {e}",
        )
    return DemoRun(pattern_id=pattern_id, lines=_split_lines(buf.getvalue()))


def _resolve_entries(catalog: Catalog, ids: Optional[Iterable[str]]) -> List[PatternEntry]:
    if not ids:
        return [p for _, p in catalog.iter_patterns()]
    entries: List[PatternEntry] = []
    for key in ids:
        entry = catalog.find(key)
        if entry is None:
            raise UnknownPatternError(key, catalog.pattern_ids())
        entries.append(entry)
    return entries


def check_pattern(entry: PatternEntry) -> PatternCheck:
    try:
        run = run_demo(entry.id)
    except UnknownPatternError as e:
        # паттерн описан в каталоге, но демо для него не зарегистрировано
        return PatternCheck(
            pattern_id=entry.id,
            title=entry.title,
            ok=False,
            expected=list(entry.expected_output),
            error=str(e),
        )
    ok = run.ok and run.lines == entry.expected_output
    if not ok:
        _LOG.debug("mismatch for %s: expected=%r actual=%r", entry.id, entry.expected_output, run.lines)
    return PatternCheck(
        pattern_id=entry.id,
        title=entry.title,
        ok=ok,
        expected=list(entry.expected_output),
        actual=run.lines,
        error=run.error,
    )


def verify(catalog: Catalog, ids: Optional[Iterable[str]] = None, *, catalog_label: str = "") -> VerifyReport:
    """
    Сверяет вывод демо с ожидаемым выводом из каталога.

    Args:
        catalog: Загруженный каталог
        ids: Id или псевдонимы паттернов; пусто — все паттерны каталога
        catalog_label: Откуда загружен каталог (для отчёта)
    """
    checks = [check_pattern(e) for e in _resolve_entries(catalog, ids)]
    return VerifyReport(
        tool_version=tool_version(),
        catalog=catalog_label or catalog.title,
        ok=all(c.ok for c in checks),
        checks=checks,
    )


__all__ = ["run_demo", "check_pattern", "verify"]
