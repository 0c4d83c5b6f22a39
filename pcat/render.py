"""
Рендер справочника в Markdown.

Правила:
• заголовок каталога — '#', раздел — '##', паттерн — '###';
• под паттерном: описание, исходник модуля demo в fenced-блоке ```python,
  затем ожидаемый вывод отдельным блоком в виде комментариев '# ...';
• пустой раздел рендерится строкой-заглушкой.
"""

from __future__ import annotations

import inspect
from typing import List

from .catalog import Catalog, Category, PatternEntry
from .errors import UnknownPatternError
from .registry import get_demo

PLACEHOLDER = "_Раздел пока не заполнен._"


def demo_source(pattern_id: str) -> str:
    """Исходный код модуля, в котором объявлена demo() паттерна."""
    demo = get_demo(pattern_id)
    module = inspect.getmodule(demo)
    if module is None:
        return inspect.getsource(demo)
    return inspect.getsource(module)


def _render_pattern(entry: PatternEntry) -> List[str]:
    out: List[str] = [f"### {entry.title}\n", "\n"]
    if entry.summary:
        out.append(entry.summary.rstrip("\n") + "\n\n")
    try:
        source = demo_source(entry.id)
    except UnknownPatternError:
        source = ""
    if source:
        out.append("```python\n")
        out.append(source.rstrip("\n") + "\n")
        out.append("```\n\n")
    if entry.expected_output:
        out.append("Вывод:\n\n")
        out.append("```python\n")
        out.extend(f"# {line}\n" for line in entry.expected_output)
        out.append("```\n\n")
    return out


def _render_category(cat: Category) -> List[str]:
    out: List[str] = [f"## {cat.title}\n", "\n"]
    if cat.description:
        out.append(cat.description.rstrip("\n") + "\n\n")
    if cat.is_placeholder:
        out.append(PLACEHOLDER + "\n\n")
        return out
    for entry in cat.patterns:
        out.extend(_render_pattern(entry))
    return out


def render_document(catalog: Catalog) -> str:
    out: List[str] = [f"# {catalog.title}\n", "\n"]
    if catalog.intro:
        out.append(catalog.intro.rstrip("\n") + "\n\n")
    for cat in catalog.categories:
        out.extend(_render_category(cat))
    return "".join(out).rstrip("\n") + "\n"


__all__ = ["render_document", "demo_source", "PLACEHOLDER"]
