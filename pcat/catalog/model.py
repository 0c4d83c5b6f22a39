"""
Модели данных каталога паттернов.
Содержит категории и паттерны с поддержкой сериализации в YAML.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple

from ..errors import CatalogError


def _text(data: Dict[str, Any], key: str) -> str:
    # null в YAML — пустая строка, а не "None"
    value = data.get(key)
    return "" if value is None else str(value)


def _str_list(data: Dict[str, Any], key: str, owner: str) -> List[str]:
    """Список строк; одиночная строка трактуется как список из одного элемента."""
    value = data.get(key)
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        raise CatalogError(f"{owner}: '{key}' must be a list of strings")
    return [str(x) for x in value]


def _require_map(data: Any, what: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise CatalogError(f"{what} entry must be a mapping, got {type(data).__name__}: {data!r}")
    return data


@dataclass
class PatternEntry:
    """
    Паттерн - одна статья справочника.

    Хранит описание и ожидаемый вывод demo() построчно.
    """
    id: str
    title: str
    summary: str = ""
    expected_output: List[str] = field(default_factory=list)
    aliases: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "PatternEntry":
        """Создание экземпляра из словаря (из YAML)."""
        data = _require_map(data, "pattern")
        pid = _text(data, "id").strip().lower()
        owner = f"pattern '{pid}'"
        return cls(
            id=pid,
            title=_text(data, "title"),
            summary=_text(data, "summary").strip(),
            expected_output=_str_list(data, "expected_output", owner),
            aliases=[a.strip().lower() for a in _str_list(data, "aliases", owner)],
        )

    def to_dict(self) -> Dict[str, Any]:
        """Сериализация в словарь для YAML/JSON."""
        result: Dict[str, Any] = {"id": self.id, "title": self.title}
        if self.summary:
            result["summary"] = self.summary
        if self.expected_output:
            result["expected_output"] = list(self.expected_output)
        if self.aliases:
            result["aliases"] = list(self.aliases)
        return result

    def matches(self, key: str) -> bool:
        k = key.strip().lower()
        return k == self.id or k in self.aliases


@dataclass
class Category:
    """
    Раздел справочника (порождающие, структурные, поведенческие).

    Раздел может быть пустым - тогда это заглушка.
    """
    id: str
    title: str
    description: str = ""
    patterns: List[PatternEntry] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "Category":
        data = _require_map(data, "category")
        cid = _text(data, "id").strip()
        patterns_raw = data.get("patterns") or []
        if not isinstance(patterns_raw, list):
            raise CatalogError(f"category '{cid}': 'patterns' must be a list")
        return cls(
            id=cid,
            title=_text(data, "title"),
            description=_text(data, "description").strip(),
            patterns=[PatternEntry.from_dict(p) for p in patterns_raw],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "patterns": [p.id for p in self.patterns],
        }

    @property
    def is_placeholder(self) -> bool:
        return not self.patterns


@dataclass
class Catalog:
    title: str
    intro: str = ""
    categories: List[Category] = field(default_factory=list)

    def iter_patterns(self) -> Iterator[Tuple[Category, PatternEntry]]:
        for cat in self.categories:
            for p in cat.patterns:
                yield cat, p

    def find(self, key: str) -> Optional[PatternEntry]:
        """Поиск паттерна по id или псевдониму."""
        for _, p in self.iter_patterns():
            if p.matches(key):
                return p
        return None

    def category(self, category_id: str) -> Optional[Category]:
        for cat in self.categories:
            if cat.id == category_id:
                return cat
        return None

    def category_of(self, pattern_id: str) -> Optional[Category]:
        for cat, p in self.iter_patterns():
            if p.id == pattern_id:
                return cat
        return None

    def pattern_ids(self) -> List[str]:
        return [p.id for _, p in self.iter_patterns()]
