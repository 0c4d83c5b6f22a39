"""
Загрузчик каталога паттернов из YAML.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Set

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ..errors import CatalogError
from ..logs import get_logger
from .model import Catalog, Category
from .paths import resolve_catalog_path

_yaml = YAML(typ="safe")
_LOG = get_logger("pcat.catalog")


def _read_yaml_map(path: Path) -> dict:
    """Читает YAML файл и возвращает словарь."""
    if not path.is_file():
        raise CatalogError(f"Catalog file not found: {path}")
    try:
        raw = _yaml.load(path.read_text(encoding="utf-8")) or {}
    except YAMLError as e:
        raise CatalogError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(raw, dict):
        raise CatalogError(f"YAML must be a mapping: {path}")
    return raw


def _validate(catalog: Catalog, path: Path) -> None:
    seen_cats: Set[str] = set()
    seen_keys: Set[str] = set()
    for cat in catalog.categories:
        if not cat.id:
            raise CatalogError(f"{path}: category without id")
        if cat.id in seen_cats:
            raise CatalogError(f"{path}: duplicate category id '{cat.id}'")
        seen_cats.add(cat.id)
        for p in cat.patterns:
            if not p.id:
                raise CatalogError(f"{path}: pattern without id in category '{cat.id}'")
            for key in [p.id, *p.aliases]:
                if key in seen_keys:
                    raise CatalogError(f"{path}: duplicate pattern id or alias '{key}'")
                seen_keys.add(key)


def load_catalog(path: Optional[str | Path] = None) -> Catalog:
    """
    Загружает каталог.

    Args:
        path: Явный путь к YAML; если не задан — PCAT_CATALOG или встроенный каталог.

    Returns:
        Проверенный каталог
    """
    cat_path = resolve_catalog_path(path)
    _LOG.debug("loading catalog from %s", cat_path)
    raw = _read_yaml_map(cat_path)

    cats_raw = raw.get("categories") or []
    if not isinstance(cats_raw, list):
        raise CatalogError(f"{cat_path}: 'categories' must be a list")

    try:
        categories = [Category.from_dict(c) for c in cats_raw]
    except CatalogError as e:
        raise CatalogError(f"{cat_path}: {e}") from e

    catalog = Catalog(
        title=str(raw.get("title") or ""),
        intro=str(raw.get("intro") or "").strip(),
        categories=categories,
    )
    _validate(catalog, cat_path)
    _LOG.debug("catalog: %d categories, %d patterns",
               len(catalog.categories), len(catalog.pattern_ids()))
    return catalog
