from .load import load_catalog
from .model import Catalog, Category, PatternEntry
from .paths import builtin_catalog_path, resolve_catalog_path

__all__ = [
    "load_catalog",
    "Catalog",
    "Category",
    "PatternEntry",
    "builtin_catalog_path",
    "resolve_catalog_path",
]
