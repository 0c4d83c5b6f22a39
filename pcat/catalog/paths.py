from __future__ import annotations

import os
from importlib import resources
from pathlib import Path
from typing import Optional

# Single source of truth for catalogue file location.
CATALOG_FILE = "catalog.yaml"
CATALOG_ENV = "PCAT_CATALOG"


def builtin_catalog_path() -> Path:
    """Path to the catalogue shipped inside the package."""
    return Path(str(resources.files(__package__).joinpath(CATALOG_FILE)))


def resolve_catalog_path(explicit: Optional[str | Path] = None) -> Path:
    """
    Порядок выбора: явный путь (--catalog) → переменная PCAT_CATALOG → встроенный каталог.
    """
    if explicit:
        return Path(explicit).expanduser().resolve()
    env = os.environ.get(CATALOG_ENV, "").strip()
    if env:
        return Path(env).expanduser().resolve()
    return builtin_catalog_path()
