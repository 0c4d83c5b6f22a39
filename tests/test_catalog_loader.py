import textwrap
from pathlib import Path

import pytest

from pcat.catalog import builtin_catalog_path, load_catalog
from pcat.errors import CatalogError
from pcat.registry import list_registered

from .conftest import write


def test_builtin_catalog_structure():
    cat = load_catalog()
    assert cat.title == "Паттерны проектирования"
    assert [c.id for c in cat.categories] == ["creational", "structural", "behavioral"]
    assert cat.category("structural").is_placeholder
    assert cat.category("behavioral").is_placeholder
    assert cat.category("creational").title == "Порождающие паттерны"


def test_builtin_catalog_matches_registry():
    assert load_catalog().pattern_ids() == list_registered()


def test_find_by_alias():
    cat = load_catalog()
    assert cat.find("одиночка").id == "singleton"
    assert cat.find("ABSTRACT_FACTORY").id == "abstract-factory"
    assert cat.find("visitor") is None
    assert cat.category_of("builder").id == "creational"


def test_explicit_path_and_env(tmp_path: Path, monkeypatch, mini_catalog: Path):
    assert load_catalog(mini_catalog).title == "Мини"
    monkeypatch.setenv("PCAT_CATALOG", str(mini_catalog))
    assert load_catalog().title == "Мини"
    # явный путь приоритетнее переменной окружения
    assert load_catalog(builtin_catalog_path()).title == "Паттерны проектирования"


def test_missing_file(tmp_path: Path):
    with pytest.raises(CatalogError, match="not found"):
        load_catalog(tmp_path / "nope.yaml")


def test_non_mapping_yaml(tmp_path: Path):
    p = write(tmp_path / "c.yaml", "- a\n- b\n")
    with pytest.raises(CatalogError, match="mapping"):
        load_catalog(p)


def test_duplicate_ids_rejected(tmp_path: Path):
    p = write(tmp_path / "c.yaml", textwrap.dedent("""
    title: X
    categories:
      - id: a
        title: A
        patterns:
          - id: builder
            title: B1
      - id: b
        title: B
        patterns:
          - id: x
            title: X
            aliases: [builder]
    """))
    with pytest.raises(CatalogError, match="duplicate"):
        load_catalog(p)


def test_pattern_without_id_rejected(tmp_path: Path):
    p = write(tmp_path / "c.yaml", textwrap.dedent("""
    title: X
    categories:
      - id: a
        title: A
        patterns:
          - title: nameless
    """))
    with pytest.raises(CatalogError, match="without id"):
        load_catalog(p)


def test_pattern_given_as_string_rejected(tmp_path: Path):
    p = write(tmp_path / "c.yaml", textwrap.dedent("""
    title: X
    categories:
      - id: creational
        title: A
        patterns: [builder]
    """))
    with pytest.raises(CatalogError, match="pattern entry must be a mapping"):
        load_catalog(p)


def test_category_given_as_string_rejected(tmp_path: Path):
    p = write(tmp_path / "c.yaml", "title: X\ncategories: [creational]\n")
    with pytest.raises(CatalogError, match="category entry must be a mapping") as ei:
        load_catalog(p)
    assert str(p) in str(ei.value)


def test_single_string_expected_output_and_alias(tmp_path: Path):
    p = write(tmp_path / "c.yaml", textwrap.dedent("""
    title: X
    categories:
      - id: creational
        title: A
        patterns:
          - id: builder
            title: B
            aliases: Строитель
            expected_output: "Car(make=Toyota, model=Camry, year=2022)"
    """))
    entry = load_catalog(p).find("builder")
    assert entry.expected_output == ["Car(make=Toyota, model=Camry, year=2022)"]
    assert entry.aliases == ["строитель"]


def test_expected_output_mapping_rejected(tmp_path: Path):
    p = write(tmp_path / "c.yaml", textwrap.dedent("""
    title: X
    categories:
      - id: creational
        title: A
        patterns:
          - id: builder
            title: B
            expected_output: {line: 1}
    """))
    with pytest.raises(CatalogError, match="'expected_output' must be a list"):
        load_catalog(p)


def test_pattern_id_is_case_insensitive(tmp_path: Path):
    p = write(tmp_path / "c.yaml", textwrap.dedent("""
    title: X
    categories:
      - id: creational
        title: A
        patterns:
          - id: Builder
            title: B
          - id: other
            title: O
            aliases: [BUILDER]
    """))
    with pytest.raises(CatalogError, match="duplicate pattern id or alias 'builder'"):
        load_catalog(p)

    write(p, textwrap.dedent("""
    title: X
    categories:
      - id: creational
        title: A
        patterns:
          - id: Builder
            title: B
    """))
    cat = load_catalog(p)
    assert cat.pattern_ids() == ["builder"]
    assert cat.find("Builder").id == "builder"


def test_null_text_fields_become_empty(tmp_path: Path):
    p = write(tmp_path / "c.yaml", textwrap.dedent("""
    title:
    intro:
    categories:
      - id: creational
        title: A
        description:
        patterns:
          - id: builder
            title: B
            summary:
    """))
    cat = load_catalog(p)
    assert cat.title == ""
    assert cat.intro == ""
    assert cat.category("creational").description == ""
    assert cat.find("builder").summary == ""
