import pytest

from pcat import registry
from pcat.errors import UnknownPatternError
from pcat.patterns import builder


def test_builtin_demos_registered():
    assert registry.list_registered() == [
        "builder", "prototype", "singleton",
        "factory-method", "abstract-factory", "simple-factory",
    ]


def test_get_demo_resolves_module_function():
    assert registry.get_demo("builder") is builder.demo
    # регистр и пробелы не важны
    assert registry.get_demo("  Builder ") is builder.demo


def test_unknown_pattern_lists_available():
    with pytest.raises(UnknownPatternError) as ei:
        registry.get_demo("visitor")
    assert ei.value.pattern_id == "visitor"
    assert "builder" in ei.value.known


def test_register_lazy_overrides(monkeypatch):
    monkeypatch.setattr(registry, "_LAZY_BY_ID", dict(registry._LAZY_BY_ID))
    monkeypatch.setattr(registry, "_DEMO_BY_ID", dict(registry._DEMO_BY_ID))
    registry.register_lazy(pattern_id="builder", module="pcat.patterns.prototype")
    from pcat.patterns import prototype
    assert registry.get_demo("builder") is prototype.demo


def test_missing_function_is_programming_error(monkeypatch):
    monkeypatch.setattr(registry, "_LAZY_BY_ID", dict(registry._LAZY_BY_ID))
    registry.register_lazy(pattern_id="broken", module=".patterns.builder", func_name="nope")
    with pytest.raises(RuntimeError, match="nope"):
        registry.get_demo("broken")
