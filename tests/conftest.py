import json
import os
import subprocess
import sys
import textwrap
from pathlib import Path

import pytest

from pcat.patterns.singleton import Singleton, ThreadSafeSingleton


def write(p: Path, text: str) -> Path:
    """Записывает текст в файл, создавая родительские директории при необходимости."""
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")
    return p


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    # тесты не должны зависеть от окружения разработчика
    monkeypatch.delenv("PCAT_CATALOG", raising=False)
    monkeypatch.delenv("PCAT_DEBUG", raising=False)


@pytest.fixture(autouse=True)
def _reset_singletons():
    Singleton.reset()
    ThreadSafeSingleton.reset()
    yield
    Singleton.reset()
    ThreadSafeSingleton.reset()


@pytest.fixture
def mini_catalog(tmp_path: Path) -> Path:
    """Каталог из двух паттернов; у prototype намеренно неверный ожидаемый вывод."""
    return write(
        tmp_path / "mini.yaml",
        textwrap.dedent("""
        title: "Мини"
        intro: "Короткий каталог для тестов."
        categories:
          - id: creational
            title: "Порождающие паттерны"
            patterns:
              - id: builder
                title: "Строитель (Builder)"
                expected_output:
                  - "Car(make=Toyota, model=Camry, year=2022)"
              - id: prototype
                title: "Прототип (Prototype)"
                expected_output:
                  - "совсем не то"
          - id: structural
            title: "Структурные паттерны"
            patterns: []
        """).strip() + "\n",
    )


def run_cli(cwd: Path, *args: str, env_extra: dict | None = None) -> subprocess.CompletedProcess:
    env = os.environ.copy()
    env["PYTHONIOENCODING"] = "utf-8"
    env.pop("PCAT_CATALOG", None)
    if env_extra:
        env.update(env_extra)
    return subprocess.run(
        [sys.executable, "-m", "pcat.cli", *args],
        cwd=cwd, env=env, capture_output=True, text=True, encoding="utf-8"
    )


def jload(s: str):
    return json.loads(s)
