from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from .catalog import Catalog, load_catalog, resolve_catalog_path
from .errors import PCatUserError, UnknownPatternError
from .jsonic import dumps as jdumps
from .render import demo_source, render_document
from .runner import run_demo, verify
from .version import tool_version


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="pcat",
        description="Справочник порождающих паттернов с исполняемыми примерами",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {tool_version()}")
    p.add_argument(
        "--catalog",
        metavar="PATH",
        help="альтернативный YAML-каталог (по умолчанию PCAT_CATALOG или встроенный)",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    sp_list = sub.add_parser("list", help="Разделы и паттерны (JSON)")
    sp_list.add_argument("--category", metavar="ID", help="только указанный раздел")

    sp_show = sub.add_parser("show", help="Описание и исходник примера")
    sp_show.add_argument("pattern", help="id или псевдоним паттерна")

    sp_run = sub.add_parser("run", help="Выполнить пример(ы) и напечатать вывод")
    sp_run.add_argument("pattern", help="id или псевдоним паттерна, либо 'all'")

    sp_verify = sub.add_parser("verify", help="Сверить вывод примеров с каталогом (JSON)")
    sp_verify.add_argument("patterns", nargs="*", help="id паттернов (по умолчанию все)")

    sp_render = sub.add_parser("render", help="Справочник в Markdown")
    sp_render.add_argument("-o", "--output", metavar="FILE", help="записать в файл вместо stdout")

    return p


def _find(catalog: Catalog, key: str):
    entry = catalog.find(key)
    if entry is None:
        raise UnknownPatternError(key, catalog.pattern_ids())
    return entry


def _cmd_list(catalog: Catalog, category: Optional[str]) -> Dict[str, Any]:
    cats = catalog.categories
    if category:
        cat = catalog.category(category)
        if cat is None:
            raise PCatUserError(
                f"Unknown category '{category}' (available: {', '.join(c.id for c in cats)})"
            )
        cats = [cat]
    return {"categories": [c.to_dict() for c in cats]}


def _cmd_show(catalog: Catalog, key: str) -> str:
    entry = _find(catalog, key)
    cat = catalog.category_of(entry.id)
    lines: List[str] = [entry.title]
    if cat is not None:
        lines.append(f"Раздел: {cat.title}")
    lines.append("")
    if entry.summary:
        lines.extend([entry.summary, ""])
    lines.append(demo_source(entry.id).rstrip("\n"))
    return "\n".join(lines) + "\n"


def _cmd_run(catalog: Catalog, key: str) -> int:
    if key == "all":
        ids = catalog.pattern_ids()
        multi = True
    else:
        ids = [_find(catalog, key).id]
        multi = False

    rc = 0
    for pid in ids:
        run = run_demo(pid)
        if multi:
            sys.stdout.write(f"== {pid}\n")
        for line in run.lines:
            sys.stdout.write(line + "\n")
        if not run.ok:
            sys.stderr.write(f"Demo '{pid}' failed: {run.error}\n")
            rc = 1
    return rc


def main(argv: list[str] | None = None) -> int:
    ns = _build_parser().parse_args(argv)

    try:
        catalog = load_catalog(ns.catalog)

        if ns.cmd == "list":
            sys.stdout.write(jdumps(_cmd_list(catalog, ns.category)))
            return 0

        if ns.cmd == "show":
            sys.stdout.write(_cmd_show(catalog, ns.pattern))
            return 0

        if ns.cmd == "run":
            return _cmd_run(catalog, ns.pattern)

        if ns.cmd == "verify":
            report = verify(
                catalog,
                ns.patterns or None,
                catalog_label=str(resolve_catalog_path(ns.catalog)),
            )
            sys.stdout.write(jdumps(report.model_dump(mode="json", by_alias=True)))
            return 0 if report.ok else 1

        if ns.cmd == "render":
            doc_text = render_document(catalog)
            if ns.output:
                out = Path(ns.output)
                out.parent.mkdir(parents=True, exist_ok=True)
                out.write_text(doc_text, encoding="utf-8")
            else:
                sys.stdout.write(doc_text)
            return 0

    except PCatUserError as e:
        # Ожидаемые ошибки пользователя — без трейсбека
        sys.stderr.write(f"Error: {e}\n")
        return 2

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
