#!/usr/bin/env python
"""Keep config modules declarative.

Modules under sandbench/config/ hold constants and environment reads only:
no function or class definitions, and no imports from sibling config
modules. Each module reads its own variables.
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path

from linting.shared import ROOT, rel, report, config_dir, parse_source


def _config_modules(root: Path) -> list[Path]:
    directory = config_dir(root)
    if not directory.is_dir():
        return []
    return [p for p in sorted(directory.glob("*.py")) if p.name != "__init__.py"]


def _is_sibling_import(node: ast.ImportFrom, siblings: set[str]) -> bool:
    module = node.module or ""
    if node.level == 1:
        return module in siblings
    prefix = "sandbench.config."
    return node.level == 0 and module.startswith(prefix) and module[len(prefix) :] in siblings


def collect_violations(root: Path = ROOT) -> list[str]:
    modules = _config_modules(root)
    siblings = {p.stem for p in modules}
    violations: list[str] = []

    for py_file in modules:
        parsed = parse_source(py_file)
        if parsed is None:
            continue
        _source, tree = parsed
        for node in tree.body:
            if isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef, ast.ClassDef)):
                violations.append(f"  {rel(py_file, root)}: defines {node.name} (line {node.lineno})")
            elif isinstance(node, ast.ImportFrom) and _is_sibling_import(node, siblings):
                violations.append(f"  {rel(py_file, root)}: imports sibling config (line {node.lineno})")
    return violations


def main() -> int:
    return report("Config purity violations (config/ must be declarative)", collect_violations())


if __name__ == "__main__":
    sys.exit(main())
