#!/usr/bin/env python
"""Enforce a code-line limit per package module.

Blank lines, comment lines and docstrings are not counted. Barrel
``__init__.py`` files (imports, ``__all__`` and docstrings only) are exempt.
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path

from linting.shared import (
    ROOT,
    SRC_FILE_LINES,
    rel,
    report,
    package_dir,
    parse_source,
    comment_lines,
    docstring_lines,
    iter_python_files,
)


def _is_barrel_init(filepath: Path, tree: ast.Module) -> bool:
    if filepath.name != "__init__.py":
        return False
    for node in tree.body:
        if isinstance(node, (ast.Import, ast.ImportFrom, ast.Pass)):
            continue
        if isinstance(node, ast.Assign) and [getattr(t, "id", None) for t in node.targets] == ["__all__"]:
            continue
        if isinstance(node, ast.Expr) and isinstance(node.value, ast.Constant):
            continue
        return False
    return True


def count_code_lines(filepath: Path, source: str, tree: ast.Module) -> int:
    """Count lines that are not blank, comment-only or docstring."""
    skipped = comment_lines(filepath) | docstring_lines(tree)
    return sum(
        1
        for number, line in enumerate(source.splitlines(), start=1)
        if line.strip() and number not in skipped
    )


def collect_violations(root: Path = ROOT, limit: int = SRC_FILE_LINES) -> list[str]:
    violations: list[str] = []
    for py_file in iter_python_files(package_dir(root)):
        parsed = parse_source(py_file)
        if parsed is None:
            continue
        source, tree = parsed
        if _is_barrel_init(py_file, tree):
            continue
        code_lines = count_code_lines(py_file, source, tree)
        if code_lines > limit:
            violations.append(f"  {rel(py_file, root)}: {code_lines} code lines (limit {limit})")
    return violations


def main() -> int:
    return report("File length violations", collect_violations())


if __name__ == "__main__":
    sys.exit(main())
