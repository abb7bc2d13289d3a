"""Shared utilities for the structural lint checks."""

from __future__ import annotations

import ast
import sys
import tokenize
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]

PACKAGE = "sandbench"
SRC_FILE_LINES = 300


def package_dir(root: Path) -> Path:
    return root / PACKAGE


def config_dir(root: Path) -> Path:
    return root / PACKAGE / "config"


def tests_dir(root: Path) -> Path:
    return root / "tests"


def rel(path: Path, root: Path = ROOT) -> str:
    """Return *path* relative to *root* as a string."""
    try:
        return str(path.relative_to(root))
    except ValueError:
        return str(path)


def iter_python_files(*dirs: Path) -> list[Path]:
    """Return sorted .py files under *dirs*, skipping ``__pycache__``."""
    files: list[Path] = []
    for d in dirs:
        if not d.is_dir():
            continue
        files.extend(py for py in sorted(d.rglob("*.py")) if "__pycache__" not in py.parts)
    return files


def parse_source(filepath: Path) -> tuple[str, ast.Module] | None:
    """Read and parse a Python file, returning ``(source, tree)`` or ``None``."""
    try:
        source = filepath.read_text(encoding="utf-8")
        return source, ast.parse(source, filename=str(filepath))
    except (OSError, UnicodeDecodeError, SyntaxError):
        return None


def comment_lines(filepath: Path) -> set[int]:
    """Return 1-based line numbers holding a comment token."""
    comments: set[int] = set()
    try:
        with filepath.open("rb") as f:
            for tok in tokenize.tokenize(f.readline):
                if tok.type == tokenize.COMMENT:
                    comments.add(tok.start[0])
    except tokenize.TokenError:
        pass
    return comments


def docstring_lines(tree: ast.AST) -> set[int]:
    """Return 1-based line numbers occupied by module/class/function docstrings."""
    lines: set[int] = set()
    for node in ast.walk(tree):
        if not isinstance(node, (ast.Module, ast.FunctionDef, ast.AsyncFunctionDef, ast.ClassDef)):
            continue
        body = getattr(node, "body", None)
        if not body:
            continue
        first = body[0]
        if isinstance(first, ast.Expr) and isinstance(first.value, ast.Constant) and isinstance(first.value.value, str):
            lines.update(range(first.lineno, first.end_lineno + 1))
    return lines


def report(header: str, violations: list[str]) -> int:
    """Print *violations* to stderr under *header* and return an exit code."""
    if not violations:
        return 0
    print(f"{header}:", file=sys.stderr)
    for violation in violations:
        print(violation, file=sys.stderr)
    return 1


__all__ = [
    "PACKAGE",
    "ROOT",
    "SRC_FILE_LINES",
    "comment_lines",
    "config_dir",
    "docstring_lines",
    "iter_python_files",
    "package_dir",
    "parse_source",
    "rel",
    "report",
    "tests_dir",
]
