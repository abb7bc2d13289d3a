"""Unit tests for the structural lint checks."""

from __future__ import annotations

from pathlib import Path

from linting.testing import layout
from linting.structure import file_length
from linting.modules import config_purity


def _write(root: Path, relative: str, text: str = "") -> Path:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_repository_passes_every_check() -> None:
    assert file_length.collect_violations() == []
    assert config_purity.collect_violations() == []
    assert layout.collect_violations() == []


def test_config_functions_classes_and_sibling_imports_are_flagged(tmp_path: Path) -> None:
    _write(tmp_path, "sandbench/config/__init__.py", "from .timeouts import X\n")
    _write(tmp_path, "sandbench/config/timeouts.py", "import os\n\nX = os.getenv('X', '1')\n")
    _write(tmp_path, "sandbench/config/derived.py", "from .timeouts import X\n\ndef double():\n    return X * 2\n")
    _write(tmp_path, "sandbench/config/shape.py", "from sandbench.config.timeouts import X\n\nclass Shape:\n    pass\n")

    violations = config_purity.collect_violations(tmp_path)

    assert len(violations) == 4
    assert any("derived.py: defines double" in v for v in violations)
    assert any("shape.py: defines Shape" in v for v in violations)
    assert sum("imports sibling config" in v for v in violations) == 2


def test_long_modules_are_flagged_but_barrels_and_docstrings_are_not(tmp_path: Path) -> None:
    docstring = '"""' + "\n".join(["doc"] * 50) + '\n"""\n'
    _write(tmp_path, "sandbench/short.py", docstring + "# note\n" * 20 + "A = 1\n" * 5)
    _write(tmp_path, "sandbench/long.py", "A = 1\n" * 12)
    _write(tmp_path, "sandbench/__init__.py", "from .short import A\n" * 20 + "__all__ = ['A']\n")

    violations = file_length.collect_violations(tmp_path, limit=10)

    assert violations == ["  sandbench/long.py: 12 code lines (limit 10)"]


def test_test_layout_violations(tmp_path: Path) -> None:
    _write(tmp_path, "tests/conftest.py")
    _write(tmp_path, "tests/unit/flat.py")
    _write(tmp_path, "tests/unit/sse/test_decoder.py")
    _write(tmp_path, "tests/unit/sse/conftest.py")
    _write(tmp_path, "tests/unit/sse/line_decoding.py")

    violations = layout.collect_violations(tmp_path)

    assert len(violations) == 3
    assert "tests/unit/flat.py" in violations[0]
    assert "test_ prefix" in violations[1]
    assert "tests/unit/sse/conftest.py" in violations[2]
