"""Test suite for sandbench.

Unit tests live under ``tests/unit/<domain>/`` in non-prefixed modules and are
collected by ``tests/conftest.py``. Shared fakes and stream builders live in
the ``helpers/`` subpackage.
"""
