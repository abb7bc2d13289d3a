"""Structural lint checks for the sandbench repository.

Package layout
--------------
shared.py           Path constants, file iteration, parsing and violation
                    reporting used by every check.
__main__.py         Runs every check: ``python -m linting``.

structure/
    file_length.py      Package modules must stay under the code-line limit.

modules/
    config_purity.py    Config modules are declarative and never import siblings.

testing/
    layout.py           Unit tests live in domain folders, use plain filenames,
                        and share the single tests/conftest.py.

Every check exposes ``collect_violations(root)`` returning report lines and
``main()`` returning a process exit code.
"""
