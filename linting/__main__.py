"""Run every structural check and exit non-zero on any violation."""

from __future__ import annotations

import sys

from linting.testing import layout
from linting.structure import file_length
from linting.modules import config_purity

CHECKS = (file_length, config_purity, layout)


def main() -> int:
    return max(check.main() for check in CHECKS)


if __name__ == "__main__":
    sys.exit(main())
