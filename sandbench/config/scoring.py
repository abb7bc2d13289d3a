"""Composite scoring constants.

Scores are absolute: each timing metric is measured against a fixed ceiling,
so a provider's score does not depend on which other providers ran.
"""


# Anything at or above this many milliseconds scores 0
SCORE_CEILING_MS = 10_000.0

# Default timing weights (sum to 1.0)
WEIGHT_MEDIAN = 0.50
WEIGHT_P95 = 0.20
WEIGHT_P99 = 0.10
WEIGHT_MIN = 0.05
WEIGHT_MAX = 0.15

SCORE_DECIMALS = 2


__all__ = [
    "SCORE_CEILING_MS",
    "WEIGHT_MEDIAN",
    "WEIGHT_P95",
    "WEIGHT_P99",
    "WEIGHT_MIN",
    "WEIGHT_MAX",
    "SCORE_DECIMALS",
]
