"""
Prometheus Metrics — rule evaluation observability.

Exposes counters for:
- Rule failures, labelled by rule name and error kind
- Input conversion failures in the multi-field validator

Counting is skipped entirely when ``settings.METRICS_ENABLED`` is false.

Usage
-----
    from fieldcheck.validation.metrics import record_rule_failure

    record_rule_failure("max_len", "length_out_of_bounds")
"""
from __future__ import annotations

import logging

from prometheus_client import Counter

from fieldcheck.config import settings

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metric definitions
# ---------------------------------------------------------------------------

# Total failing rule evaluations, labelled by rule and error kind.
RULE_FAILURES: Counter = Counter(
    "fieldcheck_rule_failures_total",
    "Total failing rule evaluations by rule and error kind",
    ["rule", "kind"],
)

# Inputs rejected before any rule could run.
CONVERSION_FAILURES: Counter = Counter(
    "fieldcheck_conversion_failures_total",
    "Inputs that could not be converted to a field mapping",
)


# ---------------------------------------------------------------------------
# Convenience helpers
# ---------------------------------------------------------------------------

def record_rule_failure(rule: str, kind: str) -> None:
    """Increment the rule failure counter for *rule* / *kind*."""
    if settings.METRICS_ENABLED:
        RULE_FAILURES.labels(rule=rule, kind=kind).inc()


def record_conversion_failure() -> None:
    """Increment the conversion failure counter."""
    if settings.METRICS_ENABLED:
        CONVERSION_FAILURES.inc()
