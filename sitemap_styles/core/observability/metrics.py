from __future__ import annotations

from collections import Counter
from typing import Dict

from prometheus_client import Counter as PromCounter

# Named counters (custom)
_NAMED = Counter()

STYLESHEET_RENDERS_TOTAL = PromCounter(
    "sitemaps_stylesheet_renders_total",
    "Stylesheet render calls by variant",
    ["variant"],
)


def reset_metrics() -> None:
    """Test helper: clears named counters to avoid cross-test leakage."""
    _NAMED.clear()


def inc_named(name: str, value: int = 1) -> None:
    """Increment a named counter (health checks, renders)."""
    if not name:
        return
    _NAMED[name] += int(value)


def inc_render(variant: str) -> None:
    STYLESHEET_RENDERS_TOTAL.labels(variant=variant).inc()
    inc_named(f"stylesheet_render_{variant}")


def snapshot_named() -> Dict[str, int]:
    return dict(_NAMED)
