# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Severity-label utilities shared by the check model and scan aggregation.

Severity labels form a total order (``safe < low < medium < high < critical``).
This module centralizes the ordering so aggregation and display agree on it.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Final

SEVERITY_ORDER: Final[dict[str, int]] = {"safe": 0, "low": 1, "medium": 2, "high": 3, "critical": 4}
_SEVERITY_STEPS: Final[tuple[str, ...]] = ("safe", "low", "medium", "high", "critical")

SEVERITY_COLORS: Final[dict[str, str]] = {
    "safe": "#22C55E",
    "low": "#3B82F6",
    "medium": "#F59E0B",
    "high": "#F97316",
    "critical": "#EF4444",
}


def _normalize(severity: Any) -> str:
    # Enum members carry their label on `.value`; plain strings pass through.
    return str(getattr(severity, "value", severity) or "").strip().lower()


def severity_score(severity: Any) -> int:
    """Return a numeric rank for a severity label (unknown labels rank as safe)."""
    return SEVERITY_ORDER.get(_normalize(severity), 0)


def severity_label(score: int) -> str:
    """Map a numeric rank back into a severity label, clamping out-of-range values."""
    return _SEVERITY_STEPS[max(0, min(int(score), len(_SEVERITY_STEPS) - 1))]


def max_severity(severities: Iterable[Any], *, default: str = "safe") -> str:
    """Return the highest severity label in ``severities`` (``default`` when empty)."""
    best: int | None = None
    for severity in severities:
        score = severity_score(severity)
        if best is None or score > best:
            best = score
    return default if best is None else severity_label(best)


__all__ = [
    "SEVERITY_COLORS",
    "SEVERITY_ORDER",
    "max_severity",
    "severity_label",
    "severity_score",
]
