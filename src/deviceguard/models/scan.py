# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Scan result model and severity aggregation."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from ..utils.severity import max_severity
from .check import CheckCategory, SecurityCheck, Severity, _new_id, _utcnow


@dataclass(frozen=True)
class ScanResult:
    """One full scan: the ordered checks plus derived verdicts."""

    checks: tuple[SecurityCheck, ...] = ()
    id: str = field(default_factory=_new_id)
    timestamp: datetime = field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        # Accept any iterable from callers but store an immutable sequence.
        if not isinstance(self.checks, tuple):
            object.__setattr__(self, "checks", tuple(self.checks))

    @classmethod
    def from_checks(cls, checks: Iterable[SecurityCheck]) -> ScanResult:
        return cls(checks=tuple(checks))

    @property
    def failed_checks(self) -> list[SecurityCheck]:
        return [check for check in self.checks if not check.passed]

    @property
    def overall_severity(self) -> Severity:
        """
        Worst severity among failed checks.

        Any failure yields at least LOW, even when the failed check itself
        is rated SAFE; no failures yields SAFE.
        """
        failed = self.failed_checks
        if not failed:
            return Severity.SAFE
        worst = Severity(max_severity(check.severity for check in failed))
        return max(worst, Severity.LOW)

    @property
    def vulnerability_count(self) -> int:
        return len(self.failed_checks)

    @property
    def is_secure(self) -> bool:
        return self.overall_severity == Severity.SAFE

    @property
    def headline(self) -> str:
        return "Device Secure" if self.is_secure else "Issues Found"

    @property
    def summary(self) -> str:
        count = self.vulnerability_count
        if count == 0:
            return "No issues found"
        return f"{count} issue{'s' if count > 1 else ''} found"

    def checks_by_category(self) -> dict[CheckCategory, list[SecurityCheck]]:
        """Group checks by category, keeping first-seen category order and check order."""
        grouped: dict[CheckCategory, list[SecurityCheck]] = {}
        for check in self.checks:
            grouped.setdefault(check.category, []).append(check)
        return grouped

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "timestamp": self.timestamp.isoformat(),
            "overall_severity": self.overall_severity.value,
            "vulnerability_count": self.vulnerability_count,
            "headline": self.headline,
            "summary": self.summary,
            "checks": [check.to_dict() for check in self.checks],
        }


__all__ = ["ScanResult"]
