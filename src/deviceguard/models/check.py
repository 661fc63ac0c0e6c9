# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Security check domain models."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Mapping

from ..utils.severity import SEVERITY_COLORS, severity_score


class Severity(str, Enum):
    SAFE = "safe"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        return severity_score(self.value)

    @property
    def color(self) -> str:
        return SEVERITY_COLORS[self.value]

    @property
    def label(self) -> str:
        return self.value.capitalize()

    # str ordering would be alphabetical; severities order by rank.
    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank >= other.rank

    @classmethod
    def parse(cls, value: Any, default: Severity | None = None) -> Severity:
        """Coerce a label into a Severity, falling back to ``default`` (LOW) for unknown values."""
        try:
            return cls(str(getattr(value, "value", value) or "").strip().lower())
        except ValueError:
            return default or cls.LOW


class CheckCategory(str, Enum):
    JAILBREAK = "jailbreak"
    SYSTEM = "system"
    PERMISSIONS = "permissions"
    NETWORK = "network"

    @property
    def label(self) -> str:
        return self.value.capitalize()


def _new_id() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _parse_timestamp(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str) and value:
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            pass
    return _utcnow()


@dataclass(frozen=True)
class SecurityCheck:
    """
    Outcome of a single evaluation.

    ``severity`` is the penalty level applied when the check fails; it is
    independent of ``passed``, so a passing critical check carries no risk.
    """

    name: str
    category: CheckCategory
    description: str
    recommendation: str
    severity: Severity = Severity.LOW
    passed: bool = False
    id: str = field(default_factory=_new_id)
    timestamp: datetime = field(default_factory=_utcnow)

    @property
    def failed(self) -> bool:
        return not self.passed

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category.value,
            "description": self.description,
            "recommendation": self.recommendation,
            "severity": self.severity.value,
            "passed": self.passed,
            "timestamp": self.timestamp.isoformat(),
        }

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> SecurityCheck:
        passed = data.get("passed", False)
        if not isinstance(passed, bool):
            raise ValueError(f"check field 'passed' must be a bool, got {passed!r}")
        return cls(
            id=str(data.get("id") or _new_id()),
            name=str(data.get("name") or ""),
            category=CheckCategory(str(data.get("category") or "").strip().lower()),
            description=str(data.get("description") or ""),
            recommendation=str(data.get("recommendation") or ""),
            severity=Severity.parse(data.get("severity")),
            passed=passed,
            timestamp=_parse_timestamp(data.get("timestamp")),
        )


__all__ = ["CheckCategory", "SecurityCheck", "Severity"]
