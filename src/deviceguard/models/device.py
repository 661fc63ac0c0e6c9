# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Device information snapshot."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class DeviceInfo:
    model: str
    os_version: str
    major_version: int
    minor_version: int

    @property
    def version_label(self) -> str:
        return f"iOS {self.os_version}" if self.os_version else "iOS (unknown)"

    def to_dict(self) -> dict[str, Any]:
        return {
            "model": self.model,
            "os_version": self.os_version,
            "major_version": self.major_version,
            "minor_version": self.minor_version,
        }


__all__ = ["DeviceInfo"]
