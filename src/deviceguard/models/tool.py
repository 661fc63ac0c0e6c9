# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Jailbreak tool descriptor returned by compatibility evaluation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class JailbreakTool:
    """Catalog metadata plus the compatibility verdict for one device."""

    id: str
    name: str
    description: str
    website: str
    supported_versions: tuple[str, ...]
    supported_devices: tuple[str, ...]
    is_compatible: bool
    compatibility_reason: str
    features: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "website": self.website,
            "supported_versions": list(self.supported_versions),
            "supported_devices": list(self.supported_devices),
            "is_compatible": self.is_compatible,
            "compatibility_reason": self.compatibility_reason,
            "features": list(self.features),
        }


__all__ = ["JailbreakTool"]
