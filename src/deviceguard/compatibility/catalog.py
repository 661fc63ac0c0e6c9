# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Catalog entry type and the generic matching routine."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from ..models import DeviceInfo, JailbreakTool

VersionPredicate = Callable[[int, int], bool]


@dataclass(frozen=True)
class CatalogEntry:
    """
    Static tool metadata plus a predicate over (major, minor) OS version.

    ``requirement`` is the human-readable support window quoted in the
    incompatibility reason; ``supported_reason`` is shown when the predicate holds.
    """

    id: str
    name: str
    description: str
    website: str
    supported_versions: tuple[str, ...]
    supported_devices: tuple[str, ...]
    features: tuple[str, ...]
    requirement: str
    supported_reason: str
    predicate: VersionPredicate

    def matches(self, major: int, minor: int) -> bool:
        return bool(self.predicate(major, minor))

    def unsupported_reason(self, os_version: str) -> str:
        return f"iOS version {os_version} not supported. {self.name} requires {self.requirement}"

    def evaluate(self, device_info: DeviceInfo) -> JailbreakTool:
        compatible = self.matches(device_info.major_version, device_info.minor_version)
        return JailbreakTool(
            id=self.id,
            name=self.name,
            description=self.description,
            website=self.website,
            supported_versions=self.supported_versions,
            supported_devices=self.supported_devices,
            is_compatible=compatible,
            compatibility_reason=self.supported_reason if compatible else self.unsupported_reason(device_info.os_version),
            features=self.features,
        )


def evaluate(catalog: Iterable[CatalogEntry], device_info: DeviceInfo) -> list[JailbreakTool]:
    """Evaluate every entry against ``device_info``, preserving catalog order."""
    return [entry.evaluate(device_info) for entry in catalog]


__all__ = ["CatalogEntry", "VersionPredicate", "evaluate"]
