# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""OS version parsing utilities."""

from __future__ import annotations

import re
from dataclasses import dataclass

_INTEGER_COMPONENT = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class OsVersion:
    major: int
    minor: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"

    def to_tuple(self) -> tuple[int, int]:
        return (self.major, self.minor)


def version_components(version: str | None) -> list[str]:
    """Split a dotted version string, dropping empty components (``"16..2"`` -> ``["16", "2"]``)."""
    return [part for part in str(version or "").split(".") if part]


def _component_to_int(component: str | None) -> int:
    if component is None or not _INTEGER_COMPONENT.fullmatch(component):
        return 0
    return int(component)


def parse_os_version(version: str | None) -> OsVersion:
    """
    Parse major/minor from an OS version string.

    Never raises: a missing or non-integer component parses as 0, so
    ``"17.beta"`` is ``17.0`` and ``"unknown"`` is ``0.0``.
    """
    components = version_components(version)
    major = _component_to_int(components[0] if components else None)
    minor = _component_to_int(components[1] if len(components) > 1 else None)
    return OsVersion(major=major, minor=minor)


__all__ = ["OsVersion", "parse_os_version", "version_components"]
