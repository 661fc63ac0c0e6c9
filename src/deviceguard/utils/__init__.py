# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Utility exports."""

from .severity import (
    SEVERITY_COLORS,
    SEVERITY_ORDER,
    max_severity,
    severity_label,
    severity_score,
)
from .version import OsVersion, parse_os_version, version_components

__all__ = [
    "SEVERITY_COLORS",
    "SEVERITY_ORDER",
    "max_severity",
    "severity_label",
    "severity_score",
    "OsVersion",
    "parse_os_version",
    "version_components",
]
