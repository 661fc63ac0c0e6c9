# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for DeviceGuard."""

from .check import CheckCategory, SecurityCheck, Severity
from .device import DeviceInfo
from .scan import ScanResult
from .tool import JailbreakTool

__all__ = [
    "CheckCategory",
    "DeviceInfo",
    "JailbreakTool",
    "ScanResult",
    "SecurityCheck",
    "Severity",
]
