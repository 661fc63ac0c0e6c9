# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
DeviceGuard package entrypoint.

This package provides an on-device rule engine that scans for jailbreak
indicators and matches the current OS version against a catalog of
jailbreak tools. Device access is abstracted behind an injectable platform
interface, and domain objects are modeled with typed dataclasses.
"""

from .compatibility import CATALOG, CatalogEntry, CompatibilityChecker, check_bootrom_vulnerabilities
from .config import ScanSettings, load_scan_settings
from .device import DeviceInspector
from .log import setup_logging
from .models import CheckCategory, DeviceInfo, JailbreakTool, ScanResult, SecurityCheck, Severity
from .platform import (
    DevicePlatform,
    LocalPlatform,
    OverridePlatform,
    SnapshotPlatform,
    StubPlatform,
    create_default_platform,
)
from .runtime import DeviceGuard
from .scan import SecurityChecker
from .version import __version__

__all__ = [
    "CATALOG",
    "CatalogEntry",
    "CheckCategory",
    "CompatibilityChecker",
    "DeviceGuard",
    "DeviceInfo",
    "DeviceInspector",
    "DevicePlatform",
    "JailbreakTool",
    "LocalPlatform",
    "OverridePlatform",
    "ScanResult",
    "ScanSettings",
    "SecurityCheck",
    "SecurityChecker",
    "Severity",
    "SnapshotPlatform",
    "StubPlatform",
    "check_bootrom_vulnerabilities",
    "create_default_platform",
    "load_scan_settings",
    "setup_logging",
    "__version__",
]
