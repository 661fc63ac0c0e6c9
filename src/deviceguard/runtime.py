# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level DeviceGuard facade for scan and compatibility workflows."""

from __future__ import annotations

from .compatibility import CompatibilityChecker
from .config import ScanSettings, load_scan_settings
from .device import DeviceInspector
from .models import DeviceInfo, JailbreakTool, ScanResult
from .platform import DevicePlatform, create_default_platform
from .scan import SecurityChecker


class DeviceGuard:
    """
    Convenience wrapper that wires one platform across scanning and compatibility checks.

    Construct once per process and hand it to consumers; it holds no per-scan state.
    """

    def __init__(self, platform: DevicePlatform | None = None, settings: ScanSettings | None = None):
        self.settings = settings or load_scan_settings()
        self.platform = platform or create_default_platform()
        self.inspector = DeviceInspector(self.platform)
        self.security_checker = SecurityChecker(self.platform, self.settings, inspector=self.inspector)
        self.compatibility_checker = CompatibilityChecker(self.inspector)

    def perform_full_scan(self) -> ScanResult:
        return self.security_checker.perform_full_scan()

    async def perform_full_scan_async(self) -> ScanResult:
        return await self.security_checker.perform_full_scan_async()

    def get_device_info(self) -> DeviceInfo:
        return self.compatibility_checker.get_device_info()

    def check_compatibility(self) -> list[JailbreakTool]:
        return self.compatibility_checker.check_compatibility()

    def check_bootrom_vulnerabilities(self) -> list[str]:
        return self.compatibility_checker.check_bootrom_vulnerabilities()
