# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Security checker: runs every check group and aggregates a scan result."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from ..checks import CHECK_GROUPS, CheckContext, CheckGroup
from ..config import ScanSettings, load_scan_settings
from ..device import DeviceInspector
from ..models import ScanResult, SecurityCheck
from ..platform import DevicePlatform, create_default_platform

logger = logging.getLogger(__name__)


class SecurityChecker:
    """
    Coordinates check groups for a full device scan.

    Groups share only read-only device state, so they may run on a thread
    pool; results are always reassembled in registry order.
    """

    def __init__(
        self,
        platform: DevicePlatform | None = None,
        settings: ScanSettings | None = None,
        groups: Sequence[CheckGroup] | None = None,
        inspector: DeviceInspector | None = None,
    ):
        self.platform = platform or create_default_platform()
        self.settings = settings or load_scan_settings()
        self.groups: list[CheckGroup] = list(CHECK_GROUPS if groups is None else groups)
        self.inspector = inspector or DeviceInspector(self.platform)

    def _context(self) -> CheckContext:
        return CheckContext(platform=self.platform, inspector=self.inspector, settings=self.settings)

    def run_group(self, name: str) -> list[SecurityCheck]:
        for group in self.groups:
            if group.name == name:
                return self._run(group, self._context())
        raise KeyError(name)

    def perform_full_scan(self) -> ScanResult:
        context = self._context()
        if self.settings.concurrent_groups and len(self.groups) > 1:
            per_group = self._run_concurrent(context)
        else:
            per_group = [self._run(group, context) for group in self.groups]

        result = ScanResult.from_checks(check for checks in per_group for check in checks)
        logger.info(
            "Scan %s complete: %d checks, %d failed, overall %s",
            result.id,
            len(result.checks),
            result.vulnerability_count,
            result.overall_severity.value,
        )
        return result

    async def perform_full_scan_async(self) -> ScanResult:
        return await asyncio.to_thread(self.perform_full_scan)

    def _run_concurrent(self, context: CheckContext) -> list[list[SecurityCheck]]:
        workers = max(1, min(self.settings.max_workers, len(self.groups)))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="deviceguard-scan") as executor:
            futures = [executor.submit(self._run, group, context) for group in self.groups]
            # Collect in submission order, not completion order.
            return [future.result() for future in futures]

    @staticmethod
    def _run(group: CheckGroup, context: CheckContext) -> list[SecurityCheck]:
        try:
            checks = group.run(context)
        except Exception:
            logger.exception("Check group %s failed", group.name)
            raise
        logger.debug("Check group %s produced %d checks", group.name, len(checks))
        return checks
