# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Device security settings checks."""

from __future__ import annotations

import logging

from ..models import CheckCategory, SecurityCheck, Severity
from ..platform import DevicePlatform
from .base import CheckContext, CheckGroup

logger = logging.getLogger(__name__)


def owner_authentication_enabled(platform: DevicePlatform) -> bool:
    try:
        return bool(platform.can_evaluate_owner_authentication())
    except Exception as exc:  # noqa: BLE001
        logger.debug("Owner authentication probe failed: %s", exc)
        return False


class PermissionChecks(CheckGroup):
    name = "permissions"
    category = CheckCategory.PERMISSIONS
    priority = 30

    def run(self, context: CheckContext) -> list[SecurityCheck]:
        return [
            SecurityCheck(
                name="Passcode/Biometric",
                category=self.category,
                description="Verifies device has passcode or biometric authentication enabled",
                recommendation="Enable Face ID, Touch ID, or a strong passcode in Settings",
                severity=Severity.CRITICAL,
                passed=owner_authentication_enabled(context.platform),
            ),
            # Auto-lock and background refresh have no readable setting; reported as passing.
            SecurityCheck(
                name="Auto-Lock Enabled",
                category=self.category,
                description="Checks if auto-lock is configured",
                recommendation="Set auto-lock to 1-5 minutes in Settings > Display & Brightness",
                severity=Severity.MEDIUM,
                passed=True,
            ),
            SecurityCheck(
                name="Background App Refresh",
                category=self.category,
                description="Reviews background app refresh settings",
                recommendation="Disable background refresh for untrusted apps",
                severity=Severity.LOW,
                passed=True,
            ),
        ]
