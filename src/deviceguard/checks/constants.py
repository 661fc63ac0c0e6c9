# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe targets used by the check groups."""

# Jailbreak tool install locations plus binaries a stock device does not ship.
JAILBREAK_INDICATOR_PATHS: tuple[str, ...] = (
    "/Applications/Cydia.app",
    "/Applications/Sileo.app",
    "/Applications/Zebra.app",
    "/Library/MobileSubstrate/MobileSubstrate.dylib",
    "/usr/sbin/sshd",
    "/bin/bash",
    "/usr/bin/ssh",
    "/etc/ssh/sshd_config",
)

# Package manager identifiers, probed as "<identifier>://" URLs.
JAILBREAK_APP_SCHEMES: tuple[str, ...] = (
    "com.saurik.Cydia",
    "com.sileo.Sileo",
    "org.zebra.Zebra",
    "com.getdelta.Delta",
)

SANDBOX_PROBE_PREFIX = "sandbox_test_"
SANDBOX_PROBE_CONTENT = "test"

# Minimum major OS release still considered current, and the release below
# which an outdated OS is rated high rather than low.
CURRENT_OS_MAJOR = 15
OS_HIGH_SEVERITY_BELOW_MAJOR = 16
