# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Check group exports."""

from .base import CheckContext, CheckGroup
from .jailbreak import JailbreakChecks, find_indicator_paths, has_jailbreak_apps, is_sandbox_intact
from .network import NetworkChecks
from .permissions import PermissionChecks
from .registry import CHECK_GROUPS
from .system import SystemChecks

__all__ = [
    "CHECK_GROUPS",
    "CheckContext",
    "CheckGroup",
    "JailbreakChecks",
    "NetworkChecks",
    "PermissionChecks",
    "SystemChecks",
    "find_indicator_paths",
    "has_jailbreak_apps",
    "is_sandbox_intact",
]
