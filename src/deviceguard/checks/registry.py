# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Check group registry, in scan order."""

from .jailbreak import JailbreakChecks
from .network import NetworkChecks
from .permissions import PermissionChecks
from .system import SystemChecks

CHECK_GROUPS = sorted(
    [
        JailbreakChecks(),
        SystemChecks(),
        PermissionChecks(),
        NetworkChecks(),
    ],
    key=lambda group: group.priority,
)

__all__ = ["CHECK_GROUPS"]
