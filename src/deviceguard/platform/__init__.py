# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Device platform exports."""

from .adapters import OverridePlatform, SnapshotPlatform, StubPlatform
from .client import DevicePlatform, create_default_platform
from .local import LocalPlatform

__all__ = [
    "DevicePlatform",
    "LocalPlatform",
    "OverridePlatform",
    "SnapshotPlatform",
    "StubPlatform",
    "create_default_platform",
]
