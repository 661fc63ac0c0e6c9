# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for DeviceGuard."""

import os
from dataclasses import dataclass

DEFAULT_SANDBOX_DIR = "/tmp"


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


@dataclass
class ScanSettings:
    """Scan engine defaults."""

    sandbox_dir: str = DEFAULT_SANDBOX_DIR
    concurrent_groups: bool = False
    max_workers: int = 4

    @classmethod
    def from_env(cls) -> "ScanSettings":
        """Create settings from environment variables (evaluated at call time)."""
        max_workers = _int_env("DEVICEGUARD_MAX_WORKERS", cls.max_workers)
        if max_workers <= 0:
            max_workers = cls.max_workers
        return cls(
            sandbox_dir=_str_env("DEVICEGUARD_SANDBOX_DIR", cls.sandbox_dir),
            concurrent_groups=_bool_env("DEVICEGUARD_CONCURRENT_GROUPS", cls.concurrent_groups),
            max_workers=max_workers,
        )


def load_scan_settings() -> ScanSettings:
    """Load scan settings from environment with sensible defaults."""
    return ScanSettings.from_env()
