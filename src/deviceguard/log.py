# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for DeviceGuard."""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV = "DEVICEGUARD_LOG_LEVEL"
LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL = "WARNING"


def resolve_log_level(level: str | None = None) -> int:
    """
    Pick the effective level: explicit argument, then DEVICEGUARD_LOG_LEVEL, then WARNING.

    Names outside LOG_LEVELS resolve to WARNING.
    """
    name = (level or os.getenv(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).strip().upper()
    if name not in LOG_LEVELS:
        name = DEFAULT_LOG_LEVEL
    return getattr(logging, name)


def setup_logging(level: str | None = None) -> None:
    """Configure standard logging for CLI/library use."""
    logging.basicConfig(
        level=resolve_log_level(level),
        format="%(levelname)s %(name)s: %(message)s",
    )


__all__ = ["LOG_LEVELS", "resolve_log_level", "setup_logging"]
