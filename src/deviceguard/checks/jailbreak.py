# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Jailbreak indicator checks: filesystem artifacts, package manager apps, sandbox boundary."""

from __future__ import annotations

import logging
import os
import uuid
from collections.abc import Iterable

from ..errors import categorize_exception, error_category_to_reason
from ..models import CheckCategory, SecurityCheck, Severity
from ..platform import DevicePlatform
from .base import CheckContext, CheckGroup
from .constants import (
    JAILBREAK_APP_SCHEMES,
    JAILBREAK_INDICATOR_PATHS,
    SANDBOX_PROBE_CONTENT,
    SANDBOX_PROBE_PREFIX,
)

logger = logging.getLogger(__name__)


def find_indicator_paths(platform: DevicePlatform, paths: Iterable[str] = JAILBREAK_INDICATOR_PATHS) -> list[str]:
    """Return the indicator paths present on the device; unreadable paths count as absent."""
    found: list[str] = []
    for path in paths:
        try:
            exists = platform.path_exists(path)
        except Exception as exc:  # noqa: BLE001
            logger.debug("Existence probe for %s failed: %s", path, error_category_to_reason(categorize_exception(exc)))
            continue
        if exists:
            found.append(path)
    return found


def has_jailbreak_apps(platform: DevicePlatform, schemes: Iterable[str] = JAILBREAK_APP_SCHEMES) -> bool:
    """Return True when any package manager scheme resolves; undeterminable probes count as not found."""
    for scheme in schemes:
        url = f"{scheme}://"
        try:
            if platform.can_open_url(url):
                logger.debug("Jailbreak app scheme resolved: %s", url)
                return True
        except Exception as exc:  # noqa: BLE001
            logger.debug("URL probe for %s failed: %s", url, exc)
    return False


def is_sandbox_intact(platform: DevicePlatform, directory: str) -> bool:
    """
    Probe the sandbox boundary by writing a scratch file under ``directory``.

    The verdict is inverted: a successful write means the boundary is broken
    (returns False), any failure to write means it holds (returns True). The
    scratch file gets a fresh name per call and is removed on every exit path.
    """
    probe_path = os.path.join(directory, f"{SANDBOX_PROBE_PREFIX}{uuid.uuid4()}")
    try:
        platform.write_text(probe_path, SANDBOX_PROBE_CONTENT)
    except Exception as exc:  # noqa: BLE001
        logger.debug("Sandbox write to %s refused: %s", probe_path, error_category_to_reason(categorize_exception(exc)))
        return True
    finally:
        _remove_scratch(platform, probe_path)
    logger.debug("Sandbox write to %s succeeded", probe_path)
    return False


def _remove_scratch(platform: DevicePlatform, path: str) -> None:
    try:
        if platform.path_exists(path):
            platform.remove(path)
    except Exception as exc:  # noqa: BLE001
        logger.warning("Could not remove sandbox probe file %s: %s", path, exc)


class JailbreakChecks(CheckGroup):
    name = "jailbreak"
    category = CheckCategory.JAILBREAK
    priority = 10

    def run(self, context: CheckContext) -> list[SecurityCheck]:
        platform = context.platform
        indicators = find_indicator_paths(platform)
        if indicators:
            logger.info("Jailbreak indicator paths present: %s", ", ".join(indicators))

        return [
            SecurityCheck(
                name="Jailbreak Detection",
                category=self.category,
                description="Checks for common jailbreak indicators and modified system files",
                recommendation="If jailbroken, consider restoring iOS from a backup or using Recovery Mode",
                severity=Severity.CRITICAL,
                passed=not indicators,
            ),
            SecurityCheck(
                name="Suspicious Apps",
                category=self.category,
                description="Scans for known jailbreak and piracy apps",
                recommendation="Remove any suspicious or unauthorized applications",
                severity=Severity.HIGH,
                passed=not has_jailbreak_apps(platform),
            ),
            SecurityCheck(
                name="Sandbox Integrity",
                category=self.category,
                description="Verifies app sandbox is not compromised",
                recommendation="Ensure device is running latest iOS version",
                severity=Severity.HIGH,
                passed=is_sandbox_intact(platform, context.settings.sandbox_dir),
            ),
        ]
