# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Device inspector: reads model, OS version and hardware identifier."""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..errors import categorize_exception
from ..models import DeviceInfo
from ..platform import DevicePlatform, create_default_platform
from ..utils import parse_os_version

logger = logging.getLogger(__name__)


def _read(probe: Callable[[], str], name: str, default: str) -> str:
    try:
        value = probe()
    except Exception as exc:  # noqa: BLE001
        logger.debug("Platform probe %s failed (%s): %s", name, categorize_exception(exc).value, exc)
        return default
    return default if value is None else str(value)


class DeviceInspector:
    """Reads current device identity; every call re-reads the platform."""

    def __init__(self, platform: DevicePlatform | None = None):
        self.platform = platform or create_default_platform()

    def inspect(self) -> DeviceInfo:
        model = _read(self.platform.model, "model", "Unknown")
        os_version = _read(self.platform.system_version, "system_version", "")
        parsed = parse_os_version(os_version)
        return DeviceInfo(
            model=model,
            os_version=os_version,
            major_version=parsed.major,
            minor_version=parsed.minor,
        )

    def hardware_identifier(self) -> str:
        return _read(self.platform.hardware_identifier, "hardware_identifier", "")
