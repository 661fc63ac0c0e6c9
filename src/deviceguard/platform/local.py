# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""DevicePlatform implementation backed by the running interpreter's host."""

from __future__ import annotations

import logging
import os
import platform
import sys

from .client import DevicePlatform

logger = logging.getLogger(__name__)


class LocalPlatform(DevicePlatform):
    """
    Reads device state from the host the interpreter runs on.

    On iOS builds of CPython, ``platform.ios_ver()`` supplies the model and
    system version; elsewhere the host OS name and release stand in. URL
    scheme resolution and owner-authentication policy have no portable API,
    so they report "not available" rather than guessing.
    """

    def model(self) -> str:
        ios_ver = getattr(platform, "ios_ver", None)
        if sys.platform == "ios" and ios_ver is not None:
            return ios_ver().model or "iPhone"
        return platform.system() or "Unknown"

    def system_version(self) -> str:
        ios_ver = getattr(platform, "ios_ver", None)
        if sys.platform == "ios" and ios_ver is not None:
            return ios_ver().release
        if sys.platform == "darwin":
            return platform.mac_ver()[0] or platform.release()
        return platform.release()

    def hardware_identifier(self) -> str:
        # utsname.machine is the raw token ("iPhone10,1") on Apple mobile hardware.
        return os.uname().machine if hasattr(os, "uname") else platform.machine()

    def path_exists(self, path: str) -> bool:
        return os.path.exists(path)

    def can_open_url(self, url: str) -> bool:
        logger.debug("URL scheme resolution unavailable on %s; treating %s as not found", sys.platform, url)
        return False

    def write_text(self, path: str, text: str) -> None:
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(text)

    def remove(self, path: str) -> None:
        os.remove(path)

    def can_evaluate_owner_authentication(self) -> bool:
        logger.debug("Owner authentication policy unavailable on %s", sys.platform)
        return False
