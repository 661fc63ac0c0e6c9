# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Compatibility checker: device inspection matched against the tool catalog."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..device import DeviceInspector
from ..models import DeviceInfo, JailbreakTool
from .bootrom import check_bootrom_vulnerabilities
from .catalog import CatalogEntry, evaluate
from .registry import CATALOG

logger = logging.getLogger(__name__)


class CompatibilityChecker:
    """Stateless service; verdicts are recomputed against the current device on every call."""

    def __init__(
        self,
        inspector: DeviceInspector | None = None,
        catalog: Sequence[CatalogEntry] = CATALOG,
    ):
        self.inspector = inspector or DeviceInspector()
        self.catalog = tuple(catalog)

    def get_device_info(self) -> DeviceInfo:
        return self.inspector.inspect()

    def check_compatibility(self) -> list[JailbreakTool]:
        device_info = self.get_device_info()
        tools = evaluate(self.catalog, device_info)
        logger.debug(
            "Compatibility for %s %s: %s",
            device_info.model,
            device_info.os_version,
            ", ".join(tool.id for tool in tools if tool.is_compatible) or "none",
        )
        return tools

    def compatible_tools(self) -> list[JailbreakTool]:
        return [tool for tool in self.check_compatibility() if tool.is_compatible]

    def check_bootrom_vulnerabilities(self) -> list[str]:
        # Only iPhone hardware identifiers are meaningful for the checkm8 lookup.
        if "iPhone" not in self.get_device_info().model:
            return []
        return check_bootrom_vulnerabilities(self.inspector.hardware_identifier())
