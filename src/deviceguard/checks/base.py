# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Check group base classes and context."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..config import ScanSettings
from ..device import DeviceInspector
from ..models import CheckCategory, SecurityCheck
from ..platform import DevicePlatform


@dataclass
class CheckContext:
    platform: DevicePlatform
    inspector: DeviceInspector
    settings: ScanSettings


class CheckGroup(ABC):
    name: str = "base"
    category: CheckCategory = CheckCategory.SYSTEM
    priority: int = 50

    @abstractmethod
    def run(self, context: CheckContext) -> list[SecurityCheck]: ...

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"{self.__class__.__name__}(priority={self.priority})"
