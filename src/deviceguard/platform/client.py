# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Device platform abstraction and factory."""

from typing import Protocol


class DevicePlatform(Protocol):
    """Minimal protocol for the device state probes the engine relies on."""

    def model(self) -> str: ...

    def system_version(self) -> str: ...

    def hardware_identifier(self) -> str: ...

    def path_exists(self, path: str) -> bool: ...

    def can_open_url(self, url: str) -> bool: ...

    def write_text(self, path: str, text: str) -> None: ...

    def remove(self, path: str) -> None: ...

    def can_evaluate_owner_authentication(self) -> bool: ...


def create_default_platform() -> DevicePlatform:
    """Factory for the platform backed by the running host."""
    from .local import LocalPlatform

    return LocalPlatform()
