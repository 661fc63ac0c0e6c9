# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Adapters that feed recorded or programmed device state through the DevicePlatform protocol."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from ..errors import SnapshotError
from .client import DevicePlatform

SNAPSHOT_KEYS = frozenset(
    {
        "model",
        "system_version",
        "hardware_identifier",
        "existing_paths",
        "openable_urls",
        "owner_authentication",
        "sandbox_writable",
    }
)


def _string_list(data: Mapping[str, Any], key: str) -> list[str]:
    raw = data.get(key)
    if raw is None:
        return []
    if isinstance(raw, str) or not isinstance(raw, Iterable):
        raise SnapshotError(f"snapshot field '{key}' must be a list of strings")
    return [str(item) for item in raw if item is not None]


def _bool_field(data: Mapping[str, Any], key: str) -> bool:
    raw = data.get(key, False)
    if not isinstance(raw, bool):
        raise SnapshotError(f"snapshot field '{key}' must be true or false")
    return raw


class SnapshotPlatform(DevicePlatform):
    """
    Platform backed by a recorded device snapshot.

    Writes never touch the host: a writable snapshot keeps scratch files in
    memory, a read-only one raises PermissionError like a sandboxed device.
    """

    def __init__(
        self,
        *,
        model: str = "iPhone",
        system_version: str = "",
        hardware_identifier: str = "",
        existing_paths: Iterable[str] = (),
        openable_urls: Iterable[str] = (),
        owner_authentication: bool = False,
        sandbox_writable: bool = False,
    ):
        self._model = model
        self._system_version = system_version
        self._hardware_identifier = hardware_identifier
        self._existing_paths = set(existing_paths)
        self._openable_urls = set(openable_urls)
        self._owner_authentication = owner_authentication
        self._sandbox_writable = sandbox_writable
        self._written: dict[str, str] = {}

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> SnapshotPlatform:
        if not isinstance(data, Mapping):
            raise SnapshotError("snapshot must be a JSON object")
        unknown = sorted(str(key) for key in data if key not in SNAPSHOT_KEYS)
        if unknown:
            raise SnapshotError(f"unknown snapshot fields: {', '.join(unknown)}")
        return cls(
            model=str(data.get("model") or "iPhone"),
            system_version=str(data.get("system_version") or ""),
            hardware_identifier=str(data.get("hardware_identifier") or ""),
            existing_paths=_string_list(data, "existing_paths"),
            openable_urls=_string_list(data, "openable_urls"),
            owner_authentication=_bool_field(data, "owner_authentication"),
            sandbox_writable=_bool_field(data, "sandbox_writable"),
        )

    @classmethod
    def from_file(cls, path: str | Path) -> SnapshotPlatform:
        try:
            raw = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise SnapshotError(f"cannot read snapshot {path}: {exc}") from exc
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise SnapshotError(f"snapshot {path} is not valid JSON: {exc}") from exc
        return cls.from_mapping(data)

    def model(self) -> str:
        return self._model

    def system_version(self) -> str:
        return self._system_version

    def hardware_identifier(self) -> str:
        return self._hardware_identifier

    def path_exists(self, path: str) -> bool:
        return path in self._existing_paths or path in self._written

    def can_open_url(self, url: str) -> bool:
        # Snapshots may list either bare schemes or full "<scheme>://" URLs.
        return url in self._openable_urls or url.split("://", 1)[0] in self._openable_urls

    def write_text(self, path: str, text: str) -> None:
        if not self._sandbox_writable:
            raise PermissionError(f"Operation not permitted: '{path}'")
        self._written[path] = text

    def remove(self, path: str) -> None:
        if path not in self._written:
            raise FileNotFoundError(path)
        del self._written[path]

    def can_evaluate_owner_authentication(self) -> bool:
        return self._owner_authentication

    @property
    def scratch_files(self) -> list[str]:
        return sorted(self._written)


class OverridePlatform(DevicePlatform):
    """Delegates to another platform, replacing selected identity fields."""

    def __init__(
        self,
        base: DevicePlatform,
        *,
        model: str | None = None,
        system_version: str | None = None,
        hardware_identifier: str | None = None,
    ):
        self._base = base
        self._model = model
        self._system_version = system_version
        self._hardware_identifier = hardware_identifier

    def model(self) -> str:
        return self._model if self._model is not None else self._base.model()

    def system_version(self) -> str:
        return self._system_version if self._system_version is not None else self._base.system_version()

    def hardware_identifier(self) -> str:
        if self._hardware_identifier is not None:
            return self._hardware_identifier
        return self._base.hardware_identifier()

    def path_exists(self, path: str) -> bool:
        return self._base.path_exists(path)

    def can_open_url(self, url: str) -> bool:
        return self._base.can_open_url(url)

    def write_text(self, path: str, text: str) -> None:
        self._base.write_text(path, text)

    def remove(self, path: str) -> None:
        self._base.remove(path)

    def can_evaluate_owner_authentication(self) -> bool:
        return self._base.can_evaluate_owner_authentication()


class StubPlatform(SnapshotPlatform):
    """Deterministic, programmable DevicePlatform for tests; records every probe call."""

    def __init__(self, *, errors: Mapping[str, BaseException] | None = None, **state: Any):
        super().__init__(**state)
        self._errors = dict(errors or {})
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    def _record(self, method: str, *args: Any) -> None:
        self.calls.append((method, args))
        error = self._errors.get(method)
        if error is not None:
            raise error

    def calls_to(self, method: str) -> list[tuple[Any, ...]]:
        return [args for name, args in self.calls if name == method]

    def model(self) -> str:
        self._record("model")
        return super().model()

    def system_version(self) -> str:
        self._record("system_version")
        return super().system_version()

    def hardware_identifier(self) -> str:
        self._record("hardware_identifier")
        return super().hardware_identifier()

    def path_exists(self, path: str) -> bool:
        self._record("path_exists", path)
        return super().path_exists(path)

    def can_open_url(self, url: str) -> bool:
        self._record("can_open_url", url)
        return super().can_open_url(url)

    def write_text(self, path: str, text: str) -> None:
        self._record("write_text", path, text)
        super().write_text(path, text)

    def remove(self, path: str) -> None:
        self._record("remove", path)
        super().remove(path)

    def can_evaluate_owner_authentication(self) -> bool:
        self._record("can_evaluate_owner_authentication")
        return super().can_evaluate_owner_authentication()
