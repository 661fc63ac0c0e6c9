# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

from deviceguard.device import DeviceInspector
from deviceguard.models import DeviceInfo
from deviceguard.platform import StubPlatform


def test_inspect_parses_model_and_version():
    inspector = DeviceInspector(StubPlatform(model="iPhone", system_version="16.6.1"))
    info = inspector.inspect()
    assert info == DeviceInfo(model="iPhone", os_version="16.6.1", major_version=16, minor_version=6)
    assert info.version_label == "iOS 16.6.1"


def test_inspect_is_idempotent_and_rereads_platform():
    platform = StubPlatform(system_version="15.4")
    inspector = DeviceInspector(platform)
    assert inspector.inspect() == inspector.inspect()
    assert len(platform.calls_to("system_version")) == 2


def test_unparsable_version_fails_closed():
    info = DeviceInspector(StubPlatform(system_version="unknown")).inspect()
    assert (info.major_version, info.minor_version) == (0, 0)
    assert info.os_version == "unknown"


def test_platform_errors_degrade_to_defaults():
    platform = StubPlatform(
        errors={
            "model": RuntimeError("no model"),
            "system_version": OSError("no version"),
            "hardware_identifier": RuntimeError("no uname"),
        }
    )
    inspector = DeviceInspector(platform)
    info = inspector.inspect()
    assert info.model == "Unknown"
    assert info.os_version == ""
    assert info.major_version == 0
    assert inspector.hardware_identifier() == ""
    assert info.version_label == "iOS (unknown)"


def test_hardware_identifier_is_raw():
    inspector = DeviceInspector(StubPlatform(hardware_identifier="iPhone10,1"))
    assert inspector.hardware_identifier() == "iPhone10,1"
