# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import asyncio
import json

import pytest

from deviceguard.cli.main import build_parser, main
from deviceguard.compatibility import CHECKM8_FINDING
from deviceguard.config import ScanSettings
from deviceguard.models import Severity
from deviceguard.platform import StubPlatform
from deviceguard.runtime import DeviceGuard


@pytest.fixture
def snapshot_file(tmp_path):
    path = tmp_path / "snapshot.json"
    path.write_text(
        json.dumps(
            {
                "model": "iPhone",
                "system_version": "14.2",
                "hardware_identifier": "iPhone8Plus",
                "existing_paths": ["/Applications/Cydia.app"],
                "owner_authentication": True,
            }
        ),
        encoding="utf-8",
    )
    return str(path)


def test_build_parser():
    args = build_parser().parse_args(["scan", "--json", "--snapshot", "device.json"])
    assert args.command == "scan"
    assert args.json is True
    assert args.snapshot == "device.json"
    with pytest.raises(SystemExit):
        build_parser().parse_args(["explode"])


def test_facade_wires_shared_platform():
    platform = StubPlatform(system_version="16.4", owner_authentication=True, hardware_identifier="iPhone13,2")
    guard = DeviceGuard(platform=platform, settings=ScanSettings())
    assert guard.get_device_info().major_version == 16
    assert guard.perform_full_scan().overall_severity is Severity.SAFE
    assert [tool.is_compatible for tool in guard.check_compatibility()] == [False, False, True, True, True, True]
    assert guard.check_bootrom_vulnerabilities() == []
    assert len(asyncio.run(guard.perform_full_scan_async()).checks) == 11


def test_cli_scan_json(snapshot_file, capsys):
    assert main(["scan", "--json", "--snapshot", snapshot_file]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert len(payload["checks"]) == 11
    assert payload["overall_severity"] == "critical"
    assert payload["vulnerability_count"] == 2


def test_cli_scan_pretty(snapshot_file, capsys):
    assert main(["scan", "--snapshot", snapshot_file, "--concurrent"]) == 0
    output = capsys.readouterr().out
    assert "Issues Found" in output
    assert "[FAIL] Jailbreak Detection (Critical)" in output
    assert "Jailbreak:" in output
    assert "Network:" in output


def test_cli_compat_with_version_override(snapshot_file, capsys):
    assert main(["compat", "--json", "--snapshot", snapshot_file, "--os-version", "16.6"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["device"]["os_version"] == "16.6"
    assert [tool["id"] for tool in payload["tools"] if tool["is_compatible"]] == [
        "sileo",
        "checkra1n",
        "palera1n",
        "dopamine",
    ]


def test_cli_compat_pretty(snapshot_file, capsys):
    assert main(["compat", "--snapshot", snapshot_file]) == 0
    output = capsys.readouterr().out
    assert "Compatible tools: 4/6" in output
    assert "+ Taurine: Device supports Taurine" in output


def test_cli_device_and_bootrom(snapshot_file, capsys):
    assert main(["device", "--json", "--snapshot", snapshot_file]) == 0
    assert json.loads(capsys.readouterr().out)["major_version"] == 14

    assert main(["bootrom", "--json", "--snapshot", snapshot_file]) == 0
    assert json.loads(capsys.readouterr().out) == {"findings": [CHECKM8_FINDING]}

    assert main(["bootrom", "--snapshot", snapshot_file, "--identifier", "iPhone13"]) == 0
    assert "No bootrom vulnerabilities found" in capsys.readouterr().out


def test_cli_bad_snapshot_exits_with_error(tmp_path, capsys):
    path = tmp_path / "broken.json"
    path.write_text("[]", encoding="utf-8")
    assert main(["scan", "--snapshot", str(path)]) == 2
    assert "error:" in capsys.readouterr().err


def test_cli_log_level_is_case_insensitive_and_validated():
    assert build_parser().parse_args(["device", "--log-level", "debug"]).log_level == "DEBUG"
    with pytest.raises(SystemExit):
        build_parser().parse_args(["device", "--log-level", "verbose"])
