# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""DeviceGuard CLI."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from ..config import ScanSettings, load_scan_settings
from ..errors import SnapshotError
from ..log import LOG_LEVELS, setup_logging
from ..models import DeviceInfo, JailbreakTool, ScanResult
from ..platform import DevicePlatform, OverridePlatform, SnapshotPlatform, create_default_platform
from ..runtime import DeviceGuard

COMMANDS = ("scan", "compat", "device", "bootrom")
EXIT_BAD_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="DeviceGuard jailbreak indicator scanner and tool compatibility checker")
    parser.add_argument("command", choices=COMMANDS, help="Operation to run")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output JSON instead of human-friendly summary",
    )
    parser.add_argument(
        "--snapshot",
        metavar="FILE",
        help="Evaluate a recorded device snapshot (JSON) instead of the local host",
    )
    parser.add_argument("--os-version", help="Override the reported OS version (e.g. 16.6)")
    parser.add_argument("--model", help="Override the reported device model")
    parser.add_argument("--identifier", help="Override the hardware identifier (e.g. iPhone10,1)")
    parser.add_argument(
        "--concurrent",
        action="store_true",
        help="Run check groups concurrently",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default from DEVICEGUARD_LOG_LEVEL, else WARNING)",
    )
    return parser


def build_platform(args: argparse.Namespace) -> DevicePlatform:
    base: DevicePlatform = SnapshotPlatform.from_file(args.snapshot) if args.snapshot else create_default_platform()
    if args.os_version is None and args.model is None and args.identifier is None:
        return base
    return OverridePlatform(
        base,
        model=args.model,
        system_version=args.os_version,
        hardware_identifier=args.identifier,
    )


def _to_payload(data: Any) -> Any:
    if isinstance(data, list):
        return [_to_payload(item) for item in data]
    return data.to_dict() if hasattr(data, "to_dict") else data


def _print_json(data: Any) -> None:
    json.dump(_to_payload(data), sys.stdout, indent=2, sort_keys=True)
    sys.stdout.write("\n")


def _print_scan(result: ScanResult) -> None:
    print(f"[DeviceGuard] {result.headline}: {result.summary}")
    print(f"Overall severity: {result.overall_severity.label}")
    for category, checks in result.checks_by_category().items():
        print(f"{category.label}:")
        for check in checks:
            mark = "PASS" if check.passed else "FAIL"
            print(f"- [{mark}] {check.name} ({check.severity.label})")
            if not check.passed:
                print(f"    {check.recommendation}")


def _print_device(info: DeviceInfo) -> None:
    print(f"Model: {info.model}")
    print(f"Version: {info.version_label}")


def _print_tools(info: DeviceInfo, tools: list[JailbreakTool]) -> None:
    _print_device(info)
    compatible = sum(1 for tool in tools if tool.is_compatible)
    print(f"Compatible tools: {compatible}/{len(tools)}")
    for tool in tools:
        mark = "+" if tool.is_compatible else "-"
        print(f"{mark} {tool.name}: {tool.compatibility_reason}")


def _print_bootrom(findings: list[str]) -> None:
    if not findings:
        print("No bootrom vulnerabilities found")
        return
    for finding in findings:
        print(f"- {finding}")


def run_command(guard: DeviceGuard, command: str, *, as_json: bool) -> None:
    if command == "scan":
        result = guard.perform_full_scan()
        if as_json:
            _print_json(result)
        else:
            _print_scan(result)
    elif command == "device":
        info = guard.get_device_info()
        if as_json:
            _print_json(info)
        else:
            _print_device(info)
    elif command == "compat":
        info = guard.get_device_info()
        tools = guard.check_compatibility()
        if as_json:
            _print_json({"device": info.to_dict(), "tools": _to_payload(tools)})
        else:
            _print_tools(info, tools)
    elif command == "bootrom":
        findings = guard.check_bootrom_vulnerabilities()
        if as_json:
            _print_json({"findings": findings})
        else:
            _print_bootrom(findings)
    else:
        raise ValueError(f"unknown command: {command}")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    settings: ScanSettings = load_scan_settings()
    if args.concurrent:
        settings.concurrent_groups = True

    try:
        platform = build_platform(args)
    except SnapshotError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_BAD_INPUT

    guard = DeviceGuard(platform=platform, settings=settings)
    run_command(guard, args.command, as_json=args.json)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
