# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Bootrom (checkm8) exposure lookup by hardware identifier."""

CHECKM8_FINDING = "Checkm8 (Bootrom) - A7-A11 devices vulnerable"

# A7-A11 generation tokens; matched as plain substrings of the identifier.
CHECKM8_DEVICE_TOKENS: tuple[str, ...] = (
    "iPhone5s",
    "iPhone6",
    "iPhone6Plus",
    "iPhone6s",
    "iPhone6sPlus",
    "iPhone7",
    "iPhone7Plus",
    "iPhone8",
    "iPhone8Plus",
    "iPhoneX",
)


def is_checkm8_device(identifier: str) -> bool:
    return any(token in identifier for token in CHECKM8_DEVICE_TOKENS)


def check_bootrom_vulnerabilities(identifier: str) -> list[str]:
    """Return the checkm8 finding when ``identifier`` names an A7-A11 device, else an empty list."""
    if is_checkm8_device(identifier or ""):
        return [CHECKM8_FINDING]
    return []


__all__ = [
    "CHECKM8_DEVICE_TOKENS",
    "CHECKM8_FINDING",
    "check_bootrom_vulnerabilities",
    "is_checkm8_device",
]
