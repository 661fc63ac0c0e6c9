# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Jailbreak tool compatibility exports."""

from .bootrom import CHECKM8_DEVICE_TOKENS, CHECKM8_FINDING, check_bootrom_vulnerabilities
from .catalog import CatalogEntry, evaluate
from .engine import CompatibilityChecker
from .registry import CATALOG

__all__ = [
    "CATALOG",
    "CHECKM8_DEVICE_TOKENS",
    "CHECKM8_FINDING",
    "CatalogEntry",
    "CompatibilityChecker",
    "check_bootrom_vulnerabilities",
    "evaluate",
]
