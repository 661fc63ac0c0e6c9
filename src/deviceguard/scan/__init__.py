# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Scan orchestration across all check groups."""

from .engine import SecurityChecker

__all__ = ["SecurityChecker"]
