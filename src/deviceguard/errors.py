# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

import errno
from enum import Enum
from typing import Optional


class ProbeErrorCategory(str, Enum):
    PERMISSION_DENIED = "PERMISSION_DENIED"
    NOT_FOUND = "NOT_FOUND"
    READ_ONLY = "READ_ONLY"
    OS_ERROR = "OS_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    NONE = "NONE"


class SnapshotError(ValueError):
    """Raised when a device snapshot cannot be loaded or is malformed."""


def categorize_exception(exc: BaseException) -> ProbeErrorCategory:
    """
    Map filesystem/platform probe exceptions to ProbeErrorCategory.
    """
    if isinstance(exc, PermissionError):
        return ProbeErrorCategory.PERMISSION_DENIED

    if isinstance(exc, (FileNotFoundError, NotADirectoryError)):
        return ProbeErrorCategory.NOT_FOUND

    if isinstance(exc, OSError):
        if exc.errno == errno.EROFS:
            return ProbeErrorCategory.READ_ONLY
        if exc.errno in (errno.EACCES, errno.EPERM):
            return ProbeErrorCategory.PERMISSION_DENIED
        return ProbeErrorCategory.OS_ERROR

    return ProbeErrorCategory.UNKNOWN_ERROR


def error_category_to_reason(category: Optional[ProbeErrorCategory]) -> str:
    """User-facing reason string."""
    mapping = {
        ProbeErrorCategory.PERMISSION_DENIED: "Access denied by the platform",
        ProbeErrorCategory.NOT_FOUND: "Path does not exist",
        ProbeErrorCategory.READ_ONLY: "Read-only file system",
        ProbeErrorCategory.OS_ERROR: "Operating system error during probe",
        ProbeErrorCategory.UNKNOWN_ERROR: "Unexpected error during probe",
        ProbeErrorCategory.NONE: "",
        None: "",
    }
    return mapping.get(category, "Probe failed")
