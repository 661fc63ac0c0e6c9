# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Device inspection exports."""

from .inspector import DeviceInspector

__all__ = ["DeviceInspector"]
