# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Built-in jailbreak tool catalog."""

from .catalog import CatalogEntry

# Predicates mirror each tool's published support window and are matched on
# major/minor only; patch-level bounds (14.8, 16.6.1) appear in the text alone.
CATALOG: tuple[CatalogEntry, ...] = (
    CatalogEntry(
        id="taurine",
        name="Taurine",
        description="A jailbreak for iOS 14.0-14.3 supporting A9-A14 devices",
        website="https://taurine.app",
        supported_versions=("14.0", "14.1", "14.2", "14.3"),
        supported_devices=(
            "iPhone 6s",
            "iPhone 7",
            "iPhone 8",
            "iPhone X",
            "iPhone XS",
            "iPhone XR",
            "iPhone 11",
            "iPhone 12",
        ),
        features=("Substrate", "Sileo", "Custom Tweaks", "Themes"),
        requirement="iOS 14.0-14.3",
        supported_reason="Device supports Taurine",
        predicate=lambda major, minor: major == 14 and minor <= 3,
    ),
    CatalogEntry(
        id="unc0ver",
        name="unc0ver",
        description="A jailbreak supporting iOS 11.0-14.8 on A7-A14 devices",
        website="https://unc0ver.dev",
        supported_versions=("11.0", "12.0", "13.0", "14.0", "14.8"),
        supported_devices=(
            "iPhone 5s",
            "iPhone 6",
            "iPhone 6s",
            "iPhone 7",
            "iPhone 8",
            "iPhone X",
            "iPhone XS",
            "iPhone XR",
            "iPhone 11",
            "iPhone 12",
        ),
        features=("Cydia", "Substrate", "Custom Tweaks", "Wide Device Support"),
        requirement="iOS 11.0-14.8",
        supported_reason="Device supports unc0ver",
        predicate=lambda major, minor: 11 <= major <= 14,
    ),
    CatalogEntry(
        id="sileo",
        name="Sileo",
        description="Modern package manager for jailbroken iOS devices (iOS 12+)",
        website="https://sileo.app",
        supported_versions=("12.0", "13.0", "14.0", "15.0", "16.0"),
        supported_devices=("iPhone 6s and later", "iPad Air 2 and later"),
        features=("Modern UI", "Fast Performance", "Dependency Resolution", "Dark Mode"),
        requirement="iOS 12.0 or later",
        supported_reason="Device supports Sileo",
        predicate=lambda major, minor: major >= 12,
    ),
    CatalogEntry(
        id="checkra1n",
        name="checkra1n",
        description="A jailbreak for A7-A11 devices supporting iOS 12.3 and later",
        website="https://checkra.in",
        supported_versions=("12.3", "13.0", "14.0", "15.0", "16.0"),
        supported_devices=("iPhone 5s", "iPhone 6", "iPhone 6s", "iPhone 7", "iPhone 8", "iPhone X"),
        features=("Bootrom Exploit", "Wide iOS Support", "Linux/Mac/Windows", "Persistent Jailbreak"),
        requirement="iOS 12.3 or later",
        supported_reason="Device may support checkra1n",
        predicate=lambda major, minor: major >= 12,
    ),
    CatalogEntry(
        id="palera1n",
        name="palera1n",
        description="A jailbreak for A15+ devices supporting iOS 15.0 and later",
        website="https://palera.in",
        supported_versions=("15.0", "16.0", "17.0"),
        supported_devices=(
            "iPhone 13",
            "iPhone 13 Pro",
            "iPhone 13 Pro Max",
            "iPhone 13 mini",
            "iPhone 14",
            "iPhone 14 Pro",
        ),
        features=("Semi-Tethered", "A15 Bionic", "Modern iOS Support", "Sileo Integration"),
        requirement="iOS 15.0 or later",
        supported_reason="Device may support palera1n",
        predicate=lambda major, minor: major >= 15,
    ),
    CatalogEntry(
        id="dopamine",
        name="Dopamine",
        description="A jailbreak for iOS 15.0-16.6.1 supporting A12+ devices",
        website="https://dopamine.sh",
        supported_versions=("15.0", "16.0", "16.6.1"),
        supported_devices=(
            "iPhone XS",
            "iPhone XS Max",
            "iPhone XR",
            "iPhone 11",
            "iPhone 12",
            "iPhone 13",
            "iPhone 14",
        ),
        features=("Full Jailbreak", "Sileo Support", "A12+ Devices", "Modern iOS Versions"),
        requirement="iOS 15.0-16.6.1",
        supported_reason="Device supports Dopamine",
        predicate=lambda major, minor: major == 15 or (major == 16 and minor <= 6),
    ),
)

__all__ = ["CATALOG"]
