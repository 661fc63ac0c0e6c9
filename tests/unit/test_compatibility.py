"""
Unit tests for the jailbreak tool catalog and compatibility matching.
"""

import unittest

from deviceguard.compatibility import (
    CATALOG,
    CHECKM8_FINDING,
    CatalogEntry,
    CompatibilityChecker,
    check_bootrom_vulnerabilities,
    evaluate,
)
from deviceguard.device import DeviceInspector
from deviceguard.models import DeviceInfo
from deviceguard.platform import StubPlatform

EXPECTED_ORDER = ["taurine", "unc0ver", "sileo", "checkra1n", "palera1n", "dopamine"]

REFERENCE_PREDICATES = {
    "taurine": lambda M, m: M == 14 and m <= 3,
    "unc0ver": lambda M, m: M >= 11 and M <= 14,
    "sileo": lambda M, m: M >= 12,
    "checkra1n": lambda M, m: M >= 12,
    "palera1n": lambda M, m: M >= 15,
    "dopamine": lambda M, m: M == 15 or (M == 16 and m <= 6),
}


def device(version: str, major: int, minor: int) -> DeviceInfo:
    return DeviceInfo(model="iPhone", os_version=version, major_version=major, minor_version=minor)


def tools_by_id(version: str, major: int, minor: int):
    return {tool.id: tool for tool in evaluate(CATALOG, device(version, major, minor))}


class TestCatalogMatching(unittest.TestCase):
    def test_catalog_order_and_size(self):
        self.assertEqual([entry.id for entry in CATALOG], EXPECTED_ORDER)
        tools = evaluate(CATALOG, device("16.0", 16, 0))
        self.assertEqual([tool.id for tool in tools], EXPECTED_ORDER)

    def test_predicates_match_reference_table(self):
        for major in range(0, 21):
            for minor in range(0, 12):
                tools = tools_by_id(f"{major}.{minor}", major, minor)
                for tool_id, predicate in REFERENCE_PREDICATES.items():
                    with self.subTest(tool=tool_id, major=major, minor=minor):
                        self.assertEqual(tools[tool_id].is_compatible, predicate(major, minor))

    def test_spot_cases(self):
        self.assertTrue(tools_by_id("14.3", 14, 3)["taurine"].is_compatible)
        self.assertFalse(tools_by_id("14.4", 14, 4)["taurine"].is_compatible)
        self.assertTrue(tools_by_id("11.0", 11, 0)["unc0ver"].is_compatible)
        self.assertFalse(tools_by_id("15.0", 15, 0)["unc0ver"].is_compatible)
        self.assertTrue(tools_by_id("16.6", 16, 6)["dopamine"].is_compatible)
        self.assertFalse(tools_by_id("16.7", 16, 7)["dopamine"].is_compatible)
        self.assertTrue(tools_by_id("15.9", 15, 9)["dopamine"].is_compatible)

    def test_reasons(self):
        tools = tools_by_id("16.7", 16, 7)
        self.assertEqual(
            tools["dopamine"].compatibility_reason,
            "iOS version 16.7 not supported. Dopamine requires iOS 15.0-16.6.1",
        )
        self.assertEqual(tools["sileo"].compatibility_reason, "Device supports Sileo")
        self.assertEqual(tools["checkra1n"].compatibility_reason, "Device may support checkra1n")
        self.assertEqual(tools["palera1n"].compatibility_reason, "Device may support palera1n")
        self.assertEqual(
            tools["taurine"].compatibility_reason,
            "iOS version 16.7 not supported. Taurine requires iOS 14.0-14.3",
        )

    def test_reason_embeds_literal_os_version(self):
        tools = tools_by_id("10.3.4", 10, 3)
        self.assertEqual(
            tools["unc0ver"].compatibility_reason,
            "iOS version 10.3.4 not supported. unc0ver requires iOS 11.0-14.8",
        )

    def test_static_metadata(self):
        taurine = tools_by_id("14.0", 14, 0)["taurine"]
        self.assertEqual(taurine.name, "Taurine")
        self.assertEqual(taurine.website, "https://taurine.app")
        self.assertEqual(taurine.supported_versions, ("14.0", "14.1", "14.2", "14.3"))
        self.assertEqual(taurine.features[0], "Substrate")
        payload = taurine.to_dict()
        self.assertIsInstance(payload["supported_devices"], list)
        self.assertTrue(payload["is_compatible"])

    def test_custom_entry_uses_generic_routine(self):
        entry = CatalogEntry(
            id="demo",
            name="Demo",
            description="",
            website="",
            supported_versions=("17.0",),
            supported_devices=(),
            features=(),
            requirement="iOS 17.0 or later",
            supported_reason="Device supports Demo",
            predicate=lambda major, minor: major >= 17,
        )
        [tool] = evaluate([entry], device("16.2", 16, 2))
        self.assertFalse(tool.is_compatible)
        self.assertEqual(tool.compatibility_reason, "iOS version 16.2 not supported. Demo requires iOS 17.0 or later")


class TestCompatibilityChecker(unittest.TestCase):
    def test_check_compatibility_reads_current_device(self):
        platform = StubPlatform(system_version="14.2")
        checker = CompatibilityChecker(DeviceInspector(platform))
        tools = checker.check_compatibility()
        self.assertEqual(len(tools), 6)
        self.assertEqual([tool.id for tool in checker.compatible_tools()], ["taurine", "unc0ver", "sileo", "checkra1n"])

    def test_verdicts_are_not_cached_across_devices(self):
        platform = StubPlatform(system_version="14.2")
        checker = CompatibilityChecker(DeviceInspector(platform))
        self.assertTrue(checker.check_compatibility()[0].is_compatible)
        platform._system_version = "17.0"
        self.assertFalse(checker.check_compatibility()[0].is_compatible)

    def test_always_six_entries_for_unknown_device(self):
        checker = CompatibilityChecker(DeviceInspector(StubPlatform(system_version="")))
        tools = checker.check_compatibility()
        self.assertEqual([tool.id for tool in tools], EXPECTED_ORDER)
        self.assertFalse(any(tool.is_compatible for tool in tools))

    def test_device_info_idempotent(self):
        checker = CompatibilityChecker(DeviceInspector(StubPlatform(system_version="16.1")))
        self.assertEqual(checker.get_device_info(), checker.get_device_info())


class TestBootrom(unittest.TestCase):
    def test_early_generation_identifier_is_flagged(self):
        self.assertEqual(check_bootrom_vulnerabilities("iPhone8"), [CHECKM8_FINDING])
        self.assertEqual(check_bootrom_vulnerabilities("iPhone6,2"), [CHECKM8_FINDING])
        self.assertEqual(check_bootrom_vulnerabilities("iPhoneX"), [CHECKM8_FINDING])

    def test_later_identifier_is_clean(self):
        self.assertEqual(check_bootrom_vulnerabilities("iPhone13"), [])
        self.assertEqual(check_bootrom_vulnerabilities(""), [])

    def test_plain_substring_semantics(self):
        # No wildcard expansion: "iPhone*" is not a token.
        self.assertEqual(check_bootrom_vulnerabilities("iPhone*"), [])
        self.assertEqual(check_bootrom_vulnerabilities("xxiPhone7Plusxx"), [CHECKM8_FINDING])

    def test_checker_uses_platform_identifier(self):
        platform = StubPlatform(model="iPhone", hardware_identifier="iPhone8Plus")
        checker = CompatibilityChecker(DeviceInspector(platform))
        self.assertEqual(checker.check_bootrom_vulnerabilities(), [CHECKM8_FINDING])

    def test_checker_skips_non_iphone_models(self):
        platform = StubPlatform(model="iPad", hardware_identifier="iPhone8")
        checker = CompatibilityChecker(DeviceInspector(platform))
        self.assertEqual(checker.check_bootrom_vulnerabilities(), [])
        self.assertEqual(platform.calls_to("hardware_identifier"), [])


if __name__ == "__main__":
    unittest.main()
