"""
Tests for menu options.

Covers:
- Defaults and settings.NAVMENU overrides
- Per-builder overrides and single-key override()
- Unknown keys and invalid values
"""

from django.test import SimpleTestCase, override_settings

from navmenu.builder import Builder
from navmenu.options import MenuOptions

from .helpers import FakeResolver


class MenuOptionsTests(SimpleTestCase):
    def test_defaults(self):
        options = MenuOptions()
        self.assertFalse(options.view_share)
        self.assertTrue(options.auto_activate)
        self.assertTrue(options.activate_parents)
        self.assertEqual(options.active_class, "active")
        self.assertFalse(options.restful)
        self.assertFalse(options.cascade_data)
        self.assertEqual(options.rest_base, "")
        self.assertEqual(options.active_element, "item")

    @override_settings(NAVMENU={"active_class": "on", "bogus": 1})
    def test_from_settings_ignores_unknown_keys(self):
        with self.assertLogs("navmenu.options", level="WARNING") as logs:
            options = MenuOptions.from_settings()
        self.assertEqual(options.active_class, "on")
        self.assertIn("bogus", logs.output[0])

    @override_settings(NAVMENU={"active_class": "on"})
    def test_builder_overrides_win_over_settings(self):
        menu = Builder("main", FakeResolver(), {"active_class": "current"})
        self.assertEqual(menu.options.get("active_class"), "current")

    def test_builder_accepts_options_instance_as_copy(self):
        shared = MenuOptions(restful=True)
        menu = Builder("main", FakeResolver(), shared)
        menu.options.override("restful", False)
        self.assertTrue(shared.restful)

    def test_builder_with_malformed_options_uses_defaults(self):
        menu = Builder("main", FakeResolver(), "junk")
        self.assertEqual(menu.options.active_element, "item")

    def test_override(self):
        options = MenuOptions()
        self.assertIs(options.override("ACTIVE_CLASS", "is-active"), options)
        self.assertEqual(options.get("active_class"), "is-active")

    def test_override_unknown_key(self):
        with self.assertRaises(KeyError):
            MenuOptions().override("colour", "red")

    def test_override_invalid_active_element(self):
        with self.assertRaises(ValueError):
            MenuOptions().override("active_element", "span")

    def test_get_unknown_key(self):
        self.assertIsNone(MenuOptions().get("colour"))

    def test_rest_bases(self):
        self.assertEqual(MenuOptions().rest_bases(), [])
        self.assertEqual(MenuOptions(rest_base="/admin/").rest_bases(), ["admin"])
        self.assertEqual(MenuOptions(rest_base=["admin", "", "/api"]).rest_bases(), ["admin", "api"])
