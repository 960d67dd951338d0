"""
Tests for attribute merging and rendering.

Covers:
- Class list union and deduplication
- Prefix concatenation
- Group merging precedence and key order
- Attribute string rendering and escaping
- Static attribute strings merged into item attributes
"""

from django.test import SimpleTestCase

from navmenu.attributes import (
    merge_class,
    merge_group,
    merge_prefix,
    merge_static,
    parse_static,
    render_attributes,
)


class MergeClassTests(SimpleTestCase):
    def test_old_classes_first_then_new_deduplicated(self):
        self.assertEqual(merge_class({"class": "a b"}, {"class": "b c"}), "b c a")

    def test_without_new_class_returns_old_unchanged(self):
        self.assertEqual(merge_class({}, {"class": "nav  item"}), "nav  item")
        self.assertIsNone(merge_class({}, {}))

    def test_without_old_class(self):
        self.assertEqual(merge_class({"class": " active "}, {}), "active")

    def test_collapses_whitespace(self):
        self.assertEqual(merge_class({"class": "x\ty"}, {"class": "  x   z "}), "x z y")


class MergePrefixTests(SimpleTestCase):
    def test_slashes_trimmed_and_joined(self):
        self.assertEqual(merge_prefix({"prefix": "/foo/"}, {"prefix": "/bar/"}), "bar/foo")

    def test_without_new_prefix_returns_old(self):
        self.assertEqual(merge_prefix({}, {"prefix": "admin"}), "admin")
        self.assertIsNone(merge_prefix({}, {}))

    def test_without_old_prefix(self):
        self.assertEqual(merge_prefix({"prefix": "/docs/"}, {}), "docs")


class MergeGroupTests(SimpleTestCase):
    def test_new_keys_win_except_prefix_and_class(self):
        merged = merge_group(
            {"prefix": "a", "class": "inner", "role": "menuitem"},
            {"prefix": "b", "class": "outer", "role": "menu", "data-x": "1"},
        )
        self.assertEqual(
            merged,
            {"role": "menuitem", "data-x": "1", "prefix": "b/a", "class": "outer inner"},
        )

    def test_key_order_follows_old_then_new(self):
        merged = merge_group({"class": "i", "target": "_blank"}, {"data-role": "nav", "class": "g"})
        self.assertEqual(list(merged), ["data-role", "class", "target"])

    def test_missing_prefix_and_class_are_not_added(self):
        self.assertEqual(merge_group({"title": "x"}, {}), {"title": "x"})


class RenderAttributesTests(SimpleTestCase):
    def test_empty_mapping_renders_nothing(self):
        self.assertEqual(render_attributes({}), "")
        self.assertEqual(render_attributes(None), "")

    def test_leading_space_and_insertion_order(self):
        self.assertEqual(
            render_attributes({"class": "nav", "id": "main"}),
            ' class="nav" id="main"',
        )

    def test_none_values_skipped(self):
        self.assertEqual(render_attributes({"class": None, "id": "x"}), ' id="x"')
        self.assertEqual(render_attributes({"class": None}), "")

    def test_integer_keys_use_value_as_name(self):
        self.assertEqual(render_attributes({0: "disabled"}), ' disabled="disabled"')

    def test_values_are_html_escaped(self):
        self.assertEqual(
            render_attributes({"title": 'say "hi" & <bye>'}),
            ' title="say &quot;hi&quot; &amp; &lt;bye&gt;"',
        )


class StaticAttributeTests(SimpleTestCase):
    def test_parse_static(self):
        self.assertEqual(
            parse_static('class="a b"  data-id = "7"'),
            {"class": "a b", "data-id": "7"},
        )
        self.assertEqual(parse_static(None), {})

    def test_merge_static_combines_classes_and_overrides_rest(self):
        rendered = merge_static('class="extra" id="main"', {"class": "nav", "role": "menu", "id": "old"})
        self.assertEqual(rendered, ' role="menu" id="main" class="nav extra"')

    def test_merge_static_without_class_keeps_item_class(self):
        self.assertEqual(merge_static("", {"class": "nav"}), ' class="nav"')
