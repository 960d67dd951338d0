"""
Menu items and their links.

Items are created through ``Builder.add`` and keep a reference to their
builder so they can add children, look up their parent and resolve URLs.
"""

import logging

from django.utils.html import strip_tags
from django.utils.text import slugify

from navmenu.attributes import merge_class
from navmenu.matching import pattern_matches

logger = logging.getLogger(__name__)

# Item fields that ``has_attribute`` / ``get_attribute`` answer for before
# falling back to data and HTML attributes.
_CORE_FIELDS = ("id", "title", "name", "parent")


def nickname(title) -> str:
    """camelCase nickname for a title: ``"About Us"`` becomes ``"aboutUs"``."""
    words = slugify(strip_tags(str(title))).replace("_", "-").split("-")
    words = [word for word in words if word]
    if not words:
        return ""
    return words[0] + "".join(word.capitalize() for word in words[1:])


class Link:
    """The anchor rendered inside an item."""

    def __init__(self, path, builder):
        self.path = path
        self.builder = builder
        self.attributes = {}
        self.href = builder.dispatch(path)

    def activate(self):
        self.attributes["class"] = merge_class(
            {"class": self.builder.options.active_class}, self.attributes
        )
        return self

    def __repr__(self):
        return f"Link(href={self.href!r})"


class Item:
    """A single node of the menu tree."""

    def __init__(self, builder, id, title, options):
        self.builder = builder
        self.id = id
        self.title = title
        self.name = options.get("nickname") or nickname(title)
        self.parent = options.get("parent")
        self.raw = bool(options.get("raw", False))
        self.attributes = builder.extract_attributes(options)
        self.attributes.pop("nickname", None)
        self.divider = None
        self.data = {}
        self.is_active = False

        path = {key: options[key] for key in ("url", "route", "action") if options.get(key) is not None}
        if path:
            path["secure"] = options.get("secure", False)
            self.link = Link(path, builder)
        else:
            self.link = None

    # ------------------------------------------------------------------
    # Tree helpers
    # ------------------------------------------------------------------

    def add(self, title, options=None):
        """Add a child of this item."""
        options = dict(options or {})
        options["parent"] = self.id
        return self.builder.add(title, options)

    def raw_child(self, title, options=None):
        options = dict(options or {})
        options["raw"] = True
        return self.add(title, options)

    def has_children(self) -> bool:
        return bool(self.builder.children_of(self.id))

    def children(self):
        return self.builder.children_of(self.id)

    def descendants(self):
        """All items below this one, depth-first."""
        return self.builder.descendants_of(self.id)

    def parent_item(self):
        if self.parent is None:
            return None
        return self.builder.find(self.parent)

    # ------------------------------------------------------------------
    # Presentation
    # ------------------------------------------------------------------

    def divide(self, attributes=None):
        attributes = dict(attributes or {})
        attributes["class"] = merge_class({"class": "divider"}, attributes)
        self.divider = attributes
        return self

    def prepend(self, html):
        self.title = f"{html}{self.title}"
        return self

    def append(self, html):
        self.title = f"{self.title}{html}"
        return self

    def url(self):
        return self.link.href if self.link else None

    # ------------------------------------------------------------------
    # Query accessors
    # ------------------------------------------------------------------

    def has_attribute(self, name) -> bool:
        return name in _CORE_FIELDS or name in self.data or name in self.attributes

    def get_attribute(self, name, default=None):
        if name in _CORE_FIELDS:
            return getattr(self, name)
        if name in self.data:
            return self.data[name]
        return self.attributes.get(name, default)

    def set_data(self, key, value):
        """Attach metadata; with ``cascade_data`` it is copied to every descendant."""
        self.data[key] = value
        if self.builder.options.cascade_data:
            for child in self.descendants():
                child.data[key] = value
        return self

    def get_data(self, key, default=None):
        return self.data.get(key, default)

    # ------------------------------------------------------------------
    # Activation
    # ------------------------------------------------------------------

    def activate(self):
        """Mark this item active and, if configured, all of its ancestors."""
        options = self.builder.options
        if options.active_element == "link" and self.link is not None:
            self.link.activate()
        else:
            self.attributes["class"] = merge_class({"class": options.active_class}, self.attributes)
        self.is_active = True
        logger.debug("Activated menu item %r (%s)", self.name, self.id)

        if options.activate_parents:
            parent = self.parent_item()
            if parent is not None and not parent.is_active:
                parent.activate()
        return self

    def activate_on(self, pattern):
        """Activate when the current request path matches *pattern*."""
        if pattern_matches(pattern, self.builder.resolver.current_path()):
            self.activate()
        return self

    def __repr__(self):
        return f"Item(id={self.id!r}, title={self.title!r}, parent={self.parent!r})"
