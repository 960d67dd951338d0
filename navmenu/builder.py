"""
Declarative menu builder and recursive renderer.

Usage::

    from navmenu.builder import Builder

    menu = Builder("main")
    menu.add("Home", {"route": "home"})
    with menu.grouped({"prefix": "about", "class": "about-item"}):
        about = menu.add("About", {"url": "/about"})
        about.add("Team", {"url": "team"})      # -> /about/team
        menu.divide()

    html = menu.as_ul({"class": "nav"}, {"class": "dropdown"})
"""

import logging
import re
import uuid
from urllib.parse import urlparse

from django.utils.html import conditional_escape
from django.utils.safestring import mark_safe

from navmenu.attributes import render_attributes
from navmenu.collection import Collection
from navmenu.groups import GroupStack, normalize_options
from navmenu.items import Item
from navmenu.matching import href_matches
from navmenu.options import MenuOptions
from navmenu.resolvers import DjangoUrlResolver

logger = logging.getLogger(__name__)

_QUERY_METHOD_RE = re.compile(r"^[Ww]here_?([A-Za-z0-9_]+)$")
_LIST_TAGS = ("ul", "ol")


def is_absolute(url) -> bool:
    """Return True when *url* has a URI scheme."""
    return bool(urlparse(str(url)).scheme)


class Builder:
    """
    Owns the items of one menu.

    Args:
        name: Menu name, used by the registry and templates.
        resolver: Object implementing ``resolve_url`` / ``resolve_route`` /
                  ``resolve_action`` / ``current_path``. Defaults to a
                  ``DjangoUrlResolver`` with no request.
        options: Mapping (or ``MenuOptions``) overriding the configured defaults.
    """

    def __init__(self, name, resolver=None, options=None):
        self.name = name
        self.resolver = resolver if resolver is not None else DjangoUrlResolver()
        if isinstance(options, MenuOptions):
            self.options = options.copy()
        else:
            self.options = MenuOptions.from_settings(options)
        self.items = Collection()
        self.groups = GroupStack()

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def add(self, title, options=None) -> Item:
        """Add an item to the menu and return it."""
        options = normalize_options(options)
        item_id = options["id"] if options.get("id") is not None else self._generate_id()

        item = Item(self, item_id, title, options)
        if self.options.cascade_data and item.parent is not None:
            parent = self.find(item.parent)
            if parent is not None:
                item.data.update(parent.data)

        self.items.append(item)
        logger.debug("Added menu item %r to %s (parent=%r)", title, self.name, item.parent)

        if self.options.auto_activate:
            self._check_activation(item)
        return item

    def raw(self, title, options=None) -> Item:
        """Add an item whose title is emitted without escaping."""
        options = normalize_options(options)
        options["raw"] = True
        return self.add(title, options)

    def _generate_id(self) -> str:
        return uuid.uuid4().hex

    def group(self, attributes, callback):
        """Call ``callback(self)`` with *attributes* applied to every item it adds."""
        with self.groups.scope(attributes):
            callback(self)

    def grouped(self, attributes):
        """``with`` form of ``group()``."""
        return self.groups.scope(attributes)

    def divide(self, attributes=None):
        """Insert a separator after the most recently added item."""
        last = self.items.last()
        if last is None:
            logger.debug("divide() called on empty menu %s; nothing to do", self.name)
            return None
        return last.divide(attributes)

    def extract_attributes(self, options=None) -> dict:
        return self.groups.extract(options)

    # ------------------------------------------------------------------
    # URL dispatch
    # ------------------------------------------------------------------

    def dispatch(self, options):
        """Resolve the ``url`` / ``route`` / ``action`` of *options* into an href."""
        if options.get("url") is not None:
            return self._get_url(options)
        if options.get("route") is not None:
            name, params = self._split_target(options["route"])
            return self.resolver.resolve_route(name, params)
        if options.get("action") is not None:
            action, params = self._split_target(options["action"])
            return self.resolver.resolve_action(action, params)
        return None

    def url_for(self, options):
        return self.dispatch(normalize_options(options))

    @staticmethod
    def _split_target(target):
        if isinstance(target, (list, tuple)):
            return target[0], list(target[1:])
        return target, None

    def _get_url(self, options):
        url, extra = options["url"], []
        if isinstance(url, (list, tuple)):
            url, extra = url[0], list(url[1:])
        url = str(url)

        if is_absolute(url):
            return url

        prefix = self.groups.current_prefix()
        if prefix and not url.startswith("/"):
            url = f"{prefix.strip('/')}/{url}"
        return self.resolver.resolve_url(url, extra, options.get("secure") is True)

    # ------------------------------------------------------------------
    # Activation
    # ------------------------------------------------------------------

    def _check_activation(self, item):
        if item.link is None:
            return
        if href_matches(
            item.link.href,
            self.resolver.current_path(),
            restful=self.options.restful,
            rest_bases=self.options.rest_bases(),
            host=self.resolver.current_host(),
        ):
            item.activate()

    def active(self) -> Collection:
        return self.items.filter(lambda item: item.is_active)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def where(self, attribute, value=None, recursive=False) -> Collection:
        """
        Items whose *attribute* equals *value*.

        With ``recursive=True`` every match is followed by its descendants,
        depth-first, so ``where_parent(item.id, True)`` returns the whole
        subtree below *item*.
        """
        if recursive:
            matches = self._where_recursive(attribute, value)
            return Collection({id(item): item for item in matches}.values())
        return self.items.filter(
            lambda item: item.has_attribute(attribute) and item.get_attribute(attribute) == value
        )

    find_by_attribute = where

    def _where_recursive(self, attribute, value) -> Collection:
        collection = Collection()
        for item in self.items:
            if not item.has_attribute(attribute) or item.get_attribute(attribute) != value:
                continue
            collection.append(item)
            collection.extend(self.descendants_of(item.id))
        return collection

    def descendants_of(self, item_id) -> Collection:
        collection = Collection()
        for child in self.children_of(item_id):
            collection.append(child)
            collection.extend(self.descendants_of(child.id))
        return collection

    def children_of(self, item_id) -> Collection:
        """Direct children of *item_id*; an item never counts as its own child."""
        return self.items.filter(lambda item: item.parent == item_id and item.id != item_id)

    def where_id(self, value, recursive=False):
        return self.where("id", value, recursive)

    def where_name(self, value, recursive=False):
        return self.where("name", value, recursive)

    def where_title(self, value, recursive=False):
        return self.where("title", value, recursive)

    def where_parent(self, value=None, recursive=False):
        return self.where("parent", value, recursive)

    def query(self, method, value=None, recursive=False) -> Collection:
        """
        Run a ``whereX`` / ``where_x`` query by name.

        Unknown method names return an empty collection.
        """
        match = _QUERY_METHOD_RE.match(str(method))
        if not match:
            return Collection()
        return self.where(match.group(1).lower(), value, recursive)

    def get(self, name):
        return self.where_name(name).first()

    def find(self, item_id):
        return self.where_id(item_id).first()

    def roots(self) -> Collection:
        return self.where_parent(None)

    def all(self) -> Collection:
        return self.items

    def first(self):
        return self.items.first()

    def last(self):
        return self.items.last()

    def filter(self, predicate):
        if callable(predicate):
            self.items = self.items.filter(predicate)
        return self

    def sort_by(self, sort_by, direction="asc"):
        """
        Reorder the items.

        A callable receives the list of items and returns the new order; a
        string sorts by that item attribute, descending when *direction* is
        ``"desc"``.
        """
        if callable(sort_by):
            result = sort_by(list(self.items))
            if not isinstance(result, (list, tuple)):
                result = [result]
            self.items = Collection(result)
            return self

        self.items = self.items.sort_by(sort_by, descending=direction == "desc")
        return self

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _render_title(self, item):
        return str(item.title) if item.raw else conditional_escape(item.title)

    def render(self, tag="ul", parent=None, child_attributes=None) -> str:
        """
        Render the items below *parent* as ``tag`` children, recursively.

        *child_attributes* only apply to the first nested level.
        """
        item_tag = "li" if tag in _LIST_TAGS else tag
        html = []

        for item in self.children_of(parent):
            html.append(f"<{item_tag}{render_attributes(item.attributes)}>")

            if item.link is not None:
                link_attributes = dict(item.link.attributes)
                link_attributes["href"] = item.url()
                html.append(f"<a{render_attributes(link_attributes)}>{self._render_title(item)}</a>")
            else:
                html.append(self._render_title(item))

            if item.has_children():
                html.append(f"<{tag}{render_attributes(child_attributes)}>")
                html.append(self.render(tag, item.id))
                html.append(f"</{tag}>")

            html.append(f"</{item_tag}>")

            if item.divider is not None:
                html.append(f"<{item_tag}{render_attributes(item.divider)}></{item_tag}>")

        return "".join(html)

    def _wrap(self, tag, attributes, child_attributes):
        body = self.render(tag, None, child_attributes)
        return mark_safe(f"<{tag}{render_attributes(attributes)}>{body}</{tag}>")

    def as_ul(self, attributes=None, child_attributes=None):
        return self._wrap("ul", attributes, child_attributes)

    def as_ol(self, attributes=None, child_attributes=None):
        return self._wrap("ol", attributes, child_attributes)

    def as_div(self, attributes=None, child_attributes=None):
        return self._wrap("div", attributes, child_attributes)

    def as_tag(self, tag="ul", attributes=None, child_attributes=None):
        renderer = {"ul": self.as_ul, "ol": self.as_ol, "div": self.as_div}.get(tag)
        if renderer is None:
            raise ValueError(f"Unsupported menu tag '{tag}'")
        return renderer(attributes, child_attributes)

    def __len__(self):
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __repr__(self):
        return f"Builder(name={self.name!r}, items={len(self.items)})"
