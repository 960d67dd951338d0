"""
Registry of named menus for a single request.

Usage from a menu definition (listed in ``settings.NAVMENU_MENUS``)::

    def build_main(menu):
        menu.add("Home", {"route": "home"})
        menu.add("Users", {"route": "users_list"})

or directly::

    menus = Menu(DjangoUrlResolver(request))
    main = menus.make("main", build_main)
"""

import logging

from navmenu.builder import Builder

logger = logging.getLogger(__name__)


class Menu:
    """Creates builders bound to one resolver and keeps them by name."""

    def __init__(self, resolver=None):
        self.resolver = resolver
        self.collection = {}

    def make(self, name, callback=None, options=None) -> Builder:
        """Create the builder *name*, run *callback* on it and register it."""
        builder = Builder(name, self.resolver, options)
        if callback is not None:
            callback(builder)
        self.collection[name] = builder
        logger.debug("Built menu %s with %d items", name, len(builder))
        return builder

    def get(self, name):
        return self.collection.get(name)

    def all(self) -> dict:
        return dict(self.collection)

    def shared(self) -> dict:
        """Builders whose ``view_share`` option is on."""
        return {name: builder for name, builder in self.collection.items() if builder.options.view_share}

    def __contains__(self, name):
        return name in self.collection

    def __getitem__(self, name):
        return self.collection[name]
