"""
Menu options.

Defaults can be changed project-wide through ``settings.NAVMENU``::

    NAVMENU = {
        "active_class": "is-active",
        "restful": True,
        "rest_base": ["admin", "api"],
    }

and per menu through the mapping passed to ``Builder`` / ``Menu.make``.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace

from django.conf import settings

logger = logging.getLogger(__name__)

ACTIVE_ELEMENTS = ("item", "link")


@dataclass
class MenuOptions:
    view_share: bool = False
    auto_activate: bool = True
    activate_parents: bool = True
    active_class: str = "active"
    restful: bool = False
    cascade_data: bool = False
    rest_base: str | list = ""
    active_element: str = "item"  # item|link

    @classmethod
    def keys(cls):
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_settings(cls, overrides=None) -> "MenuOptions":
        """Build options from ``settings.NAVMENU`` and then *overrides*."""
        options = cls()
        options.update(getattr(settings, "NAVMENU", None))
        options.update(overrides)
        return options

    def get(self, key):
        if key not in self.keys():
            return None
        return getattr(self, key)

    def override(self, key, value):
        """Set a single option; unknown keys raise ``KeyError``."""
        key = str(key).lower()
        if key not in self.keys():
            raise KeyError(f"Unknown menu option '{key}'")
        if key == "active_element" and value not in ACTIVE_ELEMENTS:
            raise ValueError(f"Unsupported active element '{value}'")
        setattr(self, key, value)
        return self

    def update(self, values):
        """Apply a mapping of options, skipping unknown keys with a warning."""
        if not isinstance(values, Mapping):
            return self
        for key, value in values.items():
            try:
                self.override(key, value)
            except KeyError:
                logger.warning("Ignoring unknown menu option '%s'", key)
        return self

    def copy(self) -> "MenuOptions":
        return replace(self)

    def rest_bases(self) -> list:
        """``rest_base`` as a list of non-empty, slash-trimmed segments."""
        bases = self.rest_base if isinstance(self.rest_base, (list, tuple)) else [self.rest_base]
        return [str(base).strip("/") for base in bases if base and str(base).strip("/")]
