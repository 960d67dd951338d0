"""
Stack of group attributes active while a menu is being declared.
"""

import contextlib
import logging
from collections.abc import Mapping

from navmenu.attributes import merge_group

logger = logging.getLogger(__name__)

# Option keys that configure an item and never end up as HTML attributes.
RESERVED = ("route", "action", "url", "prefix", "parent", "secure", "raw")


def normalize_options(options) -> dict:
    """Return *options* as a plain dict; anything that is not a mapping becomes ``{}``."""
    if options is None:
        return {}
    if not isinstance(options, Mapping):
        logger.debug("Ignoring non-mapping menu options: %r", options)
        return {}
    return dict(options)


class GroupStack:
    """Attribute contexts pushed by nested ``group()`` blocks."""

    def __init__(self):
        self._stack = []

    def __len__(self):
        return len(self._stack)

    def push(self, attributes):
        attributes = normalize_options(attributes)
        if self._stack:
            attributes = merge_group(attributes, self._stack[-1])
        self._stack.append(attributes)

    def pop(self):
        return self._stack.pop()

    def top(self) -> dict | None:
        return self._stack[-1] if self._stack else None

    def current_prefix(self) -> str | None:
        """Prefix of the innermost group, ``None`` outside of any group."""
        if not self._stack:
            return None
        return self._stack[-1].get("prefix", "")

    def extract(self, options) -> dict:
        """Merge *options* with the innermost group and drop reserved keys."""
        options = normalize_options(options)
        if self._stack:
            options = merge_group(options, self._stack[-1])
        return {key: value for key, value in options.items() if key not in RESERVED}

    @contextlib.contextmanager
    def scope(self, attributes):
        """Push *attributes* for the duration of the ``with`` block."""
        self.push(attributes)
        try:
            yield self
        finally:
            self.pop()
