"""
Attribute merging helpers shared by menu groups and the renderer.

Group attributes stack: prefixes are joined with ``/`` and class lists are
unioned, every other key is simply overwritten by the innermost group.

Usage::

    from navmenu.attributes import merge_group, render_attributes

    attrs = merge_group({"class": "nav-item", "prefix": "admin"}, parent_attrs)
    html = render_attributes({"class": "nav", "data-toggle": "menu"})
"""

import re

from django.utils.html import escape

_STATIC_ATTRIBUTE_RE = re.compile(r'\s*([\w-]+)\s*=\s*"([^"]*)"')


# ---------------------------------------------------------------------------
# Group merging
# ---------------------------------------------------------------------------

def merge_class(new, old):
    """Union the class lists of *old* and *new*, old classes first.

    Returns *old*'s class unchanged when *new* carries no class.
    """
    if new.get("class") is None:
        return old.get("class")

    combined = f"{old.get('class') or ''} {new['class']}".split()
    return " ".join(dict.fromkeys(combined))


def merge_prefix(new, old):
    """Join the prefixes of *old* and *new* with a single ``/``."""
    if new.get("prefix") is None:
        return old.get("prefix")

    parts = (str(old.get("prefix") or "").strip("/"), str(new["prefix"]).strip("/"))
    return "/".join(part for part in parts if part)


def merge_group(new, old):
    """Merge group attributes, *new* wins except for prefix and class."""
    merged = {key: value for key, value in old.items() if key not in ("prefix", "class")}
    merged.update(new)

    for key, value in (("prefix", merge_prefix(new, old)), ("class", merge_class(new, old))):
        if value is None:
            merged.pop(key, None)
        else:
            merged[key] = value

    return merged


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def _attribute_element(key, value):
    if isinstance(key, int):
        key = value
    if value is None:
        return None
    return f'{key}="{escape(value)}"'


def render_attributes(attributes) -> str:
    """Build an HTML attribute string, with a leading space when non-empty."""
    elements = []
    for key, value in (attributes or {}).items():
        element = _attribute_element(key, value)
        if element is not None:
            elements.append(element)
    return " " + " ".join(elements) if elements else ""


def parse_static(static: str | None) -> dict:
    """Parse ``name="value"`` pairs out of a static attribute string."""
    return dict(_STATIC_ATTRIBUTE_RE.findall(static or ""))


def merge_static(static, attributes=None) -> str:
    """
    Merge a static attribute string into *attributes* and render the result.

    Classes from both sides are combined; any other static value overrides
    the one already present on the item.
    """
    attributes = dict(attributes or {})
    parsed = parse_static(static)
    merged = {key: value for key, value in attributes.items() if key != "class"}
    merged.update(parsed)
    merged["class"] = merge_class(parsed, attributes)
    return render_attributes(merged)
