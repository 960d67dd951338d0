from django import template
from django.utils.safestring import mark_safe

from navmenu.attributes import merge_static
from navmenu.collection import Collection

register = template.Library()

_CHILD_PREFIX = "child_"


def _lookup(context, name):
    """Return the builder *name* from the context's menus, or None."""
    registry = context.get("menus")
    if registry is None:
        request = context.get("request")
        registry = getattr(request, "menus", None)
    if registry is None:
        return None
    return registry.get(name)


@register.simple_tag(takes_context=True)
def menu(context, name, tag="ul", **attrs):
    """
    Render the menu *name* as ``ul``, ``ol`` or ``div``.

    Keyword arguments become attributes of the root tag; arguments prefixed
    with ``child_`` go to the nested child tags::

        {% menu "main" "ul" class="nav" child_class="dropdown-menu" %}

    Renders nothing when the menu does not exist.
    """
    builder = _lookup(context, name)
    if builder is None:
        return ""

    attributes, child_attributes = {}, {}
    for key, value in attrs.items():
        if key.startswith(_CHILD_PREFIX):
            child_attributes[key[len(_CHILD_PREFIX):]] = value
        else:
            attributes[key] = value
    return builder.as_tag(tag, attributes, child_attributes)


@register.simple_tag(takes_context=True)
def menu_items(context, name, method="roots", value=None, recursive=False):
    """
    Query the items of menu *name*.

    ``method`` is ``"roots"`` or a ``whereX`` query name::

        {% menu_items "main" "whereParent" item.id as children %}
    """
    builder = _lookup(context, name)
    if builder is None:
        return Collection()
    if method == "roots":
        return builder.roots()
    return builder.query(method, value, recursive)


@register.simple_tag
def menu_attrs(item, static=""):
    """Render *item*'s attributes merged with a static attribute string."""
    return mark_safe(merge_static(static, getattr(item, "attributes", None)))
