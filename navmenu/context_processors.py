"""
Context processors for navmenu.

Exposes the request's menus to templates so they can be rendered with the
``navmenu_tags`` library.
"""


def menus(request):
    """
    Add menu data to the template context.

    Returns a dictionary with a ``menus`` key holding the request's ``Menu``
    registry, plus one entry per menu built with ``view_share`` enabled.
    """
    registry = getattr(request, "menus", None)
    if registry is None:
        return {}
    return {
        "menus": registry,
        **registry.shared(),
    }
