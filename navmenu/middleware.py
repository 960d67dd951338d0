from django.conf import settings
from django.utils.module_loading import import_string

from navmenu.menu import Menu
from navmenu.resolvers import DjangoUrlResolver


class MenuMiddleware:
    """
    Attaches a fresh ``Menu`` registry to every request as ``request.menus``
    and builds the menus listed in ``settings.NAVMENU_MENUS``.

    ``NAVMENU_MENUS`` maps a menu name to the dotted path of a callable that
    receives the ``Builder`` (e.g. ``{"main": "core.menus.build_main"}``).
    Builders are never shared between requests.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        menus = Menu(DjangoUrlResolver(request))
        for name, path in getattr(settings, "NAVMENU_MENUS", {}).items():
            menus.make(name, import_string(path))
        request.menus = menus
        return self.get_response(request)
