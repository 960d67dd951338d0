"""
URL resolution for menu links.

A ``Builder`` never talks to the URL configuration directly; it is handed a
resolver implementing the three ``resolve_*`` methods plus ``current_path``.
``DjangoUrlResolver`` is the implementation used inside a Django project.
Resolution errors such as ``NoReverseMatch`` are not caught here.
"""

from collections.abc import Mapping

from django.urls import reverse
from django.utils.module_loading import import_string


def _split_params(params):
    """Return ``(args, kwargs)`` for ``reverse()`` from a list or mapping of params."""
    if not params:
        return None, None
    if isinstance(params, Mapping):
        return None, dict(params)
    return list(params), None


class UrlResolver:
    """Interface expected by ``Builder``."""

    def resolve_url(self, path, extra=(), secure=False) -> str:
        raise NotImplementedError

    def resolve_route(self, name, params=None) -> str:
        raise NotImplementedError

    def resolve_action(self, action, params=None) -> str:
        raise NotImplementedError

    def current_path(self) -> str | None:
        return None

    def current_host(self) -> str | None:
        return None


class DjangoUrlResolver(UrlResolver):
    """
    Resolve menu links with ``django.urls.reverse``.

    Args:
        request: The current ``HttpRequest``. Optional; without it menus are
                 never auto-activated and secure URLs stay relative.
    """

    def __init__(self, request=None):
        self.request = request

    def resolve_url(self, path, extra=(), secure=False) -> str:
        segments = [str(path).strip("/")] + [str(segment).strip("/") for segment in extra or ()]
        url = "/" + "/".join(segment for segment in segments if segment)
        if secure and self.request is not None:
            return f"https://{self.request.get_host()}{url}"
        return url

    def resolve_route(self, name, params=None) -> str:
        args, kwargs = _split_params(params)
        return reverse(name, args=args, kwargs=kwargs)

    def resolve_action(self, action, params=None) -> str:
        """Reverse a view, given as a callable or a dotted import path."""
        if isinstance(action, str) and "." in action and ":" not in action:
            action = import_string(action)
        args, kwargs = _split_params(params)
        return reverse(action, args=args, kwargs=kwargs)

    def current_path(self) -> str | None:
        if self.request is None:
            return None
        return self.request.path

    def current_host(self) -> str | None:
        if self.request is None:
            return None
        return self.request.get_host()
