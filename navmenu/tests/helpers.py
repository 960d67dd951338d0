"""Shared test doubles for menu tests."""

from navmenu.builder import Builder
from navmenu.resolvers import UrlResolver


class FakeResolver(UrlResolver):
    """Resolver that builds predictable URLs and records every call."""

    def __init__(self, path=None, host="testserver"):
        self.path = path
        self.host = host
        self.calls = []

    def resolve_url(self, path, extra=(), secure=False):
        self.calls.append(("url", path, list(extra), secure))
        url = "/" + "/".join([path.strip("/")] + [str(segment) for segment in extra])
        return f"https://example.com{url}" if secure else url

    def resolve_route(self, name, params=None):
        self.calls.append(("route", name, params))
        return "/" + "/".join([name] + [str(param) for param in params or []])

    def resolve_action(self, action, params=None):
        self.calls.append(("action", action, params))
        return f"/action/{action}"

    def current_path(self):
        return self.path

    def current_host(self):
        return self.host


def make_builder(path=None, **options):
    return Builder("main", FakeResolver(path), options)
