"""
Tests for the Django URL resolver.

Covers:
- Route names with positional and keyword params
- Actions given as callables or dotted paths
- Plain URLs, extra segments and secure URLs
- Resolution errors propagating through Builder.add
"""

from django.test import RequestFactory, SimpleTestCase
from django.urls import NoReverseMatch

from core import views
from navmenu.builder import Builder
from navmenu.resolvers import DjangoUrlResolver, UrlResolver


class DjangoUrlResolverTests(SimpleTestCase):
    def setUp(self):
        self.factory = RequestFactory()
        self.resolver = DjangoUrlResolver()

    def test_route(self):
        self.assertEqual(self.resolver.resolve_route("about"), "/about/")
        self.assertEqual(self.resolver.resolve_route("user_details", [5]), "/users/5/")
        self.assertEqual(self.resolver.resolve_route("user_details", {"user_id": 7}), "/users/7/")

    def test_action(self):
        self.assertEqual(self.resolver.resolve_action("core.views.contact"), "/contact/")
        self.assertEqual(self.resolver.resolve_action(views.users_list), "/users/")
        self.assertEqual(self.resolver.resolve_action(views.user_details, [3]), "/users/3/")

    def test_url(self):
        self.assertEqual(self.resolver.resolve_url("about"), "/about")
        self.assertEqual(self.resolver.resolve_url("/users/", [5, "edit"]), "/users/5/edit")
        self.assertEqual(self.resolver.resolve_url("/"), "/")

    def test_secure_url_needs_request(self):
        self.assertEqual(self.resolver.resolve_url("about", secure=True), "/about")

        resolver = DjangoUrlResolver(self.factory.get("/"))
        self.assertEqual(resolver.resolve_url("about", secure=True), "https://testserver/about")

    def test_current_path(self):
        self.assertIsNone(self.resolver.current_path())
        resolver = DjangoUrlResolver(self.factory.get("/users/5/"))
        self.assertEqual(resolver.current_path(), "/users/5/")

    def test_unknown_route_propagates(self):
        with self.assertRaises(NoReverseMatch):
            self.resolver.resolve_route("no_such_route")

    def test_builder_propagates_resolution_errors(self):
        menu = Builder("main", self.resolver)
        with self.assertRaises(NoReverseMatch):
            menu.add("Broken", {"route": "no_such_route"})
        self.assertEqual(len(menu), 0)

    def test_builder_defaults_to_django_resolver(self):
        menu = Builder("main")
        self.assertIsInstance(menu.resolver, DjangoUrlResolver)
        self.assertEqual(menu.add("User", {"route": ["user_details", 9]}).url(), "/users/9/")

    def test_base_resolver_is_abstract(self):
        with self.assertRaises(NotImplementedError):
            UrlResolver().resolve_route("home")
        self.assertIsNone(UrlResolver().current_path())
