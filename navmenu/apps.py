from django.apps import AppConfig


class NavmenuConfig(AppConfig):
    name = "navmenu"
    verbose_name = "Navigation menus"
