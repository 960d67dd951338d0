"""
Menu definitions for the development project.

Each function receives a fresh ``navmenu.builder.Builder`` per request
(see ``NAVMENU_MENUS`` in settings).
"""


def build_main(menu):
    menu.options.override("restful", True)

    menu.add("Home", {"route": "home", "class": "nav-item"})

    about = menu.add("About", {"route": "about", "class": "nav-item dropdown"})
    about.link.attributes["data-toggle"] = "dropdown"
    about.add("Team", {"route": "team"})
    menu.divide()

    menu.add("Users", {"route": "users_list", "class": "nav-item"})


def build_footer(menu):
    menu.options.override("view_share", True)

    with menu.grouped({"class": "footer-link"}):
        menu.add("Contact", {"action": "core.views.contact", "nickname": "contactUs"})
        menu.add("Source", {"url": "https://example.com/navmenu"})
