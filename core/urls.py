from django.urls import path

from core import views

urlpatterns = [
    path("", views.index, name="home"),
    path("about/", views.page, {"slug": "about"}, name="about"),
    path("about/team/", views.page, {"slug": "team"}, name="team"),
    path("users/", views.users_list, name="users_list"),
    path("users/<int:user_id>/", views.user_details, name="user_details"),
    path("contact/", views.contact, name="contact"),
]
