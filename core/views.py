"""Minimal pages used to exercise menus end to end."""

from django.shortcuts import render


def index(request):
    return render(request, "page.html", {"heading": "home"})


def page(request, slug):
    return render(request, "page.html", {"heading": slug})


def users_list(request):
    return render(request, "page.html", {"heading": "users"})


def user_details(request, user_id):
    return render(request, "page.html", {"heading": f"user {user_id}"})


def contact(request):
    return render(request, "page.html", {"heading": "contact"})
