"""URL configuration for chartlayout."""

from __future__ import annotations

from django.urls import include, path

urlpatterns = [
    path("", include("charts.urls")),
]
