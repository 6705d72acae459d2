"""URL configuration for chart layout views."""

from __future__ import annotations

from django.urls import path

from charts import views

app_name = "charts"

urlpatterns = [
    path("api/layout/", views.layout_api, name="layout_api"),
    path("api/defaults/", views.defaults_api, name="defaults_api"),
]
