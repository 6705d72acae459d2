"""App configuration for the charts Django app."""

from __future__ import annotations

from django.apps import AppConfig


class ChartsConfig(AppConfig):
    """Configuration for the `charts` app (JSON front-end for the layout engine)."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "charts"
    verbose_name = "Chart layout"
