"""Django project package for chartlayout."""
