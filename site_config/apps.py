"""Django app configuration for site_config."""
from django.apps import AppConfig


class SiteConfigAppConfig(AppConfig):
    """Configuration for the site config app."""

    name = "site_config"
    verbose_name = "Site Config"

    def ready(self):
        """Register filters, copy rules and plugins on the default registry."""
        from .registry import site
        from .site import configure

        if site.dirs is None:
            site.load(configure)
