"""
Configuration settings for site-config.

Override these in your Django settings.py:

    SITE_CONFIG = {
        'PYGMENTS_STYLE': 'monokai',
        'BUNDLER_MANIFEST': 'output/.vite/manifest.json',
        ...
    }

The directory layout, the default locale and the passthrough copy rules are
fixed by site_config.site and are not read from settings.
"""
from django.conf import settings

# Locale used by the readableDate filter
DEFAULT_LOCALE = "uk-UA"

# Tags hidden by the postTags filter
EXCLUDED_TAGS = ("post",)

DIRS = {
    "input": "src",
    "output": "output",
    "layouts": "_layouts",
}

DEFAULTS = {
    # Syntax highlighting
    "PYGMENTS_STYLE": "default",
    "HIGHLIGHT_CSS_CLASS": "highlight",
    "HIGHLIGHT_LINENOS": False,

    # Bundler integration
    "BUNDLER_MANIFEST": "output/.vite/manifest.json",
    "BUNDLER_BASE_URL": "/",
}


class SiteConfigSettings:
    """
    Lazy settings object that reads from Django settings.

    Access via: from site_config.conf import site_settings
    """

    def __getattr__(self, name):
        if name not in DEFAULTS:
            raise AttributeError(f"Invalid site_config setting: {name}")

        user_settings = getattr(settings, "SITE_CONFIG", {})
        return user_settings.get(name, DEFAULTS[name])


site_settings = SiteConfigSettings()
