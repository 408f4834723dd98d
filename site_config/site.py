"""
Site configuration.

Registers the template filters, passthrough copy rules and plugins of the
site, and returns its directory layout. Run once at start-up by
SiteConfigAppConfig.ready():

    from site_config.registry import site
    from site_config.site import configure

    site.load(configure)
"""
from . import filters
from .conf import DEFAULT_LOCALE, DIRS
from .plugins import bundler, syntax_highlight


def configure(site_config):
    site_config.add_plugin(bundler)
    site_config.add_plugin(syntax_highlight)

    for name, func in filters.make_date_filters(DEFAULT_LOCALE).items():
        site_config.add_filter(name, func)

    site_config.add_filter("reversed", filters.reversed_tags)
    site_config.add_filter("postTags", filters.post_tags)

    site_config.add_passthrough_copy("./src/assets/css")
    site_config.add_passthrough_copy("./src/assets/images")

    return {
        "dir": dict(DIRS),
    }
