"""
Filters registered by the site configuration.

    {% load site_filters %}
    <time datetime="{{ page.date|htmlDateString }}">{{ page.date|readableDate }}</time>
"""
from ..registry import site

register = site.library
