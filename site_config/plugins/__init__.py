"""
Plugins enabled by the site configuration.

Each plugin is a callable taking the registry:

    from site_config.plugins import syntax_highlight
    site.add_plugin(syntax_highlight)
"""
from .bundler import bundler
from .syntax_highlight import syntax_highlight

__all__ = [
    "bundler",
    "syntax_highlight",
]
