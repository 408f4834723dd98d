"""
site-config - Template filters, asset copy rules and plugins for a static site.

Features:
- Locale-aware readable dates and machine-readable date strings
- Tag list filters (reverse order, hide the "post" tag)
- Passthrough copy of CSS and image assets into the output tree
- Pygments syntax highlighting
- Bundler manifest lookups for built assets
"""

__version__ = "0.1.0"
