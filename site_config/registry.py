"""
Registration object handed to the site configuration function.

It collects template filters, passthrough copy rules and plugins, and keeps
the directory mapping returned by the configuration function. Filters land
in a Django template Library, so they are available in templates through
{% load site_filters %}.
"""
import logging
import posixpath

from django import template
from django.core.exceptions import ImproperlyConfigured

logger = logging.getLogger(__name__)

REQUIRED_DIRS = ("input", "output", "layouts")


def normalize_path(path):
    """Normalize a relative source path: "./src/assets/css/" -> "src/assets/css"."""
    return posixpath.normpath(str(path).replace("\\", "/"))


class SiteRegistry:
    """Collects everything a site configuration function registers."""

    def __init__(self):
        self.library = template.Library()
        self.passthrough_copies = []
        self.plugins = []
        self.dirs = None

    @property
    def filters(self):
        return self.library.filters

    def add_filter(self, name, func):
        if name in self.library.filters:
            raise ImproperlyConfigured(f"Template filter '{name}' is already registered")
        self.library.filter(name, func)
        logger.debug("Registered filter %s", name)

    def add_passthrough_copy(self, source):
        path = normalize_path(source)
        if path not in self.passthrough_copies:
            self.passthrough_copies.append(path)
            logger.debug("Registered passthrough copy %s", path)

    def add_plugin(self, plugin, **options):
        """
        Enable a plugin.

        A plugin is any callable taking the registry and keyword options;
        it registers its own filters and copy rules.
        """
        plugin(self, **options)
        self.plugins.append(plugin)
        logger.debug("Enabled plugin %s", getattr(plugin, "__name__", repr(plugin)))

    def load(self, config_fn):
        """
        Run a configuration function against this registry.

        Stores and returns the directory mapping it returns.
        """
        result = config_fn(self) or {}
        dirs = result.get("dir")
        if not isinstance(dirs, dict):
            raise ImproperlyConfigured("Site configuration must return a 'dir' mapping")

        missing = [key for key in REQUIRED_DIRS if key not in dirs]
        if missing:
            raise ImproperlyConfigured(
                f"Site configuration 'dir' is missing: {', '.join(missing)}"
            )

        self.dirs = dict(dirs)
        logger.info(
            "Site configured: %d filters, %d passthrough copies, %d plugins",
            len(self.filters),
            len(self.passthrough_copies),
            len(self.plugins),
        )
        return result

    def passthrough_targets(self):
        """
        Map each passthrough copy source to its destination.

        The input directory prefix is replaced by the output directory, so
        "src/assets/css" is copied to "output/assets/css".
        """
        if self.dirs is None:
            raise ImproperlyConfigured("Site registry has not been loaded")

        input_dir = normalize_path(self.dirs["input"])
        output_dir = normalize_path(self.dirs["output"])

        targets = {}
        for source in self.passthrough_copies:
            relative = source
            if source == input_dir:
                relative = ""
            elif source.startswith(input_dir + "/"):
                relative = source[len(input_dir) + 1:]
            targets[source] = posixpath.join(output_dir, relative) if relative else output_dir
        return targets


site = SiteRegistry()
