"""
Bundler integration.

The bundler itself runs outside Django and writes a Vite-style manifest:

    {
        "src/main.js": {
            "file": "assets/main.4889e940.js",
            "src": "src/main.js",
            "isEntry": true,
            "css": ["assets/main.b82dbe22.css"]
        }
    }

The "asset" filter maps a source entry to the built file named in the
manifest:

    <script type="module" src="{{ 'src/main.js'|asset }}"></script>

Without a manifest (development mode) the source path is used as is.
"""
import json
import logging
import os

from ..conf import site_settings

logger = logging.getLogger(__name__)

_manifest_cache = {}


class AssetNotFound(Exception):
    """Raised when an entry is missing from an existing manifest."""


def load_manifest(path=None):
    """
    Read the bundler manifest.

    Returns None if the manifest file does not exist. The parsed manifest is
    cached until the file changes.
    """
    path = path or site_settings.BUNDLER_MANIFEST
    try:
        mtime = os.path.getmtime(path)
    except OSError:
        return None

    cached = _manifest_cache.get(path)
    if cached and cached[0] == mtime:
        return cached[1]

    with open(path, encoding="utf-8") as f:
        manifest = json.load(f)
    _manifest_cache[path] = (mtime, manifest)
    logger.debug("Loaded bundler manifest %s (%d entries)", path, len(manifest))
    return manifest


def _url(path):
    base = site_settings.BUNDLER_BASE_URL
    if not base.endswith("/"):
        base += "/"
    return base + path.lstrip("/")


def asset(entry):
    """Return the public URL of a bundled entry."""
    entry = str(entry).lstrip("/")
    manifest = load_manifest()
    if manifest is None:
        return _url(entry)

    try:
        return _url(manifest[entry]["file"])
    except KeyError:
        raise AssetNotFound(f"'{entry}' is not in the bundler manifest") from None


def asset_css(entry):
    """Return the URLs of the stylesheets imported by a bundled entry."""
    entry = str(entry).lstrip("/")
    manifest = load_manifest()
    if manifest is None:
        return []

    try:
        chunk = manifest[entry]
    except KeyError:
        raise AssetNotFound(f"'{entry}' is not in the bundler manifest") from None
    return [_url(path) for path in chunk.get("css", [])]


def bundler(registry):
    registry.add_filter("asset", asset)
    registry.add_filter("asset_css", asset_css)
