"""
Syntax highlighting for code blocks, rendered with Pygments.

    {{ snippet|highlight:"python" }}
    <style>{{ ""|highlight_styles }}</style>
"""
import logging

from django.utils.safestring import mark_safe
from pygments import highlight as pygments_highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import TextLexer, get_lexer_by_name
from pygments.util import ClassNotFound

from ..conf import site_settings

logger = logging.getLogger(__name__)


def get_lexer(language):
    """Return the lexer for a language name, or plain text if unknown."""
    if not language:
        return TextLexer()
    try:
        return get_lexer_by_name(language)
    except ClassNotFound:
        logger.warning("No lexer for language %r, rendering as plain text", language)
        return TextLexer()


def get_formatter():
    return HtmlFormatter(
        style=site_settings.PYGMENTS_STYLE,
        cssclass=site_settings.HIGHLIGHT_CSS_CLASS,
        linenos="table" if site_settings.HIGHLIGHT_LINENOS else False,
    )


def highlight(code, language=None):
    """Render a code block as highlighted HTML."""
    if code is None:
        return ""
    return mark_safe(pygments_highlight(str(code), get_lexer(language), get_formatter()))


def highlight_styles(value=None):
    """Return the CSS rules for the configured Pygments style."""
    selector = f".{site_settings.HIGHLIGHT_CSS_CLASS}"
    return mark_safe(get_formatter().get_style_defs(selector))


def syntax_highlight(registry):
    registry.add_filter("highlight", highlight)
    registry.add_filter("highlight_styles", highlight_styles)
