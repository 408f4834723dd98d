"""
Template filters for dates and tag lists.

The date filters are built by make_date_filters() so the locale is passed in
explicitly instead of being read from process-wide state.
"""
from datetime import datetime

from django.utils import dateformat, timezone, translation

from .conf import DEFAULT_LOCALE, EXCLUDED_TAGS

READABLE_DATE_FORMAT = "d E Y"
HTML_DATE_FORMAT = "Y-m-d"


def _local(value):
    if isinstance(value, datetime) and timezone.is_aware(value):
        return timezone.localtime(value)
    return value


def readable_date(value, locale=DEFAULT_LOCALE):
    """
    Format a date as "DD Month YYYY" in the given locale.

    The month uses its genitive form where the locale has one, e.g.
    "05 березня 2024" for uk-UA.
    """
    if value in (None, ""):
        return ""
    with translation.override(translation.to_language(locale)):
        return dateformat.format(_local(value), READABLE_DATE_FORMAT)


def html_date_string(value):
    """Format a date as "YYYY-MM-DD" for datetime attributes."""
    if value in (None, ""):
        return ""
    return dateformat.format(_local(value), HTML_DATE_FORMAT)


def make_date_filters(locale=DEFAULT_LOCALE):
    """
    Build the date filters bound to a locale.

    Returns a dict of filter name to function, ready for registration.
    """

    def _readable_date(value):
        return readable_date(value, locale)

    return {
        "readableDate": _readable_date,
        "htmlDateString": html_date_string,
    }


def reversed_tags(tags):
    """Return a new list with the tags in reverse order."""
    # Leaves the input list untouched.
    return list(reversed(tags or []))


def post_tags(tags, excluded=EXCLUDED_TAGS):
    """Return the tags without the excluded ones, keeping their order."""
    return [tag for tag in (tags or []) if tag not in excluded]
