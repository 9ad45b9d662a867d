# =============================================================================
# importers/text.py - Slug and Markup Helpers
# =============================================================================

import re

_NON_SLUG = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")
_DASHES = re.compile(r"-+")
_BR = re.compile(r"<br\s*/?>", re.IGNORECASE)
_TAG = re.compile(r"</?[^>]+(>|$)")


def slugify(text: str) -> str:
    """
    Build a URL slug.

    >>> slugify("Samsung Galaxy S24 Ultra (5G)")
    'samsung-galaxy-s24-ultra-5g'
    """
    slug = _NON_SLUG.sub("", text.lower())
    slug = _WHITESPACE.sub("-", slug)
    slug = _DASHES.sub("-", slug)
    return slug.strip("-")


def clean_html(text: str | None) -> str | None:
    """Replace <br> with a space, strip every other tag and collapse whitespace."""
    if not text:
        return text
    text = _BR.sub(" ", text)
    text = _TAG.sub("", text)
    return _WHITESPACE.sub(" ", text).strip()
