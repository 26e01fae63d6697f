"""Removes PHP diagnostic noise from raw response bodies."""

import re

_HTML_BANNER_FLAGS = re.IGNORECASE | re.DOTALL

# Applied in order: HTML banners first, then their plain-text line forms.
# "Fatal error:" precedes "Error:" so the latter does not leave "Fatal " behind.
_BANNER_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"<br\s*/?>\s*<b>Warning</b>:.*?<br\s*/?>", _HTML_BANNER_FLAGS),
    re.compile(r"<br\s*/?>\s*<b>Notice</b>:.*?<br\s*/?>", _HTML_BANNER_FLAGS),
    re.compile(r"<br\s*/?>\s*<b>Error</b>:.*?<br\s*/?>", _HTML_BANNER_FLAGS),
    re.compile(r"<br\s*/?>\s*<b>Fatal error</b>:.*?<br\s*/?>", _HTML_BANNER_FLAGS),
    re.compile(r"Warning:.*?\n", re.IGNORECASE),
    re.compile(r"Notice:.*?\n", re.IGNORECASE),
    re.compile(r"Fatal error:.*?\n", re.IGNORECASE),
    re.compile(r"Error:.*?\n", re.IGNORECASE),
)

_TAG_RE = re.compile(r"<[^>]*>")
_LEADING_WHITESPACE_RE = re.compile(r"^[\s\r\n]*")


def sanitize(raw: str) -> str:
    """Strip interpreter banners, leftover markup and surrounding whitespace.

    Banner removal must run before tag stripping: the banner patterns are
    anchored on the ``<br>``/``<b>`` tags that tag stripping would erase.
    The result may still be invalid JSON.
    """
    cleaned = raw.strip()
    for pattern in _BANNER_PATTERNS:
        cleaned = pattern.sub("", cleaned)
    cleaned = _TAG_RE.sub("", cleaned)
    cleaned = _LEADING_WHITESPACE_RE.sub("", cleaned, count=1)
    return cleaned.strip()
