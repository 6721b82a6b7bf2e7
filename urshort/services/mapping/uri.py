"""
URI parsing.

Syntactic validation of redirect targets on top of yarl.
"""

import re

from yarl import URL

from .exceptions import InvalidURIError

# RFC 3986 unreserved + reserved characters, and percent escapes
_URI_CHARACTERS = re.compile(r"(?:[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=]|%[0-9A-Fa-f]{2})*")
_SEGMENT_END = re.compile(r"[/?#]")


def parse_uri(value: str) -> URL:
    """
    Parse a string into a URI.

    The text is kept exactly as given (no re-quoting), so a parsed target
    renders back to the configured value.

    Args:
        value: text to parse

    Returns:
        the parsed URL

    Raises:
        InvalidURIError: if the value is empty, contains characters that are
            not allowed in a URI, has a malformed authority, or is a
            relative reference with a colon in its first segment
    """
    if not value:
        raise InvalidURIError(value, "empty")

    if not _URI_CHARACTERS.fullmatch(value):
        raise InvalidURIError(value, "contains characters not allowed in a URI")

    try:
        url = URL(value, encoded=True)
        # yarl validates the port lazily
        url.port
    except ValueError as e:
        raise InvalidURIError(value, str(e)) from e

    # a relative reference cannot have a colon in its first segment
    if not url.scheme and not value.startswith("/"):
        if ":" in _SEGMENT_END.split(value, maxsplit=1)[0]:
            raise InvalidURIError(value, "colon in first segment of a relative reference")

    return url
