"""Percent-encoding used for every part of an OAuth 1.0a signature.

Unreserved characters are ASCII letters, digits and ``-._*``. Everything else,
``~`` included, is encoded octet by octet from its UTF-8 form with upper-case
hex digits. ``urllib.parse.quote`` always leaves ``~`` alone, hence the
explicit substitution.
"""

from typing import Any
from urllib.parse import quote

_SAFE = "*"


def percent_encode(value: Any) -> str:
    """Percent-encode ``value`` (converted with ``str()``) for signing.

    Already-encoded input is encoded again: ``%`` becomes ``%25``.
    """
    return quote(str(value), safe=_SAFE).replace("~", "%7E")
