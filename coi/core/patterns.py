"""
Precompiled pattern tables shared by every validator.

All tables are module-level constants wrapped in read-only mappings, so they
can be read from any number of Validator instances without synchronization.
Every pattern is applied with ``fullmatch``; none of them carry ``^``/``$``
anchors.
"""

import re
from collections.abc import Iterable
from re import Pattern
from types import MappingProxyType

_EMAIL = r"[a-z0-9](?:[._\\a-z0-9-]*[a-z0-9])?@(?:[a-z0-9][-a-z0-9]*[a-z0-9]\.){1,63}[a-z0-9]+"

_IPV4 = (
    r"(?:[1-9][0-9]?|1[0-9][0-9]|2[01][0-9]|22[0-3])"
    r"(?:\.(?:1?[0-9]{1,2}|2[0-4][0-9]|25[0-5])){2}"
    r"(?:\.(?:[0-9][0-9]?|1[0-9][0-9]|2[0-4][0-9]|25[0-4]))"
)

_HOSTNAME = (
    r"[a-z\u00a1-\uffff0-9]+(?:-+[a-z\u00a1-\uffff0-9]+)*"
    r"(?:\.[a-z\u00a1-\uffff0-9]+(?:-+[a-z\u00a1-\uffff0-9]+)*)*"
    r"(?:\.(?:[a-z\u00a1-\uffff]{2,}))"
)

_URL = (
    r"(?!mailto:)"
    r"(?:(?:http|https|ftp)://|//)"
    r"(?:\S+(?::\S*)?@)?"
    rf"(?:{_IPV4}|{_HOSTNAME}|localhost)"
    r"(?::[0-9]{2,5})?"
    r"(?:[/?#]\S*)?"
)

_ID_CARD = (
    r"[1-9][0-9]{5}"
    r"(?:18|19|20)[0-9]{2}"
    r"(?:0[1-9]|1[0-2])"
    r"(?:[0-2][1-9]|10|20|30|31)"
    r"[0-9]{3}[0-9Xx]"
)

REGEX_PATTERNS: MappingProxyType[str, Pattern[str]] = MappingProxyType({
    "email": re.compile(_EMAIL, re.IGNORECASE),
    "url": re.compile(_URL, re.IGNORECASE),
    "phone": re.compile(r"1[3-9][0-9]{9}"),
    "id_card": re.compile(_ID_CARD),
    "positive_integer": re.compile(r"[1-9][0-9]*"),
    "number": re.compile(r"-?[0-9]+(?:\.[0-9]+)?"),
    "chinese": re.compile(r"[\u4e00-\u9fa5]+"),
    "whitespace": re.compile(r"\s*"),
})

# Character-class fragments for require_format tokens
FORMAT_MAP: MappingProxyType[str, str] = MappingProxyType({
    "number": "0-9",
    "letter": "a-zA-Z",
    "chinese": "\u4e00-\u9fa5",
})


def match_pattern(name: str, text: str) -> bool:
    """
    Check whether text fully matches a named pattern.

    Args:
        name: Key into REGEX_PATTERNS
        text: Text to test

    Returns:
        True if the whole text matches

    Raises:
        KeyError: If no pattern is registered under name
    """
    return REGEX_PATTERNS[name].fullmatch(text) is not None


def format_pattern(tokens: Iterable[str]) -> Pattern[str] | None:
    """
    Build a pattern accepting only characters from the given format tokens.

    Unknown tokens are ignored. Returns None when no known token remains.
    """
    allowed = "".join(FORMAT_MAP[token] for token in tokens if token in FORMAT_MAP)
    if not allowed:
        return None
    return re.compile(f"[{allowed}]*")
