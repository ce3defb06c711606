"""Library for escaping and unescaping TEXT values."""

import re

UNESCAPE_CHAR = {"\\\\": "\\", "\\;": ";", "\\,": ",", "\\N": "\n", "\\n": "\n"}
ESCAPE_CHAR = {"\\": "\\\\", ";": "\\;", ",": "\\,", "\n": "\\n"}

# Decoding is a single left to right pass so that an escaped backslash
# followed by an 'n' is not treated as a newline.
_UNESCAPE_RE = re.compile(r"\\[\\;,nN]")
_ESCAPE_RE = re.compile(r"[\\;,\n]")


def unescape(value: str) -> str:
    """Decode the escape sequences of an rfc5545 TEXT value.

    Backslash sequences other than the four defined ones are left as is.
    """
    return _UNESCAPE_RE.sub(lambda match: UNESCAPE_CHAR[match.group(0)], value)


def escape(value: str) -> str:
    """Encode a string as an rfc5545 TEXT value."""
    return _ESCAPE_RE.sub(lambda match: ESCAPE_CHAR[match.group(0)], value)
