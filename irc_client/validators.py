"""Predicates guarding every locally generated protocol field.

The nickname grammar is deliberately narrower than RFC 2812: only ASCII
letters and digits are accepted, and the first character may not be a
digit.  Special characters such as ``-``, ``_``, ``[`` or ``]`` are
rejected.
"""

import string

_NICK_CHARS = frozenset(string.ascii_letters + string.digits)


def is_valid_nick(text):
    """Return ``True`` if *text* is an acceptable nickname."""
    if not text or text[0] in string.digits:
        return False
    return all(c in _NICK_CHARS for c in text)


def no_newline(text):
    r"""Return ``True`` if *text* contains neither ``\r`` nor ``\n``."""
    return "\r" not in text and "\n" not in text
