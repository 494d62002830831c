"""
namescrub.sanitize

Strip control characters (Unicode category ``Cc``) from entry names.
"""

from __future__ import annotations

import unicodedata


def is_control(ch: str) -> bool:
    return unicodedata.category(ch) == "Cc"


def has_control_chars(name: str) -> bool:
    return any(is_control(ch) for ch in name)


def clean_name(name: str) -> str:
    """
    Return ``name`` with every control character removed.

    The remaining characters keep their relative order. A name without
    control characters is returned unchanged; a name made only of control
    characters becomes the empty string.
    """
    return "".join(ch for ch in name if not is_control(ch))


def _visible(ch: str) -> str:
    code = ord(ch)
    if is_control(ch):
        return f"\\x{code:02x}"
    # Undecodable bytes arrive as lone surrogates (surrogateescape).
    if 0xDC80 <= code <= 0xDCFF:
        return f"\\x{code - 0xDC00:02x}"
    return ch


def describe_name(name: str) -> str:
    """Render control characters and undecodable bytes visibly (``\\x07``) for log output."""
    return "".join(_visible(ch) for ch in name)
