#!/usr/bin/env python3
"""
Character Sets
==============
Named alphabets that tokens are sampled from.

The selector names form a closed set (``Charset``). Anything unrecognized
falls back to ``Charset.ALL`` instead of failing. ``Charset.BYTES`` is not
an alphabet at all: it switches the sampler into raw-byte mode.
"""

import logging
import string
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)

# Sampling reduces one random byte per symbol, so an alphabet can have at
# most 256 distinct positions.
MAX_ALPHABET_SIZE = 256

PUNCTUATION = "_-!$%^&();:.,<>/?"


class Charset(Enum):
    """Named character sets."""
    ALL = "all"
    BYTES = "bytes"
    ALPHANUMERIC = "alphanumeric"
    ALPHANUMERIC_NOSIM = "alphanumeric-nosim"
    NUMERIC = "numeric"
    ALPHABET = "alphabet"
    BINARY = "binary"
    HEXADECIMAL = "hexadecimal"

    @classmethod
    def parse(cls, name: Optional[str]) -> "Charset":
        """Resolve a selector or alias; anything else (even " numeric ") is ALL."""
        key = name or ""
        if key in CHARSET_ALIASES:
            return CHARSET_ALIASES[key]
        try:
            return cls(key)
        except ValueError:
            logger.debug(f"Unknown charset '{name}', using '{cls.ALL.value}'")
            return cls.ALL

    @property
    def is_raw(self) -> bool:
        return self is Charset.BYTES


CHARSET_ALIASES = {
    "list": Charset.ALL,
    "alpha": Charset.ALPHANUMERIC,
    "alpha-nosim": Charset.ALPHANUMERIC_NOSIM,
    "bin": Charset.BINARY,
    "hex": Charset.HEXADECIMAL,
}

# Similar-looking characters (0/O, 1/I/l) are left out of the nosim sets.
CHARSET_SYMBOLS = {
    Charset.ALL: string.digits + string.ascii_uppercase + string.ascii_lowercase + PUNCTUATION,
    Charset.ALPHANUMERIC: string.digits + string.ascii_uppercase + string.ascii_lowercase,
    Charset.ALPHANUMERIC_NOSIM: "23456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghjkmnopqrstuvwxyz",
    Charset.ALPHABET: "ABCDEFGHJKLMNPQRSTUVWXYZabcdefghjkmnopqrstuvwxyz",
    Charset.NUMERIC: string.digits,
    Charset.BINARY: "01",
    Charset.HEXADECIMAL: "0123456789ABCDEF",
}


def resolve_alphabet(charset, custom: str = "") -> Optional[str]:
    """
    Resolve the symbols used for sampling.

    Args:
        charset: A Charset or a selector name
        custom: Literal symbol list overriding the preset (repeats allowed)

    Returns:
        The alphabet as a string, or None for raw-byte mode
    """
    if not isinstance(charset, Charset):
        charset = Charset.parse(charset)

    if charset.is_raw:
        return None
    if custom:
        return custom
    return CHARSET_SYMBOLS.get(charset, CHARSET_SYMBOLS[Charset.ALL])


def list_charsets() -> dict:
    """List all named character sets with their aliases and symbols."""
    result = {}
    for charset in Charset:
        aliases = sorted(a for a, c in CHARSET_ALIASES.items() if c is charset)
        symbols = CHARSET_SYMBOLS.get(charset)
        result[charset.value] = {
            "aliases": aliases,
            "symbols": symbols,
            "size": len(symbols) if symbols is not None else MAX_ALPHABET_SIZE,
        }
    return result


__all__ = [
    "Charset",
    "CHARSET_ALIASES",
    "CHARSET_SYMBOLS",
    "MAX_ALPHABET_SIZE",
    "PUNCTUATION",
    "resolve_alphabet",
    "list_charsets",
]
