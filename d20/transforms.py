#!/usr/bin/env python3
"""
Output Transforms
=================
Post-processing applied to each sampled token, always in this order:

1. base64  - standard alphabet, padded
2. mangle  - UC / LC case mapping
3. block   - reflow into fixed-width lines

Each stage is optional. Mangling base64 output is allowed but throws away
cardinality, since base64 is case-sensitive.
"""

import base64
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .sampler import Token

logger = logging.getLogger(__name__)


class Mangle(Enum):
    """Case mangling modes."""
    NONE = ""
    UPPER = "uc"
    LOWER = "lc"

    @classmethod
    def parse(cls, name: Optional[str]) -> "Mangle":
        """Case-insensitive; unknown modes are a no-op."""
        try:
            return cls((name or "").lower())
        except ValueError:
            logger.debug(f"Unknown mangle mode '{name}', ignoring")
            return cls.NONE


def encode_base64(token: Token) -> Token:
    """Base64-encode the token's bytes (UTF-8 for symbol tokens)."""
    encoded = base64.b64encode(token.to_bytes()).decode("ascii")
    return Token(value=encoded)


def mangle(token: Token, mode) -> Token:
    """Upper- or lower-case the token."""
    if not isinstance(mode, Mangle):
        mode = Mangle.parse(mode)
    if mode is Mangle.NONE:
        return token

    if token.raw:
        # ASCII-only so every byte stays a single byte
        data = token.to_bytes()
        data = data.upper() if mode is Mangle.UPPER else data.lower()
        return Token.from_bytes(data)

    value = token.value.upper() if mode is Mangle.UPPER else token.value.lower()
    return Token(value=value, raw=token.raw)


def blockstring(s: str, n: int) -> str:
    """
    Break ``s`` into lines of ``n`` code points.

    No newline follows the final code point, so there is never a trailing
    empty line.
    """
    if n < 1:
        raise ValueError(f"block size must be positive, got {n}")
    return '\n'.join(s[i:i + n] for i in range(0, len(s), n))


def block(token: Token, size: int) -> Token:
    return Token(value=blockstring(token.value, size), raw=token.raw)


@dataclass
class OutputTransformer:
    """Applies the enabled transforms to a token, in fixed order."""
    base64: bool = False
    mangle: Mangle = Mangle.NONE
    block: bool = False
    blocksize: int = 65

    def __post_init__(self):
        if not isinstance(self.mangle, Mangle):
            self.mangle = Mangle.parse(self.mangle)

    def apply(self, token: Token) -> Token:
        if self.base64:
            token = encode_base64(token)
        token = mangle(token, self.mangle)
        if self.block:
            token = block(token, self.blocksize)
        return token


__all__ = [
    "Mangle",
    "OutputTransformer",
    "encode_base64",
    "mangle",
    "block",
    "blockstring",
]
