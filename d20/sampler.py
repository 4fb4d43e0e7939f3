#!/usr/bin/env python3
"""
Token Sampler
=============
Draws one token per call, either symbols over an alphabet or raw bytes.

Symbol selection reduces one random byte per position modulo the alphabet
size. That is exactly uniform only when the size divides 256 (2, 16, 64...);
for other sizes the lower-indexed symbols come up slightly more often. This
matches the established output of the tool and is kept as-is.
"""

from dataclasses import dataclass
from typing import Optional

from .entropy import RandomSource, get_source


@dataclass
class Token:
    """A generated value moving through the output pipeline."""
    value: str
    raw: bool = False  # value holds opaque bytes, one code point per byte

    def to_bytes(self) -> bytes:
        """Encode for output; raw tokens map back to their exact bytes."""
        if self.raw:
            return self.value.encode("latin-1")
        return self.value.encode("utf-8")

    @classmethod
    def from_bytes(cls, data: bytes) -> "Token":
        return cls(value=data.decode("latin-1"), raw=True)


class TokenSampler:
    """
    Samples fixed-length tokens.

    Args:
        alphabet: Symbols to draw from, or None for raw-byte mode
        length: Symbols (or bytes) per token
        source: Random source (defaults to the process-wide one)
    """

    def __init__(self, alphabet: Optional[str], length: int,
                 source: Optional[RandomSource] = None):
        if alphabet is not None and not alphabet:
            raise ValueError("alphabet must not be empty")
        self.alphabet = alphabet
        self.length = max(0, length)
        self.source = source or get_source()

    @property
    def raw(self) -> bool:
        return self.alphabet is None

    def sample(self) -> Token:
        data = self.source.read(self.length)
        if self.raw:
            return Token.from_bytes(data)
        return Token(value=self.pick(data, self.alphabet))

    @staticmethod
    def pick(data: bytes, alphabet: str) -> str:
        """Map each byte to ``alphabet[b % len(alphabet)]``."""
        size = len(alphabet)
        return ''.join(alphabet[b % size] for b in data)


__all__ = [
    "Token",
    "TokenSampler",
]
