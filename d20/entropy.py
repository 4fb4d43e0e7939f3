#!/usr/bin/env python3
"""
Entropy Source
==============
Cryptographically strong random bytes for token generation.

Bytes come straight from the operating system CSPRNG via ``os.urandom()``.
Nothing is cached or seeded between calls. If the OS cannot supply entropy
the failure is fatal: there is no fallback to ``random`` or any other
weaker generator.
"""

import os
import logging

logger = logging.getLogger(__name__)


class EntropyError(RuntimeError):
    """The system entropy source could not supply random bytes."""


class RandomSource:
    """
    Process-wide source of random bytes.

    Usage:
        source = get_source()
        data = source.read(16)
    """

    def read(self, n: int) -> bytes:
        """Return ``n`` random bytes."""
        if n < 0:
            raise ValueError(f"Cannot read a negative number of bytes: {n}")
        if n == 0:
            return b""
        try:
            data = os.urandom(n)
        except (OSError, NotImplementedError) as e:
            raise EntropyError(f"System entropy source failed: {e}") from e
        if len(data) != n:
            raise EntropyError(f"Short read from entropy source: {len(data)} of {n} bytes")
        return data


# Global instance
_source = RandomSource()


def get_source() -> RandomSource:
    """Get the global random source."""
    return _source


__all__ = [
    "EntropyError",
    "RandomSource",
    "get_source",
]
