import sys
from itertools import cycle, islice
from pathlib import Path

import pytest

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from d20.entropy import RandomSource


class FixedSource(RandomSource):
    """Deterministic source that replays a byte pattern."""

    def __init__(self, pattern: bytes):
        self._bytes = cycle(pattern)
        self.reads = []

    def read(self, n: int) -> bytes:
        self.reads.append(n)
        return bytes(islice(self._bytes, n))


@pytest.fixture
def fixed_source():
    """Factory for deterministic random sources."""
    return FixedSource
