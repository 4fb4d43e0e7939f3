#!/usr/bin/env python3
"""Deduplicating cache for a single generation run."""

from typing import Set


class UniqueFilter:
    """
    Rejects values that were already accepted during this run.

    The cache only grows; it lives as long as the generator that owns it.
    A disabled filter accepts everything and stores nothing.
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self._seen: Set[str] = set()

    def accept(self, value: str) -> bool:
        """Record ``value`` and return True, or return False if seen before."""
        if not self.enabled:
            return True
        if value in self._seen:
            return False
        self._seen.add(value)
        return True

    def __contains__(self, value: str) -> bool:
        return value in self._seen

    def __len__(self) -> int:
        return len(self._seen)


__all__ = ["UniqueFilter"]
