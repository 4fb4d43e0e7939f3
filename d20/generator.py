#!/usr/bin/env python3
"""
Token Generator
===============
Drives the pipeline: resolve the alphabet once, then sample, transform and
deduplicate until the requested number of tokens has been accepted.

Usage:
    from d20.config import GeneratorConfig
    from d20.generator import TokenGenerator

    gen = TokenGenerator(GeneratorConfig(chars="numeric", length=4, count=3))
    for token in gen.iter_tokens():
        print(token.value)

Duplicates rejected by the uniqueness filter do not count toward ``count``.
If the alphabet and length cannot produce enough distinct values the loop
does not terminate; choosing sensible parameters is up to the caller.
"""

import logging
from typing import BinaryIO, Iterator, List, Optional

from .charsets import resolve_alphabet
from .config import GeneratorConfig
from .entropy import RandomSource
from .sampler import Token, TokenSampler
from .transforms import OutputTransformer
from .unique import UniqueFilter

logger = logging.getLogger(__name__)


class TokenGenerator:
    """
    Generates tokens for one run.

    Args:
        config: Run configuration (normalized on construction)
        source: Random source (defaults to the process-wide one)
        unique: Uniqueness filter (defaults to one enabled per config.unique)
    """

    def __init__(self, config: GeneratorConfig,
                 source: Optional[RandomSource] = None,
                 unique: Optional[UniqueFilter] = None):
        self.config = config.normalized()
        self.alphabet = resolve_alphabet(self.config.charset, self.config.custom)
        self.sampler = TokenSampler(self.alphabet, self.config.length, source=source)
        self.transformer = OutputTransformer(
            base64=self.config.base64,
            mangle=self.config.mangle,
            block=self.config.block,
            blocksize=self.config.blocksize,
        )
        self.unique = unique if unique is not None else UniqueFilter(enabled=self.config.unique)
        self.rejected = 0

        mode = "raw bytes" if self.sampler.raw else f"{len(self.alphabet)} symbols"
        logger.debug(
            f"Generating {self.config.count} tokens of length {self.config.length} "
            f"from {mode} (charset={self.config.charset.value})"
        )

    def next_token(self) -> Token:
        """Sample and transform one candidate, without deduplication."""
        return self.transformer.apply(self.sampler.sample())

    def iter_tokens(self) -> Iterator[Token]:
        """Yield accepted tokens until ``count`` have been produced."""
        accepted = 0
        while accepted < self.config.count:
            token = self.next_token()
            if not self.unique.accept(token.value):
                self.rejected += 1
                logger.debug(f"Duplicate rejected ({self.rejected} so far)")
                continue
            accepted += 1
            yield token

    def emit(self, stream: BinaryIO) -> int:
        """
        Write each accepted token followed by the separator.

        Returns:
            Number of tokens written
        """
        separator = self.config.separator.encode("utf-8")
        written = 0
        for token in self.iter_tokens():
            stream.write(token.to_bytes() + separator)
            stream.flush()
            written += 1
        return written


def generate(config: Optional[GeneratorConfig] = None, **kwargs) -> List[str]:
    """Generate tokens and return their values."""
    if config is None:
        config = GeneratorConfig(**kwargs)
    return [token.value for token in TokenGenerator(config).iter_tokens()]


__all__ = [
    "TokenGenerator",
    "generate",
]
