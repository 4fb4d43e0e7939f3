#!/usr/bin/env python3
"""
Generator Configuration
=======================
Run parameters for one generation run, and the normalization step that
turns user-facing flags into the settings the pipeline actually uses.

Defaults come from the ``generator`` section of ``configs/app.yaml``.
Shortcut flags are rewritten here, once, before anything is sampled:

    keyblock  ->  chars=bytes, base64, block, blocksize=65
    pin=N     ->  chars=numeric, length=N   (only when N > 0)

Usage:
    from d20.config import GeneratorConfig

    config = GeneratorConfig(pin=6, count=3).normalized()
"""

import ast
import logging
import warnings
from dataclasses import dataclass, field, replace
from typing import Optional

from .charsets import Charset, MAX_ALPHABET_SIZE
from .settings import GENERATOR_KEYS, generator_defaults, get_setting

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Configuration that cannot be used to generate tokens."""


class SeparatorError(ConfigError):
    """Malformed escape sequence in the output separator."""


def unescape_separator(text: str) -> str:
    """
    Decode backslash escapes (\\n, \\t, \\x41, \\u00e9, ...) in a separator.

    Literal line breaks are kept as they are.

    Raises:
        SeparatorError: If an escape sequence is malformed or a quote is bare
    """
    parts = text.split('\n')
    for part in parts:
        _check_quotes(part)
    if '\\' not in text:
        return text
    return '\n'.join(_unquote(part) for part in parts)


def _check_quotes(part: str):
    # A bare quote would end the literal early; adjacent literals get joined
    escaped = False
    for ch in part:
        if escaped:
            escaped = False
        elif ch == '\\':
            escaped = True
        elif ch == '"':
            raise SeparatorError(f"invalid separator {part!r}: unescaped '\"'")


def _unquote(part: str) -> str:
    with warnings.catch_warnings():
        # Unknown escapes like "\q" only warn by default
        warnings.simplefilter("error")
        try:
            value = ast.literal_eval(f'"{part}"')
        except (SyntaxError, ValueError, SyntaxWarning, DeprecationWarning) as e:
            raise SeparatorError(f"invalid separator {part!r}: {e}") from e
    if not isinstance(value, str):
        raise SeparatorError(f"invalid separator {part!r}")
    return value


@dataclass
class GeneratorConfig:
    """Configuration for a generation run."""
    chars: Optional[str] = None
    custom: Optional[str] = None
    length: Optional[int] = None
    count: Optional[int] = None
    mangle: Optional[str] = None
    base64: Optional[bool] = None
    block: Optional[bool] = None
    blocksize: Optional[int] = None
    keyblock: Optional[bool] = None
    pin: Optional[int] = None
    unique: Optional[bool] = None
    separator: Optional[str] = None

    # Set once normalized() has run; guards against double unescaping
    resolved: bool = field(default=False, repr=False, compare=False)

    def __post_init__(self):
        unset = [name for name in GENERATOR_KEYS if getattr(self, name) is None]
        if unset:
            defaults = generator_defaults()
            for name in unset:
                setattr(self, name, defaults[name])

    @property
    def charset(self) -> Charset:
        return Charset.parse(self.chars)

    def normalized(self) -> "GeneratorConfig":
        """
        Return a copy with shortcuts applied and values made usable.

        Raises:
            SeparatorError: If the separator has a malformed escape
            ConfigError: If the custom alphabet is too large
        """
        if self.resolved:
            return self

        changes = {}
        chars = self.chars
        if chars == "list":
            chars = Charset.ALL.value
        changes["chars"] = chars

        if self.keyblock:
            changes.update(
                chars=Charset.BYTES.value,
                base64=True,
                block=True,
                blocksize=get_setting("keyblock.blocksize", 65),
            )
        if self.pin and self.pin > 0:
            changes.update(chars=Charset.NUMERIC.value, length=self.pin)

        length = changes.get("length", self.length)
        if length < 0:
            logger.debug(f"Negative length {length} clamped to 0")
            changes["length"] = 0
        if self.count < 0:
            changes["count"] = 0
        blocksize = changes.get("blocksize", self.blocksize)
        if blocksize < 1:
            logger.debug(f"Block size {blocksize} clamped to 1")
            changes["blocksize"] = 1

        if len(self.custom) > MAX_ALPHABET_SIZE:
            raise ConfigError(
                f"custom alphabet has {len(self.custom)} symbols, "
                f"at most {MAX_ALPHABET_SIZE} are supported"
            )

        changes["separator"] = unescape_separator(self.separator)
        changes["resolved"] = True
        return replace(self, **changes)


__all__ = [
    "ConfigError",
    "SeparatorError",
    "GeneratorConfig",
    "unescape_separator",
]
