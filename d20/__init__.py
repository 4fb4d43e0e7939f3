#!/usr/bin/env python3
"""
d20 - Random Token Generator
============================

Generates random strings, PINs and base64 key blocks from the system
entropy source.

Quick Start
-----------
    from d20 import GeneratorConfig, TokenGenerator, generate

    # Three 4-digit numeric strings
    pins = generate(chars="numeric", length=4, count=3)

    # Stream tokens with the full pipeline
    gen = TokenGenerator(GeneratorConfig(keyblock=True, length=741, count=1))
    for token in gen.iter_tokens():
        print(token.value)

Modules
-------
    d20.charsets   - Named character sets
    d20.entropy    - System random source
    d20.sampler    - Token sampling
    d20.transforms - base64 / mangle / block output transforms
    d20.unique     - Per-run deduplication
    d20.config     - Run configuration and shortcut normalization
    d20.generator  - Generation loop and output

CLI Usage
---------
    python -m d20 --chars alphanumeric-nosim --length 12 --count 5
    python -m d20 --list-charsets
"""

__version__ = "0.1.0"

from .charsets import Charset, resolve_alphabet, list_charsets
from .config import ConfigError, GeneratorConfig, SeparatorError, unescape_separator
from .entropy import EntropyError, RandomSource, get_source
from .generator import TokenGenerator, generate
from .sampler import Token, TokenSampler
from .transforms import Mangle, OutputTransformer, blockstring
from .unique import UniqueFilter

__all__ = [
    '__version__',
    # Character sets
    'Charset',
    'resolve_alphabet',
    'list_charsets',
    # Configuration
    'GeneratorConfig',
    'ConfigError',
    'SeparatorError',
    'unescape_separator',
    # Entropy
    'RandomSource',
    'EntropyError',
    'get_source',
    # Pipeline
    'Token',
    'TokenSampler',
    'Mangle',
    'OutputTransformer',
    'blockstring',
    'UniqueFilter',
    'TokenGenerator',
    'generate',
]
