#!/usr/bin/env python3
"""
d20 CLI
=======
Command-line interface for random token generation.

Usage:
    d20 --chars alphanumeric-nosim --length 12 --count 5
    d20 --pin 6 --count 1
    d20 --keyblock --length 741 --count 1
    d20 --chars numeric --length 4 --count 3 --separator ","
    d20 --list-charsets
"""

import argparse
import logging
import os
import sys
from typing import BinaryIO, Optional

from rich.console import Console
from rich.table import Table

from d20 import __version__
from d20.charsets import Charset, CHARSET_ALIASES, list_charsets
from d20.config import ConfigError, GeneratorConfig, SeparatorError
from d20.entropy import EntropyError
from d20.generator import TokenGenerator
from d20.settings import generator_defaults, get_setting
from d20.transforms import Mangle

logger = logging.getLogger(__name__)

# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI diagnostics; tokens themselves go to the binary stream."""

    def error(self, msg: str):
        print(f"Error: {msg}", file=sys.stderr)


def setup_logging(verbose: bool = False):
    """Configure stderr logging from app.yaml."""
    level_name = str(get_setting("logging.level", "WARNING")).upper()
    level = logging.DEBUG if verbose else getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(
        level=level,
        format=get_setting("logging.format", "%(levelname)s [%(name)s] %(message)s"),
        stream=sys.stderr,
    )


def charset_names() -> str:
    names = [c.value for c in Charset] + sorted(CHARSET_ALIASES)
    return ' '.join(names)


def print_charsets(console: Optional[Console] = None):
    """Print the named character sets as a table."""
    console = console or Console()
    table = Table(title=get_setting("cli.charset_table_title", "Character sets"))
    table.add_column("Name", style="bold", no_wrap=True)
    table.add_column("Aliases")
    table.add_column("Size", justify="right")
    table.add_column("Symbols", overflow="fold")

    for name, info in list_charsets().items():
        symbols = info["symbols"] if info["symbols"] is not None else "(raw bytes)"
        table.add_row(name, ', '.join(info["aliases"]) or '-', str(info["size"]), symbols)

    console.print(table)


# =============================================================================
# Commands
# =============================================================================

def build_config(args) -> GeneratorConfig:
    """Build the run configuration from parsed arguments."""
    return GeneratorConfig(
        chars=args.chars,
        custom=args.custom,
        length=args.length,
        count=args.count,
        mangle=args.mangle,
        base64=args.base64,
        block=args.block,
        blocksize=args.blocksize,
        keyblock=args.keyblock,
        pin=args.pin,
        unique=args.unique,
        separator=args.separator,
    )


def cmd_generate(args, out: Output, stream: BinaryIO) -> int:
    """Generate tokens and write them to ``stream``."""
    try:
        config = build_config(args).normalized()
    except SeparatorError as e:
        out.error(f"separator error: {e}")
        return 2
    except ConfigError as e:
        out.error(str(e))
        return 2

    if config.base64 and Mangle.parse(config.mangle) is not Mangle.NONE:
        logger.warning("--mangle with --base64 reduces the number of distinct outputs")

    generator = TokenGenerator(config)
    try:
        written = generator.emit(stream)
    except EntropyError as e:
        out.error(str(e))
        return 1
    except BrokenPipeError:
        # Reader went away (e.g. `d20 | head -1`); keep the interpreter from
        # failing again when it flushes stdout at exit
        if stream is sys.stdout.buffer:
            devnull = os.open(os.devnull, os.O_WRONLY)
            os.dup2(devnull, sys.stdout.fileno())
        return 0

    logger.debug(f"Wrote {written} tokens, rejected {generator.rejected} duplicates")
    return 0


# =============================================================================
# Main
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    defaults = generator_defaults()

    parser = argparse.ArgumentParser(
        prog='d20',
        description='d20 - Random Token Generator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --chars alphanumeric-nosim --length 12 --count 5
  %(prog)s --pin 6 --count 1
  %(prog)s --keyblock --length 741 --count 1
  %(prog)s --chars numeric --length 4 --count 3 --separator ","
  %(prog)s --custom AB --length 5 --count 1
"""
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging to stderr')
    parser.add_argument('--list-charsets', action='store_true', help='Show the character sets and exit')

    parser.add_argument('--chars', default=defaults.get('chars'),
                        help=f'Characters to use ({charset_names()})')
    parser.add_argument('--length', type=int, default=defaults.get('length'),
                        help='Length of each string (default: %(default)s)')
    parser.add_argument('--count', type=int, default=defaults.get('count'),
                        help='Number of strings (default: %(default)s)')
    parser.add_argument('--mangle', default=defaults.get('mangle'),
                        help='Mangle the output: UC or LC '
                             '(WARN: decreases cardinality, should not be used with --base64)')
    parser.add_argument('--base64', action='store_true', default=defaults.get('base64'),
                        help='Base64 encode the output')
    parser.add_argument('--block', action='store_true', default=defaults.get('block'),
                        help='Block the output into lines of --blocksize characters')
    parser.add_argument('--keyblock', action='store_true', default=defaults.get('keyblock'),
                        help="Shortcut to '--chars bytes --base64 --block --blocksize 65' "
                             "(hint: --length 741)")
    parser.add_argument('--pin', type=int, default=defaults.get('pin'),
                        help="Shortcut to '--chars numeric --length PIN'")
    parser.add_argument('--blocksize', type=int, default=defaults.get('blocksize'),
                        help='Line length used by --block (default: %(default)s)')
    parser.add_argument('--unique', action='store_true', default=defaults.get('unique'),
                        help='Ensure generated strings are unique within the run')
    parser.add_argument('--separator', default=defaults.get('separator'),
                        help='String written after each value; escapes like \\n and \\t are decoded')
    parser.add_argument('--custom', default=defaults.get('custom'),
                        help="Characters to use in lieu of --chars (repeat for prevalence)")
    return parser


def main(argv=None, stream: Optional[BinaryIO] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    out = Output()

    if args.list_charsets:
        print_charsets()
        return 0

    if stream is None:
        stream = sys.stdout.buffer

    try:
        return cmd_generate(args, out, stream)
    except KeyboardInterrupt:
        return 130


if __name__ == '__main__':
    sys.exit(main())
