#!/usr/bin/env python3
"""Entry point for ``python -m d20``."""

import sys

from d20.cli import main

sys.exit(main())
