#!/usr/bin/env python3
"""Command-line interface for the expression-to-LaTeX translator."""

from __future__ import annotations

import sys

from texmath.cli import main


if __name__ == "__main__":
    sys.exit(main())
