#!/usr/bin/env python3
"""Entry point for running as `python -m abbr_cli`."""

from abbr_cli.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
