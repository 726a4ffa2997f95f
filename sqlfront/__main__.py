"""
sqlfront/__main__.py

Package entry point for running the sqlfront shell as a module:

    python -m sqlfront [-c SQL] [-v]

This also serves as the target for the console script entry point defined in
pyproject.toml:

    sqlfront [-c SQL] [-v]
"""

from __future__ import annotations

import sys


def main() -> int:
    """
    Entry point for `python -m sqlfront` and the installed `sqlfront` command.

    Returns:
        Exit code (0 for normal exit).
    """
    # Import here so packaging/runtime errors show cleanly at entry time.
    from .repl import main as repl_main

    return int(repl_main(sys.argv[1:]))


if __name__ == "__main__":
    raise SystemExit(main())
