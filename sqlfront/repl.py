"""
repl.py

Interactive shell for the sqlfront SQL front end.

Responsibilities:
- Read one line at a time, tokenize and parse it as a single statement.
- Print the parsed AST as an indented tree, or the error message.
- Keep going after errors; only `exit` (any case) or end-of-input stops it.

Usage:
    python -m sqlfront                    interactive
    python -m sqlfront -c "SELECT a FROM t"   parse one statement and exit
    python -m sqlfront -v                 also log parser debug output
"""

from __future__ import annotations

import argparse
import logging
import sys

try:
    import readline  # noqa: F401
except Exception:
    # readline is optional; if missing, REPL still works.
    readline = None  # type: ignore[assignment]

from .errors import SqlFrontError
from .parser import parse_sql
from .render import format_ast

logger = logging.getLogger(__name__)

PROMPT = "sql> "
EXIT_COMMAND = "exit"


def is_exit_command(line: str) -> bool:
    """True for `exit` in any letter case, ignoring surrounding whitespace."""
    return line.strip().lower() == EXIT_COMMAND


def run_line(line: str) -> tuple[bool, str]:
    """
    Parse one input line.

    Args:
        line: Raw input line.

    Returns:
        (ok, text): ok is False on a parse error; text is the rendered AST or
        the error message.
    """
    try:
        stmt = parse_sql(line)
    except SqlFrontError as e:
        logger.debug("Parse failed for %r: %s", line, e)
        return False, f"Error: {e}"
    return True, "Parsed statement:\n" + format_ast(stmt)


def repl(prompt: str = PROMPT) -> int:
    """
    Run the interactive REPL.

    Args:
        prompt: Prompt string shown before each line.

    Returns:
        Process exit code (0 on normal exit).
    """
    print("sqlfront shell")
    print(f"Enter one SQL statement per line (type '{EXIT_COMMAND}' to leave).")

    while True:
        try:
            line = input(prompt)
        except EOFError:
            print()
            return 0
        except KeyboardInterrupt:
            # Drop the current line on Ctrl+C
            print()
            continue

        if is_exit_command(line):
            print("Bye.")
            return 0
        if not line.strip():
            continue

        ok, text = run_line(line)
        if ok:
            print(text)
        else:
            print(text, file=sys.stderr)
        print()


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="sqlfront", description="Parse SQL statements and print their syntax tree.")
    ap.add_argument("-c", "--command", help="parse a single statement, print it and exit")
    ap.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    ap.add_argument("--prompt", default=PROMPT, help=f"interactive prompt (default: {PROMPT!r})")
    return ap


def main(argv: list[str] | None = None) -> int:
    """
    CLI entrypoint.

    Args:
        argv: Arguments without the program name (defaults to sys.argv[1:]).

    Returns:
        Exit code: 0 on success, 1 when -c input fails to parse.
    """
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.command is not None:
        ok, text = run_line(args.command)
        print(text, file=sys.stdout if ok else sys.stderr)
        return 0 if ok else 1

    return repl(args.prompt)


if __name__ == "__main__":
    raise SystemExit(main())
