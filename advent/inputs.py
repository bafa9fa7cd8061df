"""Reading puzzle input from a file named on the command line or from stdin."""

import sys
from pathlib import Path

_USAGE = "usage: <command> [input-file]"


def _arguments(argv):
    return sys.argv[1:] if argv is None else list(argv)


def read_input(argv=None):
    """Return the whole puzzle input as text.

    With one argument the input is read from that file ("-" means stdin);
    with none it is read from stdin.
    """
    args = _arguments(argv)
    if len(args) > 1:
        raise SystemExit(_USAGE)
    if not args or args[0] == "-":
        return sys.stdin.read()
    return Path(args[0]).read_text()


def input_lines(argv=None):
    """Return the puzzle input split into lines, without line endings."""
    return read_input(argv).splitlines()