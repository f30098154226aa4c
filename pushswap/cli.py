"""Command line: print the moves that sort the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from .parsing import InputError, parse_arguments
from .printf import printf, render
from .sorting import solve
from .stacks import Node


def describe_stack(entries: Iterable[Node]) -> str:
    """Return one line per entry with its rank and value."""
    lines = [render("Entry %d: %d\n", node.index, node.value) for node in entries]
    if not lines:
        return "404 Stack not found\n"
    return "".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the moves that sort the arguments; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        values = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    for name in solve(values).operations:
        printf("%s\n", name)
    return 0


if __name__ == "__main__":
    sys.exit(main())