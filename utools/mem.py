"""Report total, free and used physical memory."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .util import UsageError, _parse_options, format_size, usage_line

PROG = "mem"
USAGE = "[-utfh]"


def _page_size() -> int:
    return os.sysconf("SC_PAGE_SIZE")


def physical_memory() -> float:
    """Return total physical memory in bytes."""
    return float(os.sysconf("SC_PHYS_PAGES") * _page_size())


def free_memory() -> float:
    """Return free physical memory in bytes."""
    return float(os.sysconf("SC_AVPHYS_PAGES") * _page_size())


def used_memory() -> float:
    """Return physical memory in use, in bytes."""
    return physical_memory() - free_memory()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the mem command and return its exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    usage = usage_line(PROG, USAGE)
    if not args:
        print(usage, file=sys.stderr)
        return 0
    try:
        for option in _parse_options(args, "utfh", PROG):
            if option == "u":
                print(format_size(used_memory()))
            elif option == "t":
                print(format_size(physical_memory()))
            elif option == "f":
                print(format_size(free_memory()))
            else:
                raise UsageError(status=0)
    except UsageError as exc:
        if exc.message:
            print(exc.message, file=sys.stderr)
        print(usage, file=sys.stderr)
        return exc.status
    return 0


import os  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())