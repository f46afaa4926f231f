"""Report battery charge and whether mains power is connected."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from os import PathLike

from .util import UsageError, _parse_options, read_file, usage_line

PROG = "power"
USAGE = "[-cph]"
STATUS_PATH = "/sys/class/power_supply/BAT0/status"
CAPACITY_PATH = "/sys/class/power_supply/BAT0/capacity"
_STATUS_SIZE = 13
_CAPACITY_SIZE = 4
_INTEGER = re.compile(r"-?\d+")


def _compare(left: str, right: str, limit: int) -> int:
    """Byte difference at the first mismatch within *limit* characters."""
    a = left.encode("ascii", errors="replace")[:limit]
    b = right.encode("ascii", errors="replace")[:limit]
    for x, y in zip(a.ljust(limit, b"\0"), b.ljust(limit, b"\0")):
        if x != y:
            return x - y
        if x == 0:
            break
    return 0


def is_connected(path: str | PathLike[str] | None = None) -> bool:
    """Return True when the battery status says mains power is attached."""
    status = read_file(STATUS_PATH if path is None else path, _STATUS_SIZE)
    if status.startswith("Not charging") or status.startswith("Full"):
        return True
    return _compare(status, "Discharging", _STATUS_SIZE) == -1


def get_percent(path: str | PathLike[str] | None = None) -> float:
    """Return the battery capacity in percent."""
    text = read_file(CAPACITY_PATH if path is None else path, _CAPACITY_SIZE)
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"unexpected battery capacity: {text!r}")
    return float(text)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the power command and return its exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    usage = usage_line(PROG, USAGE)
    if not args:
        print(f"{get_percent():.2f}%")
    try:
        for option in _parse_options(args, "pch", PROG):
            if option == "p":
                print(f"{get_percent():.2f}%")
            elif option == "c":
                print("yes" if is_connected() else "no")
            else:
                raise UsageError(status=0)
    except UsageError as exc:
        if exc.message:
            print(exc.message, file=sys.stderr)
        print(usage, file=sys.stderr)
        return exc.status
    return 0


if __name__ == "__main__":
    sys.exit(main())