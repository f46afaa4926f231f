"""Shared helpers: human-readable sizes, small sysfs reads and usage lines."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from os import PathLike

UNITS = ("B", "kB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")


class UsageError(Exception):
    """Raised when a command is invoked with bad or help options."""

    def __init__(self, message: str = "", status: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.status = status


def format_size(size: float) -> str:
    """Return *size* bytes scaled by 1024 with one decimal place per step."""
    index = 0
    while size > 1024 and index < len(UNITS) - 1:
        size /= 1024
        index += 1
    return f"{size:.{index}f} {UNITS[index]}"


def read_file(path: str | PathLike[str], size: int) -> str:
    """Read at most *size* bytes of *path* and cut the text at the first newline."""
    if size <= 1:
        raise ValueError("size must be greater than 1")
    with open(path, "rb") as handle:
        data = handle.read(size)
    data = data.split(b"\n", 1)[0].split(b"\0", 1)[0]
    return data.decode("ascii", errors="replace")


def usage_line(prog: str, usage_text: str) -> str:
    """Return the one-line usage message for *prog*."""
    return f"usage: {prog} {usage_text}"


def _parse_options(args: Iterable[str], optstring: str, prog: str) -> Iterator[str]:
    """Yield single-letter options found in *args*, getopt style."""
    for arg in args:
        if arg == "--":
            return
        if not arg.startswith("-") or arg == "-":
            continue
        for letter in arg[1:]:
            if letter not in optstring or letter == ":":
                raise UsageError(f"{prog}: invalid option -- '{letter}'")
            yield letter