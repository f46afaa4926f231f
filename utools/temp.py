"""Report the temperature of the first thermal zone."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from os import PathLike

from .util import read_file

THERMAL_PATH = "/sys/class/thermal/thermal_zone0/temp"
_BUFFER_SIZE = 6
_LEADING_DIGITS = re.compile(r"\s*\+?(\d+)")


def temperature(path: str | PathLike[str] | None = None) -> int:
    """Return the temperature in whole degrees Celsius."""
    text = read_file(THERMAL_PATH if path is None else path, _BUFFER_SIZE)
    match = _LEADING_DIGITS.match(text)
    millidegrees = int(match.group(1)) if match else 0
    return millidegrees // 1000


def _report(degrees: int) -> str:
    return f"{degrees}%\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Print the temperature and return the exit status; arguments are ignored."""
    line = _report(temperature())
    sys.stdout.write(line)
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())