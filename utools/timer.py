"""Count down a timer given as MM:SS or HH:MM:SS on the terminal."""

from __future__ import annotations

import signal
import sys
import time
from collections.abc import Callable, Iterator, Sequence
from functools import reduce
from typing import TextIO

PROG = "timer"
HIDE_CURSOR = "\33[?25l"
SHOW_CURSOR = "\33[?25h"
CLEAR_LINE = "\33[2K\r"


class TimerFormatError(ValueError):
    """Raised when a timer string is malformed."""


class _Interrupted(Exception):
    """Raised from a signal handler to end the countdown."""


def validate(text: str) -> int:
    """Check *text* as a timer string and return its number of colons."""
    if text.startswith(":"):
        raise TimerFormatError("wrong colon location")
    colons = text.count(":")
    if not 1 <= colons <= 2:
        raise TimerFormatError("wrong number of colons")
    *leading, seconds = text.split(":")
    for section in leading:
        if len(section) > 2:
            raise TimerFormatError(
                "error: more than three digits, besides seconds section"
            )
    if len(seconds) > 2:
        raise TimerFormatError("error: more than two digits in second section")
    return colons


def _to_int(section: str) -> int:
    return reduce(lambda total, char: total * 10 + ord(char) - ord("0"), section, 0)


def parse(text: str) -> tuple[int, ...]:
    """Return the fields of a valid timer string as integers."""
    validate(text)
    return tuple(_to_int(section) for section in text.split(":"))


def _check_fields(timer: Sequence[int]) -> None:
    if len(timer) not in (2, 3):
        raise ValueError("a timer has two or three fields")


def ticks(timer: Sequence[int]) -> Iterator[tuple[int, ...]]:
    """Yield each state the countdown shows, one per second."""
    _check_fields(timer)
    fields = list(timer)
    last = len(fields) - 1
    while True:
        if fields[last] == 0:
            if last == 2:
                hours, minutes, _ = fields
                if hours == 0 and minutes == 0:
                    return
                if hours != 0 and minutes == 0:
                    fields[1] = 60
                    fields[0] = hours - 1
                if fields[1] != 0:
                    fields[1] -= 1
                fields[2] = 60
            else:
                if fields[0] == 0:
                    return
                fields[1] = 60
                fields[0] -= 1
        yield tuple(fields)
        fields[last] -= 1


def format_timer(timer: Sequence[int]) -> str:
    """Return the text shown for one timer state."""
    _check_fields(timer)
    return "timer: " + ":".join(str(field) for field in timer)


def countdown(
    timer: Sequence[int],
    sleep: Callable[[float], object] = time.sleep,
    out: TextIO | None = None,
) -> None:
    """Show the countdown on *out*, waiting one second between states."""
    stream = sys.stdout if out is None else out
    for state in ticks(timer):
        suffix = "\r" if len(state) == 2 else ""
        stream.write(f"\r{format_timer(state)}{suffix}")
        stream.flush()
        stream.write(CLEAR_LINE)
        sleep(1)


def _usage_text() -> str:
    return f"usage: {PROG} [HH:MM:SS] [MM:SS]\nusage: see {PROG}(1)\n"


def _on_signal(signum: int, frame: object) -> None:
    name = signal.Signals(signum).name
    raise _Interrupted(f"interrupted by {name}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the timer command and return its exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        sys.stderr.write(_usage_text())
        sys.stdout.write(SHOW_CURSOR)
        sys.stdout.flush()
        return 1

    sys.stdout.write(HIDE_CURSOR)
    previous = {}
    for name in ("SIGHUP", "SIGINT", "SIGTERM"):
        signum = getattr(signal, name, None)
        if signum is not None:
            previous[signum] = signal.signal(signum, _on_signal)
    try:
        timer = parse(args[0])
        countdown(timer)
    except TimerFormatError as exc:
        print(exc, file=sys.stderr)
        return 1
    except (_Interrupted, KeyboardInterrupt):
        return 1
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler)
        sys.stdout.write(SHOW_CURSOR)
        sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())