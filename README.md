# utools

A handful of tiny command-line tools for a Linux desktop or laptop:

- `mem`: total, used and free physical memory in human-readable units
- `power`: battery charge and whether the charger is connected
- `temp`: temperature of the first thermal zone
- `timer`: a countdown timer in the terminal

## Installation

```
pip install .
```

## Usage

### mem

```
mem [-utfh]
```

- `-u` used memory
- `-t` total physical memory
- `-f` free memory
- `-h` show usage

Options can be combined (`mem -tf`). Each one prints a line, in the
order given. With no options `mem` prints the usage line to standard
error and exits with status 0. An unknown option prints an error and
the usage line, and the exit status is 1.

Sizes are scaled by 1024. The number of decimal places equals the
number of scaling steps, so 2048 bytes shows as `2.0 kB` and a few
gigabytes show as something like `15.520 GB`.

### power

```
power [-cph]
```

- `-p` battery charge as a percentage, for example `87.00%`
- `-c` `yes` if the charger is connected, `no` otherwise
- `-h` show usage

With no options `power` prints the charge percentage. Values are read
from `/sys/class/power_supply/BAT0/status` and
`/sys/class/power_supply/BAT0/capacity`. The battery counts as
connected when its status is `Not charging` or `Full`, or when it
sorts directly before `Discharging` (for example `Charging`).

### temp

```
temp
```

Reads `/sys/class/thermal/thermal_zone0/temp` (millidegrees) and prints
the value in whole degrees Celsius, followed by a `%` sign, for example
`47%`. Any arguments are ignored.

### timer

```
timer HH:MM:SS
timer MM:SS
```

Counts down to zero and redraws one line per second, for example
`timer: 1:30`. The cursor is hidden while the timer runs. It is shown
again when the timer ends, or when the timer is stopped by SIGINT,
SIGTERM or SIGHUP. Each section may have at most two digits, and the
string must not start with a colon. A malformed string prints an error
message, and the exit status is 1.

## Library use

The same pieces can be imported:

```python
from utools.util import format_size, read_file, usage_line, UsageError
from utools.mem import physical_memory, free_memory, used_memory
from utools.power import is_connected, get_percent
from utools.temp import temperature
from utools.timer import validate, parse, ticks, format_timer, countdown, TimerFormatError

format_size(2048)                 # "2.0 kB"
parse("1:30")                     # (1, 30)
format_timer(parse("1:30"))       # "timer: 1:30"
list(ticks((0, 2)))               # each state the countdown shows
```

`is_connected`, `get_percent` and `temperature` take an optional path,
so you can point them at a file other than the default sysfs entry.
`countdown` takes an optional `sleep` function and output stream.

## Limitations

- Only Linux is supported. Battery and temperature values come from
  fixed sysfs paths, so only the first battery (`BAT0`) and the first
  thermal zone are reported.
- Memory figures come from `os.sysconf` page counts. "Free" means
  available physical pages as the system reports them. Buffers and
  cache are not counted as free.

## Running the tests

```
pip install .[test]
pytest
```