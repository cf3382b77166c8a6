# philosophers

This package simulates the dining philosophers problem. The philosophers sit
at a round table, and each one runs in its own thread. A fork lies between
each pair of neighbours. Each fork is a `threading.Lock`. To eat, a
philosopher must hold both forks next to it. After eating it sleeps, and after
sleeping it thinks. A monitor thread checks the table every millisecond. It
ends the simulation in two cases:

- a philosopher has gone longer than `time_to_die` since its last meal, or
- a meal count was given and every philosopher has eaten that many times.

## Installation

```
pip install .
```

## Usage

```
philo number_of_philosophers time_to_die time_to_eat time_to_sleep [number_of_times_each_philosopher_must_eat]
```

You can also run it with `python -m philosophers.cli` and the same arguments.
All times are in milliseconds. For example:

```
philo 5 800 200 200
philo 4 410 200 200 7
```

The arguments must follow these rules:

- Every argument is made of digits only, so a sign such as `-` or `+` is
  rejected.
- Four or five arguments are given.
- There are between 1 and 200 philosophers.
- `time_to_die`, `time_to_eat` and `time_to_sleep` are each at least 60 and at
  most 2147483647.
- The optional meal count, when given, is between 1 and 2147483647.

If an argument breaks a rule, the command prints one error line and exits with
status 1. Examples are `Error: wrong number of arguments` and
`Error: too many philosophers`.

## Output

Each event is printed on its own line. A line holds the milliseconds since the
start, the philosopher's number (from 1) and the event. The timestamp and the
number are coloured with ANSI escape codes. Without the colours, a line looks
like this:

```
[0] 1 has taken a fork
[0] 1 has taken a fork
[0] 1 is eating
[200] 1 is sleeping
[400] 1 is thinking
```

The simulation ends with one of two messages:

- a death line for the starving philosopher, printed in red, or
- `All philo have eaten enough`, printed in green, when a meal count was given
  and every philosopher reached it.

No more lines are printed after the closing message.

A single philosopher never picks up a fork and never eats. The monitor reports
its death once `time_to_die` has passed.

## Library use

```python
import sys
from philosophers.parse import parse_arguments
from philosophers.simulation import simulate

settings = parse_arguments(["4", "410", "200", "200", "3"])
table = simulate(settings, sys.stdout)
print([p.meals_eaten for p in table.philosophers])
```

### `philosophers.parse`

- `parse_arguments(args)` checks the arguments that follow the program name.
  It returns a frozen `Settings` dataclass with these fields:
  - `number_of_philosophers`
  - `time_to_die`
  - `time_to_eat`
  - `time_to_sleep`
  - `meals_required` (`None` when no meal count was given)

  If an argument is not valid, it raises `ArgumentError`, a subclass of
  `ValueError`. The error message is the line the command prints.
- `atoll(text)` reads a leading integer the way C's `atoll` does. It skips
  leading whitespace, accepts one optional sign, and stops at the first
  non-digit. If there are no digits, it returns 0.

### `philosophers.simulation`

- `simulate(settings, out)` builds a `Table` and runs it until the end. It
  writes the log to the text stream `out` and returns the table.
- `Table` holds the settings, the forks and the list `philosophers`.
  - `run()` starts the monitor and the philosopher threads, then waits for all
    of them to finish.
  - `is_over()` reports whether the simulation has ended.
- `Philosopher` has:
  - `ident`
  - `meals_eaten`
  - `last_meal` (milliseconds since the epoch)
  - `is_starving()`

### `philosophers.timeutil`

- `current_time_ms()` returns the wall-clock time in milliseconds.
- `precise_sleep(milliseconds)` blocks for at least the given time. It checks
  the clock every half millisecond.