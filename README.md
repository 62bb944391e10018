# philosophers

A small simulation of the dining philosophers problem. Each philosopher runs
in its own thread, tries to pick up the two forks next to it (the
lower-numbered one first), eats, sleeps and thinks. Each action is printed
with a timestamp in milliseconds since the start of the simulation. The
simulation runs until a philosopher dies.

## Installation

```
pip install .
```

## Usage

```
philo <number_of_philosophers> <time_to_die> <time_to_eat> <time_to_sleep> [number_of_times_each_philosopher_must_eat]
```

Times are in milliseconds. Every argument must be made only of the digits
`0`-`9`, and the first four must be greater than zero.

- With fewer than four or more than five arguments, `philo` prints
  `Error: Missing args!` or `Error: Too much args!` in red on standard error
  and exits with status 255.
- With an argument that is not a plain number, or one of the first four equal
  to zero, it prints `Error: Args error!` in red on standard error and exits
  with status 0.

Example:

```
philo 4 800 200 200
```

Each line of output looks like this:

```
   153 -   1 has taken a fork
   160 -   1 is eating
```

The first column is the elapsed time in milliseconds and the second is the
philosopher's number, counted from 1. The messages are `has taken a fork`,
`is eating`, `is sleeping`, `is thinking` and `died`. A philosopher dies when
more than `time_to_die` milliseconds have passed since the start of its last
meal (or since the start of the simulation). After the `died` line nothing
more is printed.

With a single philosopher there is only one fork, so that philosopher takes
it, can never eat, and dies.

## What it does not do

The optional fifth argument is checked to be a plain number but otherwise
ignored: the simulation does not stop once every philosopher has eaten a
given number of times. It stops only when a philosopher dies.

## Using it from Python

```python
import io

from philosophers.messages import Rule, format_message
from philosophers.parser import parse
from philosophers.simulation import Table

settings = parse(["1", "100", "50", "50"])   # arguments after the program name
print(format_message(0, 42, Rule.EAT), end="")  # "    42 -   1 is eating"

out = io.StringIO()
first_dead = Table(settings, stream=out).run()
print(first_dead)  # 0, the zero-based index of the philosopher who died
```

- `philosophers.parser.parse(argv)` returns a `Settings` with
  `philos_amount`, `time_to_die`, `time_to_eat` and `time_to_sleep`, and
  raises `ArgumentError` (a `ValueError`) when the arguments are not valid.
  `parse_number(text)` checks and converts a single argument.
- `philosophers.messages.format_message(philo, time, rule)` returns a status
  line, or `None` for an unknown rule; `messages(philo, time, rule, stream)`
  writes it (to standard output by default) and returns it.
  `display_error(message, stream)` writes a red error line, to standard error
  by default.
- `philosophers.simulation.Table(settings, stream=None, clock=None,
  pause=0.0005)` holds the philosophers and forks; `run()` starts one thread
  per philosopher, waits for them all and returns the index of the
  philosopher who died. `Clock` measures elapsed milliseconds and can be
  given another time source. `main(argv=None)` is the `philo` command.

## Running the tests

```
pip install .[test]
pytest
```