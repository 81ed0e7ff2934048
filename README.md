# philosophers

A simulation of the dining philosophers problem. Each philosopher runs in its
own thread and takes the two forks next to it. It then eats, sleeps and thinks,
and repeats. A monitoring loop checks whether a philosopher has starved. If a
meal limit was given, it also ends the run once every philosopher has eaten at
least that many meals.

## Usage

```
philosophers number_of_philosophers time_to_die time_to_eat time_to_sleep [meals_each]
```

The same command can also be run as `python -m philosophers.simulation`.

All times are in milliseconds. Every argument must be a whole number below
2147483648, written only with digits and at most one leading `+`. There must be
four or five arguments. If there are too few or too many, the command prints
`Number of arguments not valid` and exits with status 1. If an argument is
malformed, or if the philosopher count or any of the times is zero, it prints
`Error in the number` and exits with status 1.

Example:

```
philosophers 5 800 200 200 7
```

Each event is printed on its own line. The line gives the milliseconds since the
start, then the philosopher's number (from 1), then what happened:

```
0 2 has taken a fork
0 2 has taken a fork
0 2 is eating
200 2 is sleeping
...
```

The possible events are:

- `has taken a fork`
- `is eating`
- `is sleeping`
- `is thinking`
- `died`

After a `died` line, or once every philosopher has reached the meal limit, no
more events are printed. A lone philosopher takes its one fork, and then the run
ends.

## As a library

```python
import io
from philosophers.settings import parse_settings
from philosophers.simulation import Simulation

settings = parse_settings(["4", "410", "200", "200", "3"])
out = io.StringIO()
Simulation(settings, out).run()
print(out.getvalue())
```

`parse_settings` takes the arguments that follow the program name. It returns a
frozen `Settings` dataclass with the fields `philosopher_count`, `time_to_die`,
`time_to_eat`, `time_to_sleep` and `meal_limit`. `meal_limit` is `None` when no
limit is given. `check_args` checks an argument list without building
anything. Both raise `ArgumentError`, a subclass of `ValueError`, when the
arguments cannot be used.

`Simulation(settings, out)` writes its event lines to `out`, or to standard
output if `out` is not given. `run()` starts one thread per philosopher, watches
them until the run ends, and then joins the threads. `philosophers.simulation.main(argv)`
is the command's entry point. It returns the exit status.

## Tests

```
pip install .[test]
pytest
```