"""Command-line argument parsing and validation for the simulation."""

from __future__ import annotations

from dataclasses import dataclass

MAX_PHILOSOPHERS = 200
MIN_DURATION_MS = 60
INT_MAX = 2147483647

_WHITESPACE = " \n\t\v\f\r"
_MAX_CHECKED_ARGUMENTS = 6


class ArgumentError(ValueError):
    """Raised when the command-line arguments are unusable.

    The message is the full line to show to the user.
    """


@dataclass(frozen=True)
class Settings:
    """Validated parameters of one simulation run."""

    number_of_philosophers: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    meals_required: int | None = None


def atoll(text: str) -> int:
    """Parse a leading integer the way C's ``atoll`` does.

    Leading whitespace is skipped, one optional sign is accepted, and digits
    are read until the first non-digit.  Text with no digits gives 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for char in rest:
        if not "0" <= char <= "9":
            break
        value = value * 10 + (ord(char) - ord("0"))
    return sign * value


def _is_all_digits(text: str) -> bool:
    return all("0" <= char <= "9" for char in text)


def parse_arguments(args: list[str]) -> Settings:
    """Validate the arguments that follow the program name.

    Expected: number_of_philosophers time_to_die time_to_eat time_to_sleep
    [number_of_times_each_philosopher_must_eat].  Raises ArgumentError.
    """
    args = list(args)
    if not all(_is_all_digits(arg) for arg in args[:_MAX_CHECKED_ARGUMENTS]):
        raise ArgumentError("Error: some inputs not digit !")
    if not 4 <= len(args) <= 5:
        raise ArgumentError("Error: wrong number of arguments")

    count = atoll(args[0])
    if count < 1:
        raise ArgumentError("Error: Negative or null value for philosophers")
    if count > MAX_PHILOSOPHERS:
        raise ArgumentError("Error: too many philosophers")

    time_to_die, time_to_eat, time_to_sleep = (atoll(arg) for arg in args[1:4])
    durations = (time_to_die, time_to_eat, time_to_sleep)
    if any(value < MIN_DURATION_MS for value in durations):
        raise ArgumentError("Error: values lower than 60 ms.")

    meals_required = None
    if len(args) == 5:
        meals_required = atoll(args[4])
        if not 1 <= meals_required <= INT_MAX:
            raise ArgumentError(
                "Error: bad values for number_of_times_each_philosopher"
            )

    if any(value > INT_MAX for value in durations):
        raise ArgumentError("Error: values higher than INT_MAX ms.")

    return Settings(
        number_of_philosophers=count,
        time_to_die=time_to_die,
        time_to_eat=time_to_eat,
        time_to_sleep=time_to_sleep,
        meals_required=meals_required,
    )