"""Command-line arguments of the dining philosophers simulation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

_INT_LIMIT = "2147483648"
_WHITESPACE = " \t\n\v\f\r"


class ArgumentError(ValueError):
    """Raised when the command-line arguments cannot be used."""


def _too_long(digits: str) -> bool:
    if len(digits) > len(_INT_LIMIT):
        return True
    if len(digits) < len(_INT_LIMIT):
        return False
    return digits >= _INT_LIMIT


def is_valid_number(text: str) -> bool:
    """Return True if *text* is an optional '+' followed by digits below 2**31."""
    digits = text[1:] if text.startswith("+") else text
    if _too_long(digits):
        return False
    return all("0" <= char <= "9" for char in digits)


def parse_long(text: str) -> int:
    """Read a leading integer: skip whitespace, take one sign, then digits."""
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for char in rest:
        if not "0" <= char <= "9":
            break
        value = value * 10 + (ord(char) - ord("0"))
    return sign * value


def check_args(argv: Sequence[str]) -> None:
    """Check the argument count and that every argument is a valid number."""
    if not 4 <= len(argv) <= 5:
        raise ArgumentError("Number of arguments not valid")
    if not all(is_valid_number(arg) for arg in argv):
        raise ArgumentError("Error in the number")


@dataclass(frozen=True)
class Settings:
    """Parameters of one simulation; times are in milliseconds."""

    philosopher_count: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    meal_limit: Optional[int] = None

    def think_time_us(self) -> int:
        """Time a philosopher spends thinking, in microseconds."""
        think_time = 1
        if self.philosopher_count % 2 != 0:
            think_time = self.time_to_eat * 2 - self.time_to_sleep
        return think_time * 1000


def parse_settings(argv: Sequence[str]) -> Settings:
    """Build settings from the arguments that follow the program name."""
    check_args(argv)
    count, die, eat, sleep = (parse_long(arg) for arg in argv[:4])
    limit = parse_long(argv[4]) if len(argv) == 5 else None
    if not (die and count and sleep and eat):
        raise ArgumentError("Error in the number")
    return Settings(
        philosopher_count=count,
        time_to_die=die,
        time_to_eat=eat,
        time_to_sleep=sleep,
        meal_limit=limit,
    )