"""Command-line argument parsing for the dining philosophers simulation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

_DIGITS = frozenset("0123456789")
_INT_MAX = 2**31 - 1


class ArgumentError(ValueError):
    """Raised when the simulation arguments are malformed."""


@dataclass(frozen=True)
class Settings:
    """Timing parameters of one simulation, times in milliseconds."""

    philos_amount: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int


def _is_plain_number(text: str) -> bool:
    return all(char in _DIGITS for char in text)


def parse_number(text: str) -> int:
    """Parse a strictly positive decimal number made only of ASCII digits."""
    if not _is_plain_number(text):
        raise ArgumentError(f"not a plain number: {text!r}")
    value = int(text) if text else 0
    if value <= 0 or value > _INT_MAX:
        raise ArgumentError(f"number out of range: {text!r}")
    return value


def parse(argv: Sequence[str]) -> Settings:
    """Build settings from the arguments that follow the program name.

    Every argument, including an optional fifth one, must consist of digits
    only; the first four must be positive.
    """
    bad = [arg for arg in argv if not _is_plain_number(arg)]
    if bad:
        raise ArgumentError(f"not a plain number: {bad[0]!r}")
    if len(argv) < 4:
        raise ArgumentError("expected at least four arguments")
    amount, die, eat, sleep = (parse_number(arg) for arg in argv[:4])
    return Settings(
        philos_amount=amount,
        time_to_die=die,
        time_to_eat=eat,
        time_to_sleep=sleep,
    )