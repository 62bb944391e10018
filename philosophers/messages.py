"""Status lines and error output of the simulation."""

from __future__ import annotations

import sys
from enum import Enum
from typing import TextIO


class Rule(str, Enum):
    """Kinds of events a philosopher reports."""

    EAT = "eat"
    SLEEP = "sleep"
    THINK = "think"
    FORK = "fork"
    DIE = "die"


_DESCRIPTIONS = {
    Rule.EAT: "is eating",
    Rule.SLEEP: "is sleeping",
    Rule.THINK: "is thinking",
    Rule.FORK: "has taken a fork",
    Rule.DIE: "died",
}


def display_error(message: str, stream: TextIO | None = None) -> None:
    """Write a red error line to the given stream, stderr by default."""
    out = sys.stderr if stream is None else stream
    out.write(f"\x1b[31mError: {message}\n\x1b[0m")
    out.flush()


def format_message(philo: int, time: int, rule: Rule | str) -> str | None:
    """Return the status line for a zero-based philosopher, or None for an unknown rule."""
    try:
        kind = Rule(rule)
    except ValueError:
        return None
    return f"{time:6d} - {philo + 1:3d} {_DESCRIPTIONS[kind]}\n"


def messages(
    philo: int, time: int, rule: Rule | str, stream: TextIO | None = None
) -> str:
    """Write the status line to the stream, stdout by default, and return it.

    An unknown rule writes nothing and returns an empty string.
    """
    line = format_message(philo, time, rule)
    if line is None:
        return ""
    out = sys.stdout if stream is None else stream
    out.write(line)
    out.flush()
    return line