import io

import pytest

from philosophers.messages import Rule, display_error, format_message, messages


def test_format_eating_line_layout():
    assert format_message(0, 0, Rule.EAT) == "     0 -   1 is eating\n"


@pytest.mark.parametrize(
    "rule, text",
    [
        (Rule.EAT, "is eating"),
        (Rule.SLEEP, "is sleeping"),
        (Rule.THINK, "is thinking"),
        (Rule.FORK, "has taken a fork"),
        (Rule.DIE, "died"),
    ],
)
def test_each_rule_description(rule, text):
    line = format_message(3, 120, rule)
    assert line.endswith(f" {text}\n")


def test_philosopher_number_is_one_based():
    line = format_message(41, 5, Rule.FORK)
    assert " 42 " in line
    assert " 41 " not in line


def test_time_column_is_right_aligned():
    for time in (0, 7, 12345, 1234567):
        line = format_message(0, time, Rule.SLEEP)
        stamp, _ = line.split(" - ", 1)
        assert int(stamp) == time
        assert len(stamp) >= 6


def test_string_rule_matches_enum():
    assert format_message(2, 30, "think") == format_message(2, 30, Rule.THINK)


def test_unknown_rule():
    stream = io.StringIO()
    assert format_message(0, 0, "dance") is None
    assert messages(0, 0, "dance", stream) == ""
    assert stream.getvalue() == ""


def test_messages_writes_line():
    stream = io.StringIO()
    written = messages(1, 200, Rule.DIE, stream)
    assert stream.getvalue() == written
    assert written == format_message(1, 200, Rule.DIE)


def test_display_error():
    stream = io.StringIO()
    display_error("Args error!", stream)
    assert stream.getvalue() == "\x1b[31mError: Args error!\n\x1b[0m"