import pytest

from calendar_grid.plural import day_form
from calendar_grid.plural import format_days


@pytest.mark.parametrize(
    "number, expected",
    [
        (0, "0 дней"),
        (1, "1 день"),
        (2, "2 дня"),
        (4, "4 дня"),
        (5, "5 дней"),
        (11, "11 дней"),
        (12, "12 дней"),
        (14, "14 дней"),
        (19, "19 дней"),
        (21, "21 день"),
        (22, "22 дня"),
        (25, "25 дней"),
        (101, "101 день"),
        (111, "111 дней"),
        (112, "112 дней"),
        (1024, "1024 дня"),
    ],
)
def test_format_days(number, expected):
    assert format_days(number) == expected


def test_format_days_accepts_numeric_strings():
    assert format_days("3") == "3 дня"


def test_negative_numbers_use_absolute_value():
    assert format_days(-1) == "-1 день"
    assert day_form(-13) == "дней"
