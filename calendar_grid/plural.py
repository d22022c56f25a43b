"""Russian plural forms for day counts ("1 день", "2 дня", "5 дней")."""

ONE = "день"
FEW = "дня"
MANY = "дней"


def day_form(number: int) -> str:
    """Return the noun form agreeing with ``number``."""
    n = abs(int(number))
    if 10 < n % 100 < 20:
        return MANY
    if n % 10 == 1:
        return ONE
    if 1 < n % 10 < 5:
        return FEW
    return MANY


def format_days(number: object) -> str:
    """Format a day count with the matching Russian noun, e.g. ``21 день``."""
    n = int(number)  # type: ignore[arg-type]
    return f"{n} {day_form(n)}"
