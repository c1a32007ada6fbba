"""Search — поиск повторяющихся дат (ближайший день недели, пятница 13-е)."""

from .recurring import (
    GREGORIAN_CYCLE_YEARS,
    UNLUCKY_DAY_OF_MONTH,
    find_next_weekday_on_day,
    next_friday,
    next_friday_the_13th,
    next_weekday,
)

__all__ = [
    "GREGORIAN_CYCLE_YEARS",
    "UNLUCKY_DAY_OF_MONTH",
    "find_next_weekday_on_day",
    "next_friday",
    "next_friday_the_13th",
    "next_weekday",
]
