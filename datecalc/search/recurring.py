"""
Recurring Dates — поиск ближайших повторяющихся дат

- next_weekday: ближайший заданный день недели (строго после или включительно)
- next_friday: ближайшая пятница; пятница → +7 дней
- find_next_weekday_on_day: ближайший месяц, где day_of_month выпадает на weekday
- next_friday_the_13th: частный случай (FRIDAY, 13) без перехода через год

Дни недели: 0=Sunday..6=Saturday (как CivilDate.day_of_week).

Правило стартового месяца find_next_weekday_on_day:
- input.day < day_of_month → поиск начинается с текущего месяца
- иначе → со следующего (совпадение строго после input-даты)
"""

import logging
from typing import Final

from datecalc.core.domain.civil_date import CivilDate, DateValue, as_civil_date
from datecalc.core.math.calendar_math import (
    DAYS_PER_WEEK,
    FRIDAY,
    MAX_YEAR,
    day_of_week_for,
    days_in_month,
    validate_day_of_week,
)

logger = logging.getLogger(__name__)

# Полный григорианский цикл: календарь повторяется каждые 400 лет
GREGORIAN_CYCLE_YEARS: Final[int] = 400

UNLUCKY_DAY_OF_MONTH: Final[int] = 13


def next_weekday(value: DateValue, day_of_week: int, inclusive: bool = False) -> CivilDate:
    """Ближайшая дата с заданным днём недели.

    Args:
        value: исходная дата
        day_of_week: целевой день недели (0=Sunday..6=Saturday)
        inclusive: если True и value уже нужный день → возвращается value

    Returns:
        CivilDate через 1-7 дней (0-6 при inclusive); время суток сохраняется

    Raises:
        ValueError: Если day_of_week вне [0, 6] или результат позже 9999-12-31
    """
    validate_day_of_week(day_of_week)
    start = as_civil_date(value)

    days_ahead = (day_of_week - start.day_of_week) % DAYS_PER_WEEK
    if days_ahead == 0 and not inclusive:
        days_ahead = DAYS_PER_WEEK

    return start.add_days(days_ahead)


def next_friday(value: DateValue) -> CivilDate:
    """Ближайшая пятница строго после даты.

    Examples:
        2024-02-03 (Sat) → 2024-02-09
        2024-02-13 (Tue) → 2024-02-16
        2024-02-16 (Fri) → 2024-02-23

    Raises:
        ValueError: Если следующая пятница позже 9999-12-31
    """
    return next_weekday(value, FRIDAY)


def find_next_weekday_on_day(
    value: DateValue,
    day_of_week: int,
    day_of_month: int,
    wrap_year: bool = False,
) -> CivilDate | None:
    """Ближайшая дата day_of_month, выпадающая на day_of_week.

    Args:
        value: исходная дата
        day_of_week: целевой день недели (0=Sunday..6=Saturday)
        day_of_month: целевой день месяца (1-31); месяцы без этого дня пропускаются
        wrap_year: продолжать поиск в следующих годах (не более 400 лет)

    Returns:
        CivilDate в 00:00 в смещении value, либо None если совпадений нет
        (в текущем году при wrap_year=False)
    """
    validate_day_of_week(day_of_week)
    if not 1 <= day_of_month <= 31:
        raise ValueError(f"day_of_month must be in [1, 31], got {day_of_month}")

    start = as_civil_date(value)
    year = start.year
    month = start.month if start.day < day_of_month else start.month + 1

    last_year = min(start.year + (GREGORIAN_CYCLE_YEARS if wrap_year else 0), MAX_YEAR)
    while year <= last_year:
        for candidate_month in range(month, 13):
            if day_of_month > days_in_month(candidate_month, year):
                continue
            if day_of_week_for(year, candidate_month, day_of_month) == day_of_week:
                return CivilDate(
                    year=year,
                    month=candidate_month,
                    day=day_of_month,
                    utc_offset_minutes=start.utc_offset_minutes,
                )
        year += 1
        month = 1

    logger.debug(
        "No matching recurring date",
        extra={
            "operation": "find_next_weekday_on_day",
            "year": start.year,
            "month": start.month,
        },
    )
    return None


def next_friday_the_13th(value: DateValue) -> CivilDate | None:
    """Ближайшая пятница 13-го в пределах года даты.

    Поиск не переходит в следующий год: None означает "в этом году больше нет".

    Examples:
        2024-01-13 → 2024-09-13
        2023-02-01 → 2023-10-13
        2024-12-14 → None
    """
    return find_next_weekday_on_day(value, FRIDAY, UNLUCKY_DAY_OF_MONTH)
