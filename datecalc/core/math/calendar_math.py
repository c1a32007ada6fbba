"""
Calendar Math — Pure Gregorian Arithmetic

Модуль содержит целочисленную календарную арифметику без зависимостей
от представления даты:
- Високосные годы (полное григорианское правило, включая исключение веков)
- Количество дней в месяце и в году
- Подсчёт выходных (суббота + воскресенье) через таблицу граничных случаев
- Кварталы, порядковый номер дня в году
- Номера недель (January-first и ISO 8601)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Год кратен 100, но не кратен 400 → НЕ високосный (1900, 2100)
2. count_weekend_days() == фактическое число суббот и воскресений месяца
3. Дни недели: 0=Sunday..6=Saturday (day_of_week), 0=Monday..6=Sunday (weekday)
4. Все функции детерминированы; невалидные аргументы → ValueError
"""

import datetime
from enum import Enum
from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

MS_PER_SECOND: Final[int] = 1_000
MS_PER_MINUTE: Final[int] = 60 * MS_PER_SECOND
MS_PER_HOUR: Final[int] = 60 * MS_PER_MINUTE
MS_PER_DAY: Final[int] = 24 * MS_PER_HOUR  # 86_400_000

DAYS_PER_WEEK: Final[int] = 7
MONTHS_PER_QUARTER: Final[int] = 3

MIN_YEAR: Final[int] = 1
MAX_YEAR: Final[int] = 9999

# Длины месяцев невисокосного года (январь = индекс 0)
MONTH_LENGTHS: Final[tuple[int, ...]] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Дни недели в нумерации day_of_week (0=Sunday)
SUNDAY: Final[int] = 0
MONDAY: Final[int] = 1
TUESDAY: Final[int] = 2
WEDNESDAY: Final[int] = 3
THURSDAY: Final[int] = 4
FRIDAY: Final[int] = 5
SATURDAY: Final[int] = 6

WEEKDAY_NAMES: Final[tuple[str, ...]] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

# Поправка к базовому числу выходных floor(total/7)*2, ключ (first, last) в
# нумерации 0=Sunday. Четыре граничных семейства: месяц заканчивается в
# воскресенье (+2) или субботу (+1), начинается в субботу (+2) или
# воскресенье (+1), при этом другой конец приходится на будний день. Плюс случаи, когда
# оба конца приходятся на выходные. 28-дневный месяц поправки не требует.
WEEKEND_ADJUSTMENTS: Final[dict[tuple[int, int], int]] = {
    # ends on Sunday, starts on a weekday
    (FRIDAY, SUNDAY): 2,
    # ends on Saturday, starts on a weekday
    (THURSDAY, SATURDAY): 1,
    (FRIDAY, SATURDAY): 1,
    # starts on Saturday, ends on a weekday
    (SATURDAY, MONDAY): 2,
    # starts on Sunday, ends on a weekday
    (SUNDAY, MONDAY): 1,
    (SUNDAY, TUESDAY): 1,
    # both ends on a weekend day
    (SATURDAY, SATURDAY): 1,
    (SUNDAY, SUNDAY): 1,
    (SATURDAY, SUNDAY): 2,
}


class WeekNumbering(str, Enum):
    """Схема нумерации недель года."""

    # Неделя 1 содержит 1 января, недели начинаются с понедельника
    JANUARY_FIRST = "JANUARY_FIRST"
    # ISO 8601: неделя 1 содержит первый четверг года
    ISO_8601 = "ISO_8601"


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_year(year: int) -> None:
    """
    Проверка, что год в поддерживаемом диапазоне [MIN_YEAR, MAX_YEAR].

    Raises:
        ValueError: Если год вне диапазона
    """
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise ValueError(f"year must be in [{MIN_YEAR}, {MAX_YEAR}], got {year}")


def validate_month(month: int) -> None:
    """
    Проверка номера месяца (1-12).

    Raises:
        ValueError: Если месяц вне диапазона
    """
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in [1, 12], got {month}")


def validate_day_of_week(day_of_week: int) -> None:
    """
    Проверка номера дня недели (0=Sunday..6=Saturday).

    Raises:
        ValueError: Если номер вне диапазона
    """
    if not SUNDAY <= day_of_week <= SATURDAY:
        raise ValueError(
            f"day_of_week must be in [{SUNDAY}, {SATURDAY}] (0=Sunday), got {day_of_week}"
        )


# =============================================================================
# ГОДЫ И МЕСЯЦЫ
# =============================================================================


def is_leap_year_number(year: int) -> bool:
    """
    Григорианское правило високосного года.

    year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)

    Examples:
        >>> is_leap_year_number(2024)
        True
        >>> is_leap_year_number(2000)
        True
        >>> is_leap_year_number(1900)
        False
        >>> is_leap_year_number(2022)
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(month: int, year: int) -> int:
    """
    Количество дней в месяце с учётом високосных лет.

    Args:
        month: Месяц (1 = январь, ..., 12 = декабрь)
        year: Год (четыре цифры)

    Returns:
        28..31

    Raises:
        ValueError: Если month вне [1, 12] или year вне [MIN_YEAR, MAX_YEAR]

    Examples:
        >>> days_in_month(1, 2024)
        31
        >>> days_in_month(2, 2024)
        29
        >>> days_in_month(2, 2023)
        28
    """
    validate_month(month)
    validate_year(year)

    if month == 2 and is_leap_year_number(year):
        return 29
    return MONTH_LENGTHS[month - 1]


def days_in_year(year: int) -> int:
    """366 для високосного года, иначе 365."""
    validate_year(year)
    return 366 if is_leap_year_number(year) else 365


def day_of_week_for(year: int, month: int, day: int) -> int:
    """
    День недели для календарной даты (0=Sunday..6=Saturday).

    Examples:
        >>> day_of_week_for(1970, 1, 1)  # Thursday
        4
        >>> day_of_week_for(2024, 1, 1)  # Monday
        1
    """
    # date.isoweekday(): 1=Monday..7=Sunday → % 7 даёт 0=Sunday
    return datetime.date(year, month, day).isoweekday() % DAYS_PER_WEEK


def day_of_year(year: int, month: int, day: int) -> int:
    """
    Порядковый номер дня в году (1 = 1 января).

    Examples:
        >>> day_of_year(2024, 1, 1)
        1
        >>> day_of_year(2024, 3, 1)  # 31 + 29 + 1
        61
        >>> day_of_year(2023, 12, 31)
        365
    """
    validate_month(month)
    if not 1 <= day <= days_in_month(month, year):
        raise ValueError(f"day {day} does not exist in {year}-{month:02d}")

    preceding = sum(days_in_month(m, year) for m in range(1, month))
    return preceding + day


# =============================================================================
# ВЫХОДНЫЕ
# =============================================================================


def count_weekend_days(month: int, year: int) -> int:
    """
    Количество суббот и воскресений в месяце.

    Алгоритм:
        base = floor(total_days / 7) * 2   (полные недели)
        base += WEEKEND_ADJUSTMENTS[(first_weekday, last_weekday)]
    Поправка применяется только к неполной неделе в конце месяца
    (total_days % 7 > 0), иначе (first, last) не определяет остаток.

    Args:
        month: Месяц (1-12)
        year: Год

    Returns:
        Число выходных дней (8..10)

    Examples:
        >>> count_weekend_days(5, 2022)
        9
        >>> count_weekend_days(12, 2023)
        10
        >>> count_weekend_days(1, 2024)
        8
    """
    total_days = days_in_month(month, year)
    weekend_days = (total_days // DAYS_PER_WEEK) * 2

    if total_days % DAYS_PER_WEEK == 0:
        return weekend_days

    first_weekday = day_of_week_for(year, month, 1)
    last_weekday = day_of_week_for(year, month, total_days)

    return weekend_days + WEEKEND_ADJUSTMENTS.get((first_weekday, last_weekday), 0)


# =============================================================================
# КВАРТАЛЫ И НЕДЕЛИ
# =============================================================================


def quarter_of_month(month: int) -> int:
    """
    Календарный квартал месяца (1-4).

    0-based month: 0-2 → 1, 3-5 → 2, 6-8 → 3, 9-11 → 4

    Examples:
        >>> quarter_of_month(2)
        1
        >>> quarter_of_month(6)
        2
        >>> quarter_of_month(11)
        4
    """
    validate_month(month)
    return (month - 1) // MONTHS_PER_QUARTER + 1


def week_number(
    year: int,
    month: int,
    day: int,
    numbering: WeekNumbering = WeekNumbering.JANUARY_FIRST,
) -> int:
    """
    Номер недели года.

    JANUARY_FIRST:
        week = floor((day_of_year0 + monday_offset(Jan 1)) / 7) + 1
        где day_of_year0 = day_of_year - 1, monday_offset = дней от понедельника
        до 1 января (0 если 1 января — понедельник)
    ISO_8601:
        номер недели из date.isocalendar(); 1-3 января могут принадлежать
        неделе 52/53 прошлого года, 29-31 декабря — неделе 1 следующего

    Examples:
        >>> week_number(2024, 1, 3)
        1
        >>> week_number(2024, 1, 31)
        5
        >>> week_number(2024, 2, 23)
        8
        >>> week_number(2021, 1, 1, WeekNumbering.ISO_8601)
        53
    """
    if numbering == WeekNumbering.ISO_8601:
        return datetime.date(year, month, day).isocalendar()[1]

    day_of_year0 = day_of_year(year, month, day) - 1
    # datetime.weekday(): 0=Monday
    monday_offset = datetime.date(year, 1, 1).weekday()
    return (day_of_year0 + monday_offset) // DAYS_PER_WEEK + 1
