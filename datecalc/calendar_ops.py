"""
Calendar Operations — плоский функциональный API

Одна точка входа на операцию. Операции над текстом возвращают sentinel при
ошибке разбора вместо исключения:
- int/str-результат → None
- bool-результат (is_within_period) → False

Операции над значениями дат (CivilDate, datetime, date) не разбирают текст и
бросают TypeError на прочие типы.

ИНВАРИАНТЫ:
1. inclusive_day_count = trunc((end - start) / MS_PER_DAY) + 1 (усечение к нулю)
2. is_within_period: start <= date <= end по моменту времени, границы включены
3. format_us и day_of_week_name используют поля UTC; если в UTC момент
   выходит за годы 1-9999 → None
4. extract_clock_time использует собственные (wall clock) поля даты
"""

import logging
from collections.abc import Mapping

from datecalc.core.contracts import validate_date_period
from datecalc.core.domain.civil_date import CivilDate, DateValue, as_civil_date
from datecalc.core.domain.period import DatePeriod
from datecalc.core.math.calendar_math import (
    MS_PER_DAY,
    WeekNumbering,
    is_leap_year_number,
    quarter_of_month,
    week_number,
)
from datecalc.core.text import formatting
from datecalc.core.text.parsing import parse_civil_date

logger = logging.getLogger(__name__)

# =============================================================================
# РАЗБОР И ОТОБРАЖЕНИЕ
# =============================================================================


def _utc_or_none(value: CivilDate, operation: str) -> CivilDate | None:
    # 0001-01-01 при +05:00 и 9999-12-31 23:00 при -05:00 не имеют UTC-полей
    try:
        return value.to_utc()
    except ValueError:
        logger.debug(
            "Date has no UTC representation",
            extra={"operation": operation, "year": value.year, "month": value.month},
        )
        return None


def parse_to_epoch_millis(text: str) -> int | None:
    """
    Миллисекунды с 1970-01-01T00:00:00Z.

    Examples:
        >>> parse_to_epoch_millis("01 Jan 1970 00:00:00 UTC")
        0
        >>> parse_to_epoch_millis("04 Dec 1995 00:12:00 UTC")
        818035920000
        >>> parse_to_epoch_millis("not a date") is None
        True
    """
    parsed = parse_civil_date(text)
    if parsed is None:
        return None
    return parsed.epoch_millis


def extract_clock_time(value: DateValue) -> str:
    """
    Время суток "HH:MM:SS" по собственным полям даты.

    Examples:
        >>> extract_clock_time(datetime.datetime(2015, 11, 20, 23, 15, 1))
        '23:15:01'
    """
    return formatting.format_clock_time(as_civil_date(value))


def day_of_week_name(text: str) -> str | None:
    """
    Полное английское имя дня недели по полям UTC.

    Examples:
        >>> day_of_week_name("01 Jan 1970 00:00:00 UTC")
        'Thursday'
        >>> day_of_week_name("03 Dec 1995 00:12:00 UTC")
        'Sunday'
        >>> day_of_week_name("2024-01-30T00:00:00.000Z")
        'Tuesday'
    """
    parsed = parse_civil_date(text)
    if parsed is None:
        return None
    utc = _utc_or_none(parsed, "day_of_week_name")
    if utc is None:
        return None
    return formatting.weekday_name(utc)


def format_us(value: str | CivilDate) -> str | None:
    """
    "M/D/YYYY, h:mm:ss AM|PM" по полям UTC.

    Args:
        value: ISO 8601 текст (или уже разобранная CivilDate)

    Returns:
        Отформатированная строка или None, если текст не разобран

    Examples:
        >>> format_us("2024-02-01T15:00:00.000Z")
        '2/1/2024, 3:00:00 PM'
        >>> format_us("2010-12-15T22:59:00.000Z")
        '12/15/2010, 10:59:00 PM'
    """
    parsed = value if isinstance(value, CivilDate) else parse_civil_date(value)
    if parsed is None:
        return None
    utc = _utc_or_none(parsed, "format_us")
    if utc is None:
        return None
    return formatting.format_us(utc)


# =============================================================================
# ПЕРИОДЫ
# =============================================================================


def inclusive_day_count(start_iso: str, end_iso: str) -> int | None:
    """
    Число дней периода с учётом обеих границ.

    trunc((end - start) / 86_400_000) + 1; дробная часть дня усекается к нулю.

    Examples:
        >>> inclusive_day_count("2024-02-01T00:00:00.000Z", "2024-02-02T00:00:00.000Z")
        2
        >>> inclusive_day_count("2024-02-01T00:00:00.000Z", "2024-02-12T00:00:00.000Z")
        12
    """
    start = parse_civil_date(start_iso)
    end = parse_civil_date(end_iso)
    if start is None or end is None:
        return None

    diff_ms = end.epoch_millis - start.epoch_millis
    # Целочисленное деление с усечением к нулю (// округляет к -inf)
    whole_days = abs(diff_ms) // MS_PER_DAY
    if diff_ms < 0:
        whole_days = -whole_days
    return whole_days + 1


def _coerce_period(period: DatePeriod | Mapping[str, str]) -> DatePeriod | None:
    if isinstance(period, DatePeriod):
        return period

    validate_date_period(dict(period))
    start = parse_civil_date(period["start"])
    end = parse_civil_date(period["end"])
    if start is None or end is None:
        return None
    return DatePeriod(start=start, end=end)


def is_within_period(date_iso: str, period: DatePeriod | Mapping[str, str]) -> bool:
    """
    start <= date <= end (границы включены), сравнение по моменту времени.

    Args:
        date_iso: проверяемая дата (ISO 8601)
        period: DatePeriod или {"start": str, "end": str}

    Returns:
        True если дата в периоде; False если вне периода или текст не разобран

    Raises:
        jsonschema.ValidationError: dict-период не соответствует контракту date_period

    Examples:
        >>> is_within_period("2024-02-01", {"start": "2024-02-02", "end": "2024-03-02"})
        False
        >>> is_within_period("2024-02-02", {"start": "2024-02-02", "end": "2024-03-02"})
        True
    """
    resolved = _coerce_period(period)
    value = parse_civil_date(date_iso)
    if resolved is None or value is None:
        return False
    return resolved.contains(value)


# =============================================================================
# ГОДЫ, КВАРТАЛЫ, НЕДЕЛИ
# =============================================================================


def quarter_of_year(value: DateValue) -> int:
    """
    Календарный квартал даты (1-4).

    Examples:
        >>> quarter_of_year(datetime.date(2024, 2, 13))
        1
        >>> quarter_of_year(datetime.date(2024, 6, 1))
        2
        >>> quarter_of_year(datetime.date(2024, 11, 10))
        4
    """
    return quarter_of_month(as_civil_date(value).month)


def is_leap_year(value: DateValue | int) -> bool:
    """
    Високосный ли год даты (или год, переданный числом).

    Examples:
        >>> is_leap_year(datetime.date(2024, 3, 1))
        True
        >>> is_leap_year(2000)
        True
        >>> is_leap_year(1900)
        False
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return is_leap_year_number(value)
    return is_leap_year_number(as_civil_date(value).year)


def week_number_of_year(
    value: DateValue,
    numbering: WeekNumbering = WeekNumbering.JANUARY_FIRST,
) -> int:
    """
    Номер недели года по собственным полям даты.

    Examples:
        >>> week_number_of_year(datetime.date(2024, 1, 3))
        1
        >>> week_number_of_year(datetime.date(2024, 1, 31))
        5
        >>> week_number_of_year(datetime.date(2024, 2, 23))
        8
    """
    civil = as_civil_date(value)
    return week_number(civil.year, civil.month, civil.day, numbering)
