"""
Date Formatting — Детерминированное отображение CivilDate

- format_clock_time: "HH:MM:SS" в собственных полях даты (wall clock)
- weekday_name: полное английское имя дня недели
- format_us: "M/D/YYYY, h:mm:ss AM|PM" в полях UTC
- format_day_month_year: "DD-MM-YYYY"
- format_iso: "YYYY-MM-DDTHH:MM:SS.mmm" + "Z" или "±HH:MM"

Все функции не зависят от locale процесса.
"""

from datecalc.core.domain.civil_date import CivilDate
from datecalc.core.math.calendar_math import WEEKDAY_NAMES


def format_clock_time(value: CivilDate) -> str:
    """
    Время суток "HH:MM:SS" (24 часа, с ведущими нулями).

    Examples:
        >>> format_clock_time(CivilDate(year=2023, month=6, day=1, hour=8, minute=20, second=55))
        '08:20:55'
    """
    return f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"


def weekday_name(value: CivilDate) -> str:
    """Имя дня недели ("Sunday".."Saturday") в собственных полях даты."""
    return WEEKDAY_NAMES[value.day_of_week]


def format_us(value: CivilDate) -> str:
    """
    US-формат "M/D/YYYY, h:mm:ss AM|PM" по полям UTC.

    Месяц, день и час без ведущих нулей; 0 часов → 12 AM, 12 часов → 12 PM.

    Examples:
        >>> format_us(CivilDate(year=2024, month=2, day=1, hour=15))
        '2/1/2024, 3:00:00 PM'
        >>> format_us(CivilDate(year=1999, month=1, day=5, hour=2, minute=20))
        '1/5/1999, 2:20:00 AM'
    """
    utc = value.to_utc()
    meridiem = "PM" if utc.hour >= 12 else "AM"
    hour12 = utc.hour % 12 or 12
    return (
        f"{utc.month}/{utc.day}/{utc.year}, "
        f"{hour12}:{utc.minute:02d}:{utc.second:02d} {meridiem}"
    )


def format_day_month_year(value: CivilDate) -> str:
    """"DD-MM-YYYY" в собственных полях даты."""
    return f"{value.day:02d}-{value.month:02d}-{value.year:04d}"


def format_iso(value: CivilDate) -> str:
    """
    ISO 8601 с миллисекундами.

    Examples:
        >>> format_iso(CivilDate(year=2024, month=2, day=1, hour=15))
        '2024-02-01T15:00:00.000Z'
        >>> format_iso(CivilDate(year=2024, month=2, day=1, utc_offset_minutes=-330))
        '2024-02-01T00:00:00.000-05:30'
    """
    if value.utc_offset_minutes == 0:
        zone = "Z"
    else:
        sign = "-" if value.utc_offset_minutes < 0 else "+"
        hours, minutes = divmod(abs(value.utc_offset_minutes), 60)
        zone = f"{sign}{hours:02d}:{minutes:02d}"
    return (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
        f".{value.millisecond:03d}{zone}"
    )
