"""
Strict Date Parsing — Документированные форматы без locale-зависимости

Модуль разбирает текст в CivilDate только для фиксированного набора форматов:
- RFC-2822-ish: "[Www, ]DD Mon YYYY[ HH:MM[:SS][ ZONE]]", ZONE = UTC|GMT|Z|±HHMM
- ISO 8601: "YYYY-MM-DD[THH:MM[:SS[.fff]][Z|±HH:MM|±HHMM]]"
- US display (обратный к format_us): "M/D/YYYY, h:mm:ss AM|PM" (UTC)
- "DD-MM-YYYY" (периоды рабочего графика), полночь UTC

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Неразбираемый текст → None (total-варианты) или DateParseError (strict)
2. ISO "YYYY-MM-DD" без времени → полночь UTC
3. Текст с временем без зоны → Settings.default_utc_offset_minutes
4. Указанный день недели (RFC) обязан совпадать с датой
5. Несуществующие даты (2023-02-29) → ошибка разбора, не "перенос"
"""

import logging
import re
from typing import Final

from datecalc.config import get_settings
from datecalc.core.domain.civil_date import CivilDate

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DateParseError(ValueError):
    """Текст не является датой ни в одном из поддерживаемых форматов."""

    def __init__(self, text: object, expected: str = "RFC-2822 or ISO 8601"):
        self.text = text
        self.expected = expected
        super().__init__(f"Cannot parse {text!r} as a date (expected {expected})")


# =============================================================================
# ФОРМАТЫ
# =============================================================================

MONTH_ABBREVIATIONS: Final[tuple[str, ...]] = (
    "jan", "feb", "mar", "apr", "may", "jun",
    "jul", "aug", "sep", "oct", "nov", "dec",
)

# 0=Sunday, как day_of_week
WEEKDAY_ABBREVIATIONS: Final[tuple[str, ...]] = ("sun", "mon", "tue", "wed", "thu", "fri", "sat")

# Зоны, эквивалентные UTC
UTC_ZONE_NAMES: Final[frozenset[str]] = frozenset({"UTC", "GMT", "Z"})

RFC_2822_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?:(?P<weekday>[A-Za-z]{3}),?\s+)?"
    r"(?P<day>\d{1,2})\s+(?P<month>[A-Za-z]{3})\s+(?P<year>\d{4})"
    r"(?:\s+(?P<hour>\d{2}):(?P<minute>\d{2})(?::(?P<second>\d{2}))?"
    r"(?:\s*(?P<zone>UTC|GMT|Z|[+-]\d{4}))?)?$",
    re.IGNORECASE,
)

ISO_8601_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"(?:[T ](?P<hour>\d{2}):(?P<minute>\d{2})"
    r"(?::(?P<second>\d{2})(?:\.(?P<fraction>\d{1,9}))?)?"
    r"(?P<zone>Z|[+-]\d{2}:?\d{2})?)?$",
    re.IGNORECASE,
)

US_DISPLAY_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?P<month>\d{1,2})/(?P<day>\d{1,2})/(?P<year>\d{1,4}),\s+"
    r"(?P<hour>\d{1,2}):(?P<minute>\d{2}):(?P<second>\d{2})\s+(?P<meridiem>AM|PM)$",
    re.IGNORECASE,
)

DAY_MONTH_YEAR_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?P<day>\d{2})-(?P<month>\d{2})-(?P<year>\d{4})$"
)


# =============================================================================
# ВСПОМОГАТЕЛЬНЫЕ
# =============================================================================


def parse_zone(zone: str | None) -> int | None:
    """
    Смещение зоны в минутах.

    Returns:
        0 для UTC/GMT/Z, ±минуты для "+0530"/"-03:00", None если зона не указана

    Raises:
        ValueError: Если часы > 23 или минуты > 59
    """
    if zone is None:
        return None
    if zone.upper() in UTC_ZONE_NAMES:
        return 0

    sign = -1 if zone[0] == "-" else 1
    digits = zone[1:].replace(":", "")
    hours, minutes = int(digits[:2]), int(digits[2:])
    if hours > 23 or minutes > 59:
        raise ValueError(f"invalid UTC offset {zone!r}")
    return sign * (hours * 60 + minutes)


def _fraction_to_millis(fraction: str | None) -> int:
    # Дробная часть секунды усекается до миллисекунд
    if not fraction:
        return 0
    return int(fraction[:3].ljust(3, "0"))


def _log_failure(operation: str, text: object) -> None:
    logger.debug(
        "Unparseable date text",
        extra={"operation": operation, "input_text": repr(text)},
    )


# =============================================================================
# ПАРСЕРЫ ФОРМАТОВ
# =============================================================================


def _parse_rfc_2822(text: str) -> CivilDate | None:
    match = RFC_2822_PATTERN.match(text)
    if match is None:
        return None

    month_name = match["month"].lower()
    if month_name not in MONTH_ABBREVIATIONS:
        return None

    zone_minutes = parse_zone(match["zone"])
    if zone_minutes is None:
        zone_minutes = get_settings().default_utc_offset_minutes

    result = CivilDate(
        year=int(match["year"]),
        month=MONTH_ABBREVIATIONS.index(month_name) + 1,
        day=int(match["day"]),
        hour=int(match["hour"] or 0),
        minute=int(match["minute"] or 0),
        second=int(match["second"] or 0),
        utc_offset_minutes=zone_minutes,
    )

    weekday = match["weekday"]
    if weekday is not None:
        if weekday.lower() not in WEEKDAY_ABBREVIATIONS:
            return None
        if WEEKDAY_ABBREVIATIONS.index(weekday.lower()) != result.day_of_week:
            return None

    return result


def _parse_iso_8601(text: str) -> CivilDate | None:
    match = ISO_8601_PATTERN.match(text)
    if match is None:
        return None

    if match["hour"] is None:
        # Только дата → полночь UTC
        zone_minutes = 0
    else:
        zone_minutes = parse_zone(match["zone"])
        if zone_minutes is None:
            zone_minutes = get_settings().default_utc_offset_minutes

    return CivilDate(
        year=int(match["year"]),
        month=int(match["month"]),
        day=int(match["day"]),
        hour=int(match["hour"] or 0),
        minute=int(match["minute"] or 0),
        second=int(match["second"] or 0),
        millisecond=_fraction_to_millis(match["fraction"]),
        utc_offset_minutes=zone_minutes,
    )


def _parse_us_display(text: str) -> CivilDate | None:
    match = US_DISPLAY_PATTERN.match(text)
    if match is None:
        return None

    hour12 = int(match["hour"])
    if not 1 <= hour12 <= 12:
        return None
    # 12 AM → 0, 12 PM → 12
    hour = hour12 % 12 + (12 if match["meridiem"].upper() == "PM" else 0)

    return CivilDate(
        year=int(match["year"]),
        month=int(match["month"]),
        day=int(match["day"]),
        hour=hour,
        minute=int(match["minute"]),
        second=int(match["second"]),
    )


def _parse_day_month_year(text: str) -> CivilDate | None:
    match = DAY_MONTH_YEAR_PATTERN.match(text)
    if match is None:
        return None
    return CivilDate(year=int(match["year"]), month=int(match["month"]), day=int(match["day"]))


def _attempt(parser, text: object, operation: str) -> CivilDate | None:
    if not isinstance(text, str):
        _log_failure(operation, text)
        return None
    try:
        result = parser(text.strip())
    except ValueError:
        # Поля вне диапазона (месяц 13, 31 апреля, зона +2500)
        result = None
    if result is None:
        _log_failure(operation, text)
    return result


# =============================================================================
# PUBLIC API
# =============================================================================


def parse_civil_date(text: str) -> CivilDate | None:
    """
    Разбор RFC-2822-ish или ISO 8601 текста.

    Args:
        text: Текст даты

    Returns:
        CivilDate или None, если текст не в поддерживаемом формате

    Examples:
        >>> parse_civil_date("01 Jan 1970 00:00:00 UTC").epoch_millis
        0
        >>> parse_civil_date("2024-01-30T00:00:00.000Z").day
        30
        >>> parse_civil_date("yesterday") is None
        True
    """

    def parse_any(value: str) -> CivilDate | None:
        for parser in (_parse_iso_8601, _parse_rfc_2822):
            result = parser(value)
            if result is not None:
                return result
        return None

    return _attempt(parse_any, text, "parse_civil_date")


def parse_civil_date_strict(text: str) -> CivilDate:
    """
    Разбор как parse_civil_date, но с исключением.

    Raises:
        DateParseError: Если текст не в поддерживаемом формате
    """
    result = parse_civil_date(text)
    if result is None:
        raise DateParseError(text)
    return result


def parse_us_format(text: str) -> CivilDate | None:
    """
    Разбор "M/D/YYYY, h:mm:ss AM|PM" (UTC), обратный к format_us.

    Examples:
        >>> parse_us_format("2/1/2024, 3:00:00 PM").hour
        15
        >>> parse_us_format("1/5/1999, 12:20:00 AM").hour
        0
    """
    return _attempt(_parse_us_display, text, "parse_us_format")


def parse_day_month_year(text: str) -> CivilDate | None:
    """
    Разбор "DD-MM-YYYY" (полночь UTC).

    Examples:
        >>> parse_day_month_year("15-01-2024").month
        1
    """
    return _attempt(_parse_day_month_year, text, "parse_day_month_year")


def parse_day_month_year_strict(text: str) -> CivilDate:
    """
    Raises:
        DateParseError: Если текст не "DD-MM-YYYY" или дата не существует
    """
    result = parse_day_month_year(text)
    if result is None:
        raise DateParseError(text, expected="DD-MM-YYYY")
    return result
