"""
datecalc — calendar-arithmetic utilities

Strict date parsing and formatting, period logic, Gregorian calendar math,
recurring-date search and work-schedule generation over CivilDate values.
"""

from datecalc.calendar_ops import (
    day_of_week_name,
    extract_clock_time,
    format_us,
    inclusive_day_count,
    is_leap_year,
    is_within_period,
    parse_to_epoch_millis,
    quarter_of_year,
    week_number_of_year,
)
from datecalc.core.domain import CivilDate, DatePeriod, WorkPattern
from datecalc.core.math import WeekNumbering, count_weekend_days, days_in_month
from datecalc.core.text import (
    DateParseError,
    parse_civil_date,
    parse_civil_date_strict,
    parse_us_format,
)
from datecalc.infrastructure import setup_logging
from datecalc.schedule import get_work_schedule
from datecalc.search import next_friday, next_friday_the_13th

__all__ = [
    # Types
    "CivilDate",
    "DatePeriod",
    "WorkPattern",
    "WeekNumbering",
    # Errors
    "DateParseError",
    # Parsing
    "parse_civil_date",
    "parse_civil_date_strict",
    "parse_us_format",
    # Operations
    "parse_to_epoch_millis",
    "extract_clock_time",
    "day_of_week_name",
    "next_friday",
    "days_in_month",
    "inclusive_day_count",
    "is_within_period",
    "format_us",
    "count_weekend_days",
    "quarter_of_year",
    "is_leap_year",
    "next_friday_the_13th",
    "week_number_of_year",
    "get_work_schedule",
    # Observability
    "setup_logging",
]
