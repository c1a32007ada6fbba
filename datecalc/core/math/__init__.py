"""
Core math modules для datecalc

Целочисленная григорианская арифметика без зависимостей от моделей.
"""

from datecalc.core.math.calendar_math import (
    # Constants
    DAYS_PER_WEEK,
    FRIDAY,
    MAX_YEAR,
    MIN_YEAR,
    MONDAY,
    MONTH_LENGTHS,
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_SECOND,
    SATURDAY,
    SUNDAY,
    THURSDAY,
    TUESDAY,
    WEDNESDAY,
    WEEKDAY_NAMES,
    WEEKEND_ADJUSTMENTS,
    # Types
    WeekNumbering,
    # Functions
    count_weekend_days,
    day_of_week_for,
    day_of_year,
    days_in_month,
    days_in_year,
    is_leap_year_number,
    quarter_of_month,
    validate_day_of_week,
    validate_month,
    validate_year,
    week_number,
)

__all__ = [
    # Constants
    "DAYS_PER_WEEK",
    "FRIDAY",
    "MAX_YEAR",
    "MIN_YEAR",
    "MONDAY",
    "MONTH_LENGTHS",
    "MS_PER_DAY",
    "MS_PER_HOUR",
    "MS_PER_MINUTE",
    "MS_PER_SECOND",
    "SATURDAY",
    "SUNDAY",
    "THURSDAY",
    "TUESDAY",
    "WEDNESDAY",
    "WEEKDAY_NAMES",
    "WEEKEND_ADJUSTMENTS",
    # Types
    "WeekNumbering",
    # Functions
    "count_weekend_days",
    "day_of_week_for",
    "day_of_year",
    "days_in_month",
    "days_in_year",
    "is_leap_year_number",
    "quarter_of_month",
    "validate_day_of_week",
    "validate_month",
    "validate_year",
    "week_number",
]
