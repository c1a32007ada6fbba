"""
Text layer: strict parsing and deterministic formatting of CivilDate.
"""

from datecalc.core.text.formatting import (
    format_clock_time,
    format_day_month_year,
    format_iso,
    format_us,
    weekday_name,
)
from datecalc.core.text.parsing import (
    DateParseError,
    parse_civil_date,
    parse_civil_date_strict,
    parse_day_month_year,
    parse_day_month_year_strict,
    parse_us_format,
    parse_zone,
)

__all__ = [
    # Parsing
    "DateParseError",
    "parse_civil_date",
    "parse_civil_date_strict",
    "parse_day_month_year",
    "parse_day_month_year_strict",
    "parse_us_format",
    "parse_zone",
    # Formatting
    "format_clock_time",
    "format_day_month_year",
    "format_iso",
    "format_us",
    "weekday_name",
]
