"""
Domain models and value objects.

Contains the calendar value types: CivilDate, DatePeriod, WorkPattern.
"""

from datecalc.core.domain.civil_date import (
    EPOCH,
    CivilDate,
    DateValue,
    as_civil_date,
)
from datecalc.core.domain.period import DatePeriod, WorkPattern

__all__ = [
    # CivilDate
    "EPOCH",
    "CivilDate",
    "DateValue",
    "as_civil_date",
    # Periods
    "DatePeriod",
    "WorkPattern",
]
