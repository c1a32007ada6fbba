"""
Contract Validation Module

Модуль для валидации JSON контрактов datecalc.
"""

from .validators import (
    SCHEMA_DIR,
    ContractValidator,
    DatePeriodValidator,
    SchemaLoader,
    WorkScheduleRequestValidator,
    validate_date_period,
    validate_work_schedule_request,
)

__all__ = [
    "SCHEMA_DIR",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "DatePeriodValidator",
    "WorkScheduleRequestValidator",
    # Functions
    "validate_date_period",
    "validate_work_schedule_request",
]
