"""Schedule — генерация рабочих графиков по паттерну work/off."""

from .work_schedule import (
    WorkScheduleGenerator,
    WorkScheduleResult,
    generate_work_schedule_from_payload,
    get_work_schedule,
)

__all__ = [
    "WorkScheduleGenerator",
    "WorkScheduleResult",
    "generate_work_schedule_from_payload",
    "get_work_schedule",
]
