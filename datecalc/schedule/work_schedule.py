"""
Work Schedule — генерация рабочего графика "N через M"

Алгоритм:
- Итерация по каждой дате периода [start, end] включительно
- Указатель цикла длины cycle_length = count_work_days + count_off_days
  стартует с 0 в первый день периода
- Дата рабочая, если позиция указателя < count_work_days

Пример: {01-01-2024 .. 15-01-2024}, 1 рабочий / 3 выходных →
    01-01-2024, 05-01-2024, 09-01-2024, 13-01-2024

Интеграция:
- Период как DatePeriod или dict {"start": "DD-MM-YYYY", "end": "DD-MM-YYYY"}
- dict-payload валидируется контрактом work_schedule_request
- start > end → пустой график (период не проверяется на порядок)
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from datecalc.core.contracts import validate_work_schedule_request
from datecalc.core.domain.civil_date import CivilDate
from datecalc.core.domain.period import DatePeriod, WorkPattern
from datecalc.core.text.formatting import format_day_month_year, format_iso
from datecalc.core.text.parsing import parse_day_month_year_strict

logger = logging.getLogger(__name__)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class WorkScheduleResult:
    """Результат генерации графика."""

    work_dates: tuple[CivilDate, ...]

    # Статистика периода
    total_days: int
    off_days_count: int
    cycle_length: int

    # Детали
    details: str

    def as_day_month_year(self) -> list[str]:
        """Рабочие даты в формате DD-MM-YYYY."""
        return [format_day_month_year(d) for d in self.work_dates]


# =============================================================================
# GENERATOR
# =============================================================================


class WorkScheduleGenerator:
    """Генератор графика по повторяющемуся паттерну work/off.

    Stateless: состояние указателя цикла живёт только внутри generate().
    """

    def __init__(self, pattern: WorkPattern):
        """
        Args:
            pattern: паттерн "count_work_days рабочих / count_off_days выходных"
        """
        self.pattern = pattern

    def generate(self, period: DatePeriod) -> WorkScheduleResult:
        """Рабочие даты периода.

        Args:
            period: включительный период; цикл стартует с period.start

        Returns:
            WorkScheduleResult с рабочими датами в хронологическом порядке
        """
        cycle_length = self.pattern.cycle_length
        work_dates: list[CivilDate] = []
        total_days = 0
        position = 0

        for current in period.iter_days():
            if position < self.pattern.count_work_days:
                work_dates.append(current)
            position = (position + 1) % cycle_length
            total_days += 1

        logger.debug(
            "Generated work schedule",
            extra={"operation": "work_schedule", "work_days_count": len(work_dates)},
        )

        return WorkScheduleResult(
            work_dates=tuple(work_dates),
            total_days=total_days,
            off_days_count=total_days - len(work_dates),
            cycle_length=cycle_length,
            details=(
                f"{format_iso(period.start)}..{format_iso(period.end)}: "
                f"{len(work_dates)}/{total_days} work days, "
                f"pattern {self.pattern.count_work_days}on/{self.pattern.count_off_days}off"
            ),
        )


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def get_work_schedule(
    period: DatePeriod | Mapping[str, str],
    count_work_days: int,
    count_off_days: int,
) -> list[str]:
    """График рабочих дат в формате DD-MM-YYYY.

    Args:
        period: DatePeriod или {"start": "DD-MM-YYYY", "end": "DD-MM-YYYY"}
        count_work_days: подряд идущие рабочие дни (>= 1)
        count_off_days: подряд идущие выходные дни (>= 0)

    Returns:
        Список рабочих дат "DD-MM-YYYY"

    Raises:
        jsonschema.ValidationError: dict-payload не соответствует контракту
        DateParseError: дата в payload не существует (например, 31-04-2024)
        pydantic.ValidationError: невалидный паттерн для DatePeriod-входа
    """
    if not isinstance(period, DatePeriod):
        return generate_work_schedule_from_payload(
            {
                "period": dict(period),
                "count_work_days": count_work_days,
                "count_off_days": count_off_days,
            }
        )

    pattern = WorkPattern(count_work_days=count_work_days, count_off_days=count_off_days)
    return WorkScheduleGenerator(pattern).generate(period).as_day_month_year()


def generate_work_schedule_from_payload(payload: dict) -> list[str]:
    """График по dict-payload контракта work_schedule_request."""
    validate_work_schedule_request(payload)

    period = DatePeriod(
        start=parse_day_month_year_strict(payload["period"]["start"]),
        end=parse_day_month_year_strict(payload["period"]["end"]),
    )
    pattern = WorkPattern(
        count_work_days=payload["count_work_days"],
        count_off_days=payload["count_off_days"],
    )
    return WorkScheduleGenerator(pattern).generate(period).as_day_month_year()
