"""
DatePeriod & WorkPattern — Модели периодов

DatePeriod: пара {start, end}, включительно с обеих сторон.
WorkPattern: повторяющийся цикл "N рабочих / M выходных дней".

ИНВАРИАНТЫ:
1. DatePeriod НЕ проверяет start <= end (ответственность вызывающего кода);
   при start > end contains() всегда False, iter_days() пуст
2. Границы включаются: contains(start) и contains(end) → True
3. WorkPattern.cycle_length = count_work_days + count_off_days >= 1
"""

from collections.abc import Iterator

from pydantic import BaseModel, Field

from .civil_date import CivilDate

# =============================================================================
# DATE PERIOD
# =============================================================================


class DatePeriod(BaseModel):
    """
    Включительный период дат.

    Immutable модель (frozen=True).
    """

    start: CivilDate = Field(..., description="Начало периода (включительно)")
    end: CivilDate = Field(..., description="Конец периода (включительно)")

    model_config = {"frozen": True}

    def contains(self, value: CivilDate) -> bool:
        """start <= value <= end, сравнение по моменту времени."""
        return self.start <= value <= self.end

    def iter_days(self) -> Iterator[CivilDate]:
        """
        Все календарные дни периода от start до end включительно.

        Шаг — один календарный день от start (время суток start сохраняется);
        итерация идёт, пока дата не превышает дату end.
        """
        last_day = self.end.to_date()
        current = self.start
        while current.to_date() <= last_day:
            yield current
            # Шаг после последнего дня не делается: end может быть 9999-12-31
            if current.to_date() == last_day:
                return
            current = current.add_days(1)

    def day_count(self) -> int:
        """Число календарных дней в периоде (0 при start > end)."""
        delta = (self.end.to_date() - self.start.to_date()).days
        return max(delta + 1, 0)


# =============================================================================
# WORK PATTERN
# =============================================================================


class WorkPattern(BaseModel):
    """Повторяющийся цикл рабочих и выходных дней."""

    count_work_days: int = Field(..., ge=1, description="Подряд идущие рабочие дни")
    count_off_days: int = Field(..., ge=0, description="Подряд идущие выходные дни")

    model_config = {"frozen": True}

    @property
    def cycle_length(self) -> int:
        return self.count_work_days + self.count_off_days

    def is_work_position(self, position: int) -> bool:
        """Рабочий ли день на позиции цикла (position по модулю cycle_length)."""
        return position % self.cycle_length < self.count_work_days
