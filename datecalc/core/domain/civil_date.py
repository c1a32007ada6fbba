"""
CivilDate — Модель гражданской даты

Immutable Pydantic модель: момент времени, выраженный календарными полями
(год, месяц, день, часы, минуты, секунды, миллисекунды) при заданном
смещении от UTC.

ИНВАРИАНТЫ:
1. День существует в указанном месяце/году (31 апреля → ValidationError)
2. Сравнение (<, <=, >, >=) — по моменту времени (epoch_millis)
3. Равенство (==) — по полям модели; same_instant() — по моменту
4. Смещение по умолчанию 0 (UTC)
"""

import datetime
from typing import Final

from pydantic import BaseModel, Field, field_validator

from datecalc.config import MAX_UTC_OFFSET_MINUTES, get_settings
from datecalc.core.math.calendar_math import (
    MAX_YEAR,
    MIN_YEAR,
    day_of_week_for,
    days_in_month,
)

# Начало эпохи Unix
EPOCH: Final[datetime.datetime] = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)

_ONE_MS: Final[datetime.timedelta] = datetime.timedelta(milliseconds=1)


def _fixed_zone(utc_offset_minutes: int) -> datetime.timezone:
    if utc_offset_minutes == 0:
        return datetime.timezone.utc
    return datetime.timezone(datetime.timedelta(minutes=utc_offset_minutes))


# =============================================================================
# CIVIL DATE MODEL
# =============================================================================


class CivilDate(BaseModel):
    """
    Момент времени в календарных полях.

    Immutable модель (frozen=True). Все операции сдвига создают новый экземпляр.
    """

    # Дата
    year: int = Field(..., ge=MIN_YEAR, le=MAX_YEAR, description="Год (четыре цифры)")
    month: int = Field(..., ge=1, le=12, description="Месяц (1 = январь)")
    day: int = Field(..., ge=1, le=31, description="День месяца")

    # Время
    hour: int = Field(default=0, ge=0, le=23, description="Часы (24-часовой формат)")
    minute: int = Field(default=0, ge=0, le=59, description="Минуты")
    second: int = Field(default=0, ge=0, le=59, description="Секунды")
    millisecond: int = Field(default=0, ge=0, le=999, description="Миллисекунды")

    # Зона
    utc_offset_minutes: int = Field(
        default=0,
        ge=-MAX_UTC_OFFSET_MINUTES,
        le=MAX_UTC_OFFSET_MINUTES,
        description="Смещение от UTC в минутах (0 = UTC)",
    )

    model_config = {"frozen": True}

    @field_validator("day")
    @classmethod
    def validate_day_exists(cls, v: int, info) -> int:
        """Проверка, что день существует в месяце (с учётом високосных лет)"""
        if "year" in info.data and "month" in info.data:
            limit = days_in_month(info.data["month"], info.data["year"])
            if v > limit:
                raise ValueError(
                    f"day {v} does not exist in {info.data['year']}-{info.data['month']:02d} "
                    f"(max {limit})"
                )
        return v

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_datetime(cls, value: datetime.datetime | datetime.date) -> "CivilDate":
        """
        Конверсия из datetime/date.

        Naive datetime и date интерпретируются в смещении по умолчанию
        (Settings.default_utc_offset_minutes). Для aware datetime смещение
        берётся из tzinfo на момент value.
        """
        if not isinstance(value, datetime.datetime):
            value = datetime.datetime(value.year, value.month, value.day)

        offset = value.utcoffset()
        if offset is None:
            offset_minutes = get_settings().default_utc_offset_minutes
        else:
            offset_minutes = int(offset.total_seconds() // 60)

        return cls(
            year=value.year,
            month=value.month,
            day=value.day,
            hour=value.hour,
            minute=value.minute,
            second=value.second,
            millisecond=value.microsecond // 1000,
            utc_offset_minutes=offset_minutes,
        )

    @classmethod
    def from_epoch_millis(cls, epoch_millis: int, utc_offset_minutes: int = 0) -> "CivilDate":
        """
        Конверсия из миллисекунд эпохи Unix.

        Raises:
            ValueError: Если момент в заданном смещении выходит за годы 1-9999

        Examples:
            >>> CivilDate.from_epoch_millis(0).year
            1970
        """
        try:
            moment = EPOCH + datetime.timedelta(milliseconds=epoch_millis)
            local = moment.astimezone(_fixed_zone(utc_offset_minutes))
        except OverflowError as e:
            raise ValueError(
                f"epoch millis {epoch_millis} at offset {utc_offset_minutes} is outside years "
                f"{MIN_YEAR}-{MAX_YEAR}"
            ) from e
        return cls.from_datetime(local)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def day_of_week(self) -> int:
        """День недели в собственных полях: 0=Sunday..6=Saturday."""
        return day_of_week_for(self.year, self.month, self.day)

    @property
    def weekday(self) -> int:
        """День недели в нумерации Python: 0=Monday..6=Sunday."""
        return (self.day_of_week - 1) % 7

    @property
    def epoch_millis(self) -> int:
        """Миллисекунды с 1970-01-01T00:00:00Z."""
        return (self.to_datetime() - EPOCH) // _ONE_MS

    def to_datetime(self) -> datetime.datetime:
        """Aware datetime с фиксированным смещением."""
        return datetime.datetime(
            self.year,
            self.month,
            self.day,
            self.hour,
            self.minute,
            self.second,
            self.millisecond * 1000,
            tzinfo=_fixed_zone(self.utc_offset_minutes),
        )

    def to_date(self) -> datetime.date:
        return datetime.date(self.year, self.month, self.day)

    # -------------------------------------------------------------------------
    # Преобразования
    # -------------------------------------------------------------------------

    def to_utc(self) -> "CivilDate":
        """
        Тот же момент, выраженный в UTC (offset = 0).

        Raises:
            ValueError: Если в UTC момент попадает в год 0 или 10000
                (0001-01-01 00:00 +05:00, 9999-12-31 23:00 -05:00)
        """
        if self.utc_offset_minutes == 0:
            return self
        return CivilDate.from_epoch_millis(self.epoch_millis)

    def add_days(self, days: int) -> "CivilDate":
        """
        Сдвиг на целое число календарных дней.

        Время суток и смещение сохраняются.

        Raises:
            ValueError: Если результат выходит за годы 1-9999
        """
        try:
            shifted = self.to_datetime() + datetime.timedelta(days=days)
        except OverflowError as e:
            raise ValueError(
                f"{self.year:04d}-{self.month:02d}-{self.day:02d} {days:+d} days is outside years "
                f"{MIN_YEAR}-{MAX_YEAR}"
            ) from e
        return CivilDate.from_datetime(shifted)

    def at_midnight(self) -> "CivilDate":
        """Та же дата в 00:00:00.000 (в собственном смещении)."""
        return self.model_copy(update={"hour": 0, "minute": 0, "second": 0, "millisecond": 0})

    def same_instant(self, other: "CivilDate") -> bool:
        """Совпадение момента времени независимо от смещения."""
        return self.epoch_millis == other.epoch_millis

    # -------------------------------------------------------------------------
    # Сравнение по моменту времени
    # -------------------------------------------------------------------------

    def __lt__(self, other: "CivilDate") -> bool:
        if not isinstance(other, CivilDate):
            return NotImplemented
        return self.epoch_millis < other.epoch_millis

    def __le__(self, other: "CivilDate") -> bool:
        if not isinstance(other, CivilDate):
            return NotImplemented
        return self.epoch_millis <= other.epoch_millis

    def __gt__(self, other: "CivilDate") -> bool:
        if not isinstance(other, CivilDate):
            return NotImplemented
        return self.epoch_millis > other.epoch_millis

    def __ge__(self, other: "CivilDate") -> bool:
        if not isinstance(other, CivilDate):
            return NotImplemented
        return self.epoch_millis >= other.epoch_millis


DateValue = CivilDate | datetime.datetime | datetime.date


def as_civil_date(value: DateValue) -> CivilDate:
    """
    Приведение значения даты к CivilDate.

    Raises:
        TypeError: Если value не CivilDate/datetime/date
    """
    if isinstance(value, CivilDate):
        return value
    if isinstance(value, (datetime.datetime, datetime.date)):
        return CivilDate.from_datetime(value)
    raise TypeError(f"expected CivilDate, datetime or date, got {type(value).__name__}")
