"""
Тесты для Domain Models: CivilDate, DatePeriod, WorkPattern

Проверяемые инварианты:
1. Валидация полей (несуществующий день, диапазоны времени и смещения)
2. Immutability (frozen=True)
3. epoch_millis и конверсии (datetime, epoch, UTC)
4. Сравнение по моменту времени, равенство по полям
5. DatePeriod: включительные границы, итерация по дням
6. WorkPattern: длина цикла и позиции
"""

import datetime

import pytest
from pydantic import ValidationError

from datecalc.core.domain import (
    EPOCH,
    CivilDate,
    DatePeriod,
    WorkPattern,
    as_civil_date,
)


def _utc(year: int, month: int, day: int, **kwargs) -> CivilDate:
    return CivilDate(year=year, month=month, day=day, **kwargs)


# =============================================================================
# ТЕСТЫ: CivilDate: валидация
# =============================================================================


class TestCivilDateValidation:
    """Тесты валидации полей CivilDate."""

    def test_valid_date(self):
        """Валидная дата с временем."""
        value = _utc(2024, 2, 29, hour=23, minute=59, second=59, millisecond=999)

        assert value.year == 2024
        assert value.month == 2
        assert value.day == 29
        assert value.millisecond == 999
        assert value.utc_offset_minutes == 0

    def test_defaults_to_midnight_utc(self):
        """По умолчанию 00:00:00.000 UTC."""
        value = _utc(2024, 1, 1)

        assert (value.hour, value.minute, value.second, value.millisecond) == (0, 0, 0, 0)
        assert value.utc_offset_minutes == 0

    def test_nonexistent_day_rejected(self):
        """31 апреля и 29 февраля невисокосного года → ValidationError."""
        with pytest.raises(ValidationError, match="does not exist"):
            _utc(2024, 4, 31)

        with pytest.raises(ValidationError, match="does not exist"):
            _utc(2023, 2, 29)

    def test_century_february(self):
        """1900-02-29 не существует, 2000-02-29 существует."""
        with pytest.raises(ValidationError):
            _utc(1900, 2, 29)

        assert _utc(2000, 2, 29).day == 29

    def test_month_out_of_range(self):
        with pytest.raises(ValidationError):
            _utc(2024, 13, 1)

        with pytest.raises(ValidationError):
            _utc(2024, 0, 1)

    def test_time_out_of_range(self):
        """Часы 24, минуты 60, миллисекунды 1000 → ValidationError."""
        with pytest.raises(ValidationError):
            _utc(2024, 1, 1, hour=24)

        with pytest.raises(ValidationError):
            _utc(2024, 1, 1, minute=60)

        with pytest.raises(ValidationError):
            _utc(2024, 1, 1, millisecond=1000)

    def test_offset_out_of_range(self):
        """Смещение по модулю не больше 23:59."""
        assert _utc(2024, 1, 1, utc_offset_minutes=1439).utc_offset_minutes == 1439

        with pytest.raises(ValidationError):
            _utc(2024, 1, 1, utc_offset_minutes=1440)

        with pytest.raises(ValidationError):
            _utc(2024, 1, 1, utc_offset_minutes=-1440)

    def test_immutability(self):
        """Модель frozen: присваивание запрещено."""
        value = _utc(2024, 1, 1)

        with pytest.raises(ValidationError):
            value.day = 2


# =============================================================================
# ТЕСТЫ: CivilDate: аксессоры и конверсии
# =============================================================================


class TestCivilDateAccessors:
    """Тесты day_of_week, weekday, epoch_millis."""

    def test_day_of_week_sunday_based(self):
        """1970-01-01 — четверг (4), 1995-12-03 — воскресенье (0)."""
        assert _utc(1970, 1, 1).day_of_week == 4
        assert _utc(1995, 12, 3).day_of_week == 0

    def test_weekday_monday_based(self):
        """weekday совпадает с date.weekday()."""
        for day in range(1, 8):
            value = _utc(2024, 1, day)
            assert value.weekday == value.to_date().weekday()

    def test_epoch_zero(self):
        assert _utc(1970, 1, 1).epoch_millis == 0

    def test_epoch_known_value(self):
        """1995-12-04 00:12:00 UTC → 818035920000."""
        assert _utc(1995, 12, 4, minute=12).epoch_millis == 818_035_920_000

    def test_epoch_respects_offset(self):
        """01:00 при +01:00 — тот же момент, что 00:00 UTC."""
        assert _utc(1970, 1, 1, hour=1, utc_offset_minutes=60).epoch_millis == 0

    def test_epoch_before_1970_negative(self):
        assert _utc(1969, 12, 31, hour=23, minute=59, second=59, millisecond=999).epoch_millis == -1

    def test_epoch_includes_milliseconds(self):
        assert _utc(1970, 1, 1, second=1, millisecond=500).epoch_millis == 1500

    def test_epoch_constant(self):
        assert EPOCH == datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)


class TestCivilDateConversions:
    """Тесты from_datetime, from_epoch_millis, to_utc, to_datetime."""

    def test_from_aware_datetime(self):
        """Смещение берётся из tzinfo."""
        tz = datetime.timezone(datetime.timedelta(hours=5, minutes=30))
        value = CivilDate.from_datetime(datetime.datetime(2024, 3, 1, 10, 15, 30, 123456, tzinfo=tz))

        assert (value.year, value.month, value.day) == (2024, 3, 1)
        assert (value.hour, value.minute, value.second) == (10, 15, 30)
        assert value.millisecond == 123
        assert value.utc_offset_minutes == 330

    def test_from_naive_datetime_uses_default_offset(self):
        """Naive datetime → смещение по умолчанию (0)."""
        value = CivilDate.from_datetime(datetime.datetime(2015, 11, 20, 23, 15, 1))

        assert value.utc_offset_minutes == 0
        assert value.hour == 23

    def test_from_naive_datetime_with_configured_offset(self, monkeypatch):
        """DATECALC_DEFAULT_UTC_OFFSET_MINUTES задаёт смещение naive-значений."""
        from datecalc.config import get_settings

        monkeypatch.setenv("DATECALC_DEFAULT_UTC_OFFSET_MINUTES", "-300")
        get_settings.cache_clear()

        value = CivilDate.from_datetime(datetime.datetime(2024, 1, 1, 12))

        assert value.utc_offset_minutes == -300

    def test_from_date(self):
        """date → полночь."""
        value = CivilDate.from_datetime(datetime.date(2024, 2, 13))

        assert (value.year, value.month, value.day, value.hour) == (2024, 2, 13, 0)

    def test_from_epoch_millis(self):
        value = CivilDate.from_epoch_millis(818_035_920_000)

        assert (value.year, value.month, value.day) == (1995, 12, 4)
        assert (value.hour, value.minute) == (0, 12)
        assert value.utc_offset_minutes == 0

    def test_from_epoch_millis_with_offset(self):
        """Момент 0 при -05:00 → 1969-12-31 19:00."""
        value = CivilDate.from_epoch_millis(0, utc_offset_minutes=-300)

        assert (value.year, value.month, value.day, value.hour) == (1969, 12, 31, 19)
        assert value.utc_offset_minutes == -300
        assert value.epoch_millis == 0

    def test_to_datetime_is_aware(self):
        result = _utc(2024, 1, 1, hour=2, utc_offset_minutes=180).to_datetime()

        assert result.utcoffset() == datetime.timedelta(hours=3)
        assert result.hour == 2

    def test_to_utc_crosses_day(self):
        """2024-01-01 02:00 +03:00 → 2023-12-31 23:00 UTC."""
        result = _utc(2024, 1, 1, hour=2, utc_offset_minutes=180).to_utc()

        assert (result.year, result.month, result.day, result.hour) == (2023, 12, 31, 23)
        assert result.utc_offset_minutes == 0

    def test_to_utc_outside_supported_years(self):
        """UTC-представление в году 0 или 10000 → ValueError."""
        with pytest.raises(ValueError, match="outside years 1-9999"):
            _utc(1, 1, 1, utc_offset_minutes=300).to_utc()

        with pytest.raises(ValueError, match="outside years 1-9999"):
            _utc(9999, 12, 31, hour=23, utc_offset_minutes=-300).to_utc()

    def test_from_epoch_millis_outside_supported_years(self):
        last_ms = _utc(9999, 12, 31, hour=23, minute=59, second=59, millisecond=999).epoch_millis

        assert CivilDate.from_epoch_millis(last_ms).year == 9999
        with pytest.raises(ValueError, match="outside years 1-9999"):
            CivilDate.from_epoch_millis(last_ms + 1)

    def test_to_utc_identity(self):
        value = _utc(2024, 1, 1, hour=2)
        assert value.to_utc() is value

    def test_to_date(self):
        assert _utc(2024, 5, 17, hour=22).to_date() == datetime.date(2024, 5, 17)


class TestCivilDateArithmetic:
    """Тесты add_days и at_midnight."""

    def test_add_days_across_leap_february(self):
        """2024-01-31 + 31 дней → 2024-03-02."""
        result = _utc(2024, 1, 31).add_days(31)
        assert (result.year, result.month, result.day) == (2024, 3, 2)

    def test_add_negative_days(self):
        """2024-03-01 - 1 день → 2024-02-29."""
        result = _utc(2024, 3, 1).add_days(-1)
        assert (result.month, result.day) == (2, 29)

    def test_add_days_keeps_time_and_offset(self):
        result = _utc(2024, 12, 31, hour=18, minute=30, utc_offset_minutes=-240).add_days(1)

        assert (result.year, result.month, result.day) == (2025, 1, 1)
        assert (result.hour, result.minute) == (18, 30)
        assert result.utc_offset_minutes == -240

    def test_add_days_past_year_9999(self):
        with pytest.raises(ValueError, match="outside years 1-9999"):
            _utc(9999, 12, 31).add_days(1)

    def test_add_days_before_year_one(self):
        with pytest.raises(ValueError, match="outside years 1-9999"):
            _utc(1, 1, 1).add_days(-1)

    def test_at_midnight(self):
        result = _utc(2024, 6, 1, hour=13, minute=5, second=7, millisecond=9, utc_offset_minutes=60).at_midnight()

        assert (result.hour, result.minute, result.second, result.millisecond) == (0, 0, 0, 0)
        assert result.day == 1
        assert result.utc_offset_minutes == 60


class TestCivilDateComparison:
    """Тесты сравнения: порядок по моменту, равенство по полям."""

    def test_ordering_by_instant(self):
        """2024-01-02 01:00 +03:00 (= 2024-01-01 22:00 UTC) раньше 2024-01-01 23:00 UTC."""
        late_utc = _utc(2024, 1, 1, hour=23)
        early_next_day = _utc(2024, 1, 2, hour=1, utc_offset_minutes=180)

        assert early_next_day < late_utc
        assert late_utc > early_next_day
        assert early_next_day <= late_utc
        assert late_utc >= early_next_day

    def test_equality_is_fieldwise(self):
        """Один момент в разных смещениях: != но same_instant."""
        a = _utc(1970, 1, 1)
        b = _utc(1970, 1, 1, hour=1, utc_offset_minutes=60)

        assert a != b
        assert a.same_instant(b)
        assert a <= b
        assert a >= b

    def test_equal_fields_equal(self):
        assert _utc(2024, 1, 1, hour=5) == _utc(2024, 1, 1, hour=5)

    def test_compare_with_other_type(self):
        """Сравнение с не-CivilDate → TypeError."""
        with pytest.raises(TypeError):
            _utc(2024, 1, 1) < datetime.date(2024, 1, 2)

    def test_sorting(self):
        values = [_utc(2024, 3, 1), _utc(2023, 1, 1), _utc(2024, 1, 1)]
        assert [v.year * 100 + v.month for v in sorted(values)] == [202301, 202401, 202403]


class TestAsCivilDate:
    """Тесты as_civil_date."""

    def test_passthrough(self):
        value = _utc(2024, 1, 1)
        assert as_civil_date(value) is value

    def test_date_and_datetime(self):
        assert as_civil_date(datetime.date(2024, 2, 3)).day == 3
        assert as_civil_date(datetime.datetime(2024, 2, 3, 4, 5)).minute == 5

    def test_invalid_type(self):
        with pytest.raises(TypeError, match="expected CivilDate"):
            as_civil_date("2024-01-01")


# =============================================================================
# ТЕСТЫ: DatePeriod
# =============================================================================


class TestDatePeriod:
    """Тесты DatePeriod."""

    @pytest.fixture
    def february(self):
        return DatePeriod(start=_utc(2024, 2, 2), end=_utc(2024, 3, 2))

    def test_contains_boundaries(self, february):
        """Обе границы включены."""
        assert february.contains(_utc(2024, 2, 2)) is True
        assert february.contains(_utc(2024, 3, 2)) is True

    def test_contains_outside(self, february):
        assert february.contains(_utc(2024, 2, 1)) is False
        assert february.contains(_utc(2024, 3, 2, millisecond=1)) is False

    def test_contains_by_instant(self, february):
        """2024-02-02 00:30 +01:00 = 2024-02-01 23:30 UTC → вне периода."""
        assert february.contains(_utc(2024, 2, 2, minute=30, utc_offset_minutes=60)) is False

    def test_reversed_period_contains_nothing(self):
        period = DatePeriod(start=_utc(2024, 3, 2), end=_utc(2024, 2, 2))

        assert period.contains(_utc(2024, 2, 15)) is False
        assert list(period.iter_days()) == []
        assert period.day_count() == 0

    def test_iter_days(self):
        period = DatePeriod(start=_utc(2024, 2, 27), end=_utc(2024, 3, 2))
        days = [(d.month, d.day) for d in period.iter_days()]

        assert days == [(2, 27), (2, 28), (2, 29), (3, 1), (3, 2)]

    def test_single_day_period(self):
        period = DatePeriod(start=_utc(2024, 1, 1), end=_utc(2024, 1, 1))

        assert len(list(period.iter_days())) == 1
        assert period.day_count() == 1

    def test_iter_days_ends_on_last_supported_day(self):
        period = DatePeriod(start=_utc(9999, 12, 30), end=_utc(9999, 12, 31))

        assert [d.day for d in period.iter_days()] == [30, 31]

    def test_day_count(self, february):
        assert february.day_count() == 30

    def test_immutability(self, february):
        with pytest.raises(ValidationError):
            february.start = _utc(2024, 1, 1)


# =============================================================================
# ТЕСТЫ: WorkPattern
# =============================================================================


class TestWorkPattern:
    """Тесты WorkPattern."""

    def test_cycle_length(self):
        assert WorkPattern(count_work_days=2, count_off_days=2).cycle_length == 4
        assert WorkPattern(count_work_days=1, count_off_days=0).cycle_length == 1

    def test_is_work_position(self):
        pattern = WorkPattern(count_work_days=1, count_off_days=3)

        assert [pattern.is_work_position(p) for p in range(8)] == [
            True, False, False, False, True, False, False, False,
        ]

    def test_zero_work_days_rejected(self):
        with pytest.raises(ValidationError):
            WorkPattern(count_work_days=0, count_off_days=1)

    def test_negative_off_days_rejected(self):
        with pytest.raises(ValidationError):
            WorkPattern(count_work_days=1, count_off_days=-1)
