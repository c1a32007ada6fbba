"""
JSON Schema Contract Validators

Dict-payload календарного API проверяется по формальным контрактам
(jsonschema, Draft 2020-12) до разбора дат.

Схемы (package data, datecalc/core/contracts/schema/):
- date_period.json — {"start": str, "end": str}
- work_schedule_request.json — период DD-MM-YYYY + паттерн work/off

ИНВАРИАНТЫ:
1. Контракт проверяет только структуру; содержимое строк проверяет парсер дат
2. Схемы проходят meta-validation при загрузке
3. Валидаторы контрактов строятся один раз при импорте модуля
4. При нескольких нарушениях поднимается наиболее релевантное (best_match)
"""

import json
from pathlib import Path
from typing import Any, Final

from jsonschema import Draft202012Validator, SchemaError
from jsonschema.exceptions import best_match

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """Чтение и meta-validation схем из каталога; результат кэшируется по имени."""

    def __init__(self, schema_dir: Path | None = None):
        schema_dir = schema_dir or SCHEMA_DIR
        if not schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {schema_dir}")
        self._schema_dir = schema_dir
        self._cache: dict[str, dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> dict[str, Any]:
        """
        Args:
            schema_name: Имя файла схемы без ".json" (например, 'date_period')

        Raises:
            FileNotFoundError: Файла схемы нет в каталоге
            ValueError: Файл не является валидной JSON Schema
        """
        cached = self._cache.get(schema_name)
        if cached is not None:
            return cached

        path = self._schema_dir / f"{schema_name}.json"
        if not path.is_file():
            raise FileNotFoundError(f"Schema not found: {path}")

        schema = json.loads(path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {path.name}: {e.message}") from e

        self._cache[schema_name] = schema
        return schema


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Проверка payload по одной схеме контракта."""

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self._validator = Draft202012Validator((loader or SchemaLoader()).load_schema(schema_name))

    def validate(self, data: dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Наиболее релевантное нарушение контракта
        """
        error = best_match(self._validator.iter_errors(data))
        if error is not None:
            raise error


class DatePeriodValidator(ContractValidator):
    """{"start": str, "end": str} для is_within_period."""

    def __init__(self, loader: SchemaLoader | None = None):
        super().__init__("date_period", loader)


class WorkScheduleRequestValidator(ContractValidator):
    """Период DD-MM-YYYY и паттерн для get_work_schedule."""

    def __init__(self, loader: SchemaLoader | None = None):
        super().__init__("work_schedule_request", loader)


_LOADER = SchemaLoader()
_DATE_PERIOD: Final[DatePeriodValidator] = DatePeriodValidator(_LOADER)
_WORK_SCHEDULE_REQUEST: Final[WorkScheduleRequestValidator] = WorkScheduleRequestValidator(_LOADER)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_date_period(data: dict[str, Any]) -> None:
    """Raises ValidationError, если data не соответствует date_period."""
    _DATE_PERIOD.validate(data)


def validate_work_schedule_request(data: dict[str, Any]) -> None:
    """Raises ValidationError, если data не соответствует work_schedule_request."""
    _WORK_SCHEDULE_REQUEST.validate(data)
