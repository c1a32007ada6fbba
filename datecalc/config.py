"""
Settings — environment-driven configuration via pydantic-settings.

Инварианты:
1. get_settings() кэшируется (lru_cache): один экземпляр на процесс
2. Все значения имеют defaults: библиотека работает без окружения
3. Смещение по умолчанию задаёт зону для текста без явной зоны (UTC = 0)
"""

from functools import lru_cache
from typing import Final, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Максимальное по модулю смещение от UTC (минуты), совпадает с CivilDate
MAX_UTC_OFFSET_MINUTES: Final[int] = 1439


class Settings(BaseSettings):
    """Library settings from DATECALC_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DATECALC_", env_file=".env", case_sensitive=False, extra="ignore"
    )

    # Parsing
    default_utc_offset_minutes: int = Field(
        default=0,
        ge=-MAX_UTC_OFFSET_MINUTES,
        le=MAX_UTC_OFFSET_MINUTES,
        description="UTC offset applied to date-time text that carries no zone",
    )

    # Observability
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
