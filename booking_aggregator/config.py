"""
Настройки приложения.
Загружаются из переменных окружения с префиксом BOOKING_AGGREGATOR_.
"""

from typing import Optional, Tuple

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .shared_kernel import today


class Settings(BaseSettings):
    """Настройки агрегатора бронирований."""

    # ======================
    # Отчет
    # ======================
    REPORT_YEAR: Optional[int] = None
    REPORT_MONTH: Optional[int] = None

    # ======================
    # Ввод
    # ======================
    STOP_WORD: str = "done"

    # ======================
    # Логирование
    # ======================
    LOG_LEVEL: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="BOOKING_AGGREGATOR_",
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("REPORT_YEAR")
    @classmethod
    def year_in_range(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and not 1 <= v <= 9999:
            raise ValueError("Год должен быть от 1 до 9999")
        return v

    @field_validator("REPORT_MONTH")
    @classmethod
    def month_in_range(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and not 1 <= v <= 12:
            raise ValueError("Номер месяца должен быть от 1 до 12")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def known_log_level(cls, v: str) -> str:
        v = v.upper()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR"):
            raise ValueError(f"Неизвестный уровень логирования: {v}")
        return v

    def resolved_period(self) -> Tuple[int, int]:
        """Возвращает (месяц, год) отчета; по умолчанию текущие."""
        current = today()
        month = self.REPORT_MONTH if self.REPORT_MONTH is not None else current.month
        year = self.REPORT_YEAR if self.REPORT_YEAR is not None else current.year
        return month, year
