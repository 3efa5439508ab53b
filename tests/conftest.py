"""
Общие фикстуры для тестов агрегатора бронирований.
"""
from typing import Any, Dict, List, Tuple

import pytest

from booking_aggregator.occupancy.application import BookingAnalysisService


class MockLogger:
    """Мок-логгер, запоминающий все сообщения."""

    def __init__(self) -> None:
        self.records: List[Tuple[str, str, Dict[str, Any]]] = []

    def info(self, message: str, **kwargs: Any) -> None:
        self.records.append(("INFO", message, kwargs))

    def error(self, message: str, **kwargs: Any) -> None:
        self.records.append(("ERROR", message, kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        self.records.append(("WARNING", message, kwargs))

    def debug(self, message: str, **kwargs: Any) -> None:
        self.records.append(("DEBUG", message, kwargs))

    def messages(self, level: str) -> List[str]:
        return [message for lvl, message, _ in self.records if lvl == level]


@pytest.fixture
def logger() -> MockLogger:
    """Фикстура, предоставляющая чистый мок-логгер."""
    return MockLogger()


@pytest.fixture
def service(logger: MockLogger) -> BookingAnalysisService:
    """Фикстура, предоставляющая сервис анализа с мок-логгером."""
    return BookingAnalysisService(logger=logger)
