"""
Основные доменные типы и утилиты общего ядра.
"""

from datetime import date, datetime
from enum import Enum
from typing import Union

DateLike = Union[date, datetime]


class ValidationErrorKind(str, Enum):
    """Виды ошибок валидации."""

    INVERTED_RANGE = "InvertedRange"
    MALFORMED_INPUT = "MalformedInput"
    INVALID_DATE = "InvalidDate"
    INVALID_MONTH = "InvalidMonth"


# Общие исключения
class DomainException(Exception):
    """Базовое исключение для доменных ошибок."""

    pass


class ValidationError(DomainException):
    """Исключение при нарушении инвариантов доменных объектов."""

    def __init__(self, kind: ValidationErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __str__(self) -> str:
        return self.message


# Общие утилиты
def to_date(value: DateLike) -> date:
    """Отбрасывает время суток, оставляя только календарную дату."""
    if isinstance(value, datetime):
        return value.date()
    return value


def today() -> date:
    """Возвращает текущую дату."""
    return date.today()


def to_datetime(value: DateLike) -> datetime:
    """Приводит дату к полуночи, время суток у datetime сохраняется."""
    if isinstance(value, datetime):
        return value
    return datetime(value.year, value.month, value.day)
