"""
Общее ядро (Shared Kernel) для агрегатора бронирований.

Содержит общие типы данных и утилиты, используемые контекстом загрузки.
"""

from .domain import (
    DateLike,
    # Исключения
    DomainException,
    ValidationError,
    # Перечисления
    ValidationErrorKind,
    # Утилиты
    to_date,
    to_datetime,
    today,
)

__all__ = [
    "DateLike",
    # Исключения
    "DomainException",
    "ValidationError",
    # Перечисления
    "ValidationErrorKind",
    # Утилиты
    "to_date",
    "to_datetime",
    "today",
]
