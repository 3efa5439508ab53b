"""Агрегатор периодов бронирования: загрузка по дням и объединение периодов."""

__version__ = "0.1.0"
