"""
Модуль контекста загрузки (Occupancy Context).

Отвечает за анализ набора бронирований, включая:
- Проверку периодов бронирования
- Подсчет загрузки по дням месяца
- Объединение пересекающихся и смежных периодов
"""

from . import application, domain, infrastructure, interfaces

__all__ = [
    "domain",
    "application",
    "infrastructure",
    "interfaces",
]
