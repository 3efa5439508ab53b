"""
Доменная модель контекста загрузки (Occupancy Context).

Содержит сущность бронирования и доменный сервис анализа,
который считает загрузку по дням месяца и сливает пересекающиеся периоды.
"""

import calendar
from collections import Counter
from datetime import date, timedelta
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Tuple

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from ..shared_kernel import (
    DateLike,
    ValidationError,
    ValidationErrorKind,
    to_date,
    to_datetime,
)

ONE_DAY = timedelta(days=1)


def _inverted_range() -> ValidationError:
    return ValidationError(
        ValidationErrorKind.INVERTED_RANGE,
        "Дата начала должна быть не позже даты окончания",
    )


class Booking(BaseModel):
    """
    Бронирование: период дат с включёнными границами.
    Неизменяемый объект, сравнивается по значению.
    """

    model_config = ConfigDict(frozen=True)

    start_date: date
    end_date: date

    @model_validator(mode="before")
    @classmethod
    def raw_start_not_after_end(cls, data: Any) -> Any:
        # Сравниваются исходные значения, до отбрасывания времени суток
        if isinstance(data, dict):
            start, end = data.get("start_date"), data.get("end_date")
            if isinstance(start, date) and isinstance(end, date):
                if to_datetime(start) > to_datetime(end):
                    raise _inverted_range()
        return data

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def drop_time_of_day(cls, v: Any) -> Any:
        if isinstance(v, date):
            return to_date(v)
        return v

    @model_validator(mode="after")
    def start_not_after_end(self) -> "Booking":
        if self.start_date > self.end_date:
            raise _inverted_range()
        return self

    @classmethod
    def create(cls, start_date: DateLike, end_date: DateLike) -> "Booking":
        """Создает бронирование из двух дат."""
        return cls(start_date=start_date, end_date=end_date)

    @property
    def duration_days(self) -> int:
        """Возвращает длительность бронирования в днях."""
        return (self.end_date - self.start_date).days + 1  # Включая обе даты

    def date_sequence(self) -> Iterator[date]:
        """
        Перебирает все даты бронирования по возрастанию.

        Каждый вызов возвращает новый генератор, поэтому последовательность
        можно обходить сколько угодно раз.
        """
        for offset in range(self.duration_days):
            yield self.start_date + timedelta(days=offset)

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, date):
            return False
        return self.start_date <= to_date(item) <= self.end_date

    def __str__(self) -> str:
        return f"{self.start_date:%m/%d} - {self.end_date:%m/%d}"


class BookingAnalyzer:
    """Доменный сервис анализа набора бронирований."""

    @staticmethod
    def count_per_day(bookings: Iterable[Booking]) -> Dict[int, int]:
        """
        Считает, сколько бронирований покрывает каждый день месяца.

        Ключ - число месяца (1-31). Даты из разных месяцев и лет
        складываются в один и тот же ключ. Дни без бронирований
        в результат не попадают.
        """
        counts = Counter(
            day.day for booking in bookings for day in booking.date_sequence()
        )
        return dict(counts)

    @staticmethod
    def merge_overlapping(bookings: Iterable[Booking]) -> List[Booking]:
        """
        Сливает пересекающиеся и смежные бронирования.

        Смежными считаются периоды, между которыми нет ни одного
        свободного дня. Результат отсортирован по дате начала, между
        соседними периодами остается хотя бы один свободный день.
        Исходные бронирования не изменяются.
        """
        merged: List[Booking] = []

        for current in sorted(bookings, key=lambda b: b.start_date):
            if not merged:
                merged.append(current)
                continue

            last = merged[-1]
            # Разница в один день означает стык без разрыва
            if (current.start_date - last.end_date).days <= 1:
                if current.end_date > last.end_date:
                    merged[-1] = Booking(
                        start_date=last.start_date, end_date=current.end_date
                    )
            else:
                merged.append(current)

        return merged

    @staticmethod
    def daily_counts_for_month(
        counts: Mapping[int, int], month: int, year: int
    ) -> List[Tuple[int, int]]:
        """Возвращает пары (день, количество) для каждого дня месяца."""
        if not 1 <= month <= 12:
            raise ValidationError(
                ValidationErrorKind.INVALID_MONTH,
                f"Номер месяца должен быть от 1 до 12, получено {month}",
            )

        days_in_month = calendar.monthrange(year, month)[1]
        return [(day, counts.get(day, 0)) for day in range(1, days_in_month + 1)]
