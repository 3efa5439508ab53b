"""
Прикладной слой контекста загрузки.

Содержит DTO и сервис приложения, который координирует
разбор введенных периодов и доменный анализ бронирований.
"""

import re
from datetime import date
from typing import Dict, List, Sequence

from pydantic import BaseModel

from ..shared_kernel import DateLike, ValidationError, ValidationErrorKind
from . import interfaces as ports
from .domain import Booking, BookingAnalyzer

# DTO (Data Transfer Objects) для входящих данных

_RANGE_PATTERN = re.compile(
    r"^\s*(\d{1,2})\s*/\s*(\d{1,2})\s*-\s*(\d{1,2})\s*/\s*(\d{1,2})\s*$"
)


class BookingRangeRequest(BaseModel):
    """Запрос на добавление бронирования в формате MM/DD - MM/DD."""

    start_month: int
    start_day: int
    end_month: int
    end_day: int
    year: int

    @classmethod
    def parse(cls, text: str, year: int) -> "BookingRangeRequest":
        """Разбирает строку вида '03/01 - 03/05'."""
        match = _RANGE_PATTERN.match(text)
        if match is None:
            raise ValidationError(
                ValidationErrorKind.MALFORMED_INPUT,
                "Используйте формат MM/DD - MM/DD",
            )

        start_month, start_day, end_month, end_day = (int(g) for g in match.groups())
        return cls(
            start_month=start_month,
            start_day=start_day,
            end_month=end_month,
            end_day=end_day,
            year=year,
        )

    def _resolve(self, month: int, day: int) -> date:
        try:
            return date(self.year, month, day)
        except ValueError:
            raise ValidationError(
                ValidationErrorKind.INVALID_DATE,
                f"Некорректная дата {month:02d}/{day:02d}",
            )

    def to_booking(self) -> Booking:
        """Создает доменное бронирование из запроса."""
        start_date = self._resolve(self.start_month, self.start_day)
        end_date = self._resolve(self.end_month, self.end_day)
        return Booking.create(start_date, end_date)


# DTO для исходящих данных


class BookingDTO(BaseModel):
    """DTO для представления бронирования."""

    start_date: date
    end_date: date
    label: str

    @classmethod
    def from_domain(cls, booking: Booking) -> "BookingDTO":
        """Создает DTO из доменной модели."""
        return cls(
            start_date=booking.start_date,
            end_date=booking.end_date,
            label=str(booking),
        )


class DailyCountDTO(BaseModel):
    """Количество бронирований на один день месяца."""

    day: int
    count: int


class MonthReportDTO(BaseModel):
    """Загрузка по дням одного месяца."""

    month: int
    year: int
    rows: List[DailyCountDTO]

    @property
    def total(self) -> int:
        return sum(row.count for row in self.rows)


class AnalysisResultDTO(BaseModel):
    """Результат анализа набора бронирований."""

    bookings_count: int
    daily_report: MonthReportDTO
    merged_bookings: List[BookingDTO]
    merged_report: MonthReportDTO


# Сервисы приложения


class BookingAnalysisService:
    """Сервис приложения для анализа бронирований."""

    def __init__(self, logger: ports.ILogger):
        """Инициализирует сервис."""
        self._logger = logger

    def build_booking(self, start_date: DateLike, end_date: DateLike) -> Booking:
        """Создает бронирование из двух дат."""
        return Booking.create(start_date, end_date)

    def parse_booking(self, text: str, year: int) -> Booking:
        """Разбирает введенную строку и создает бронирование."""
        booking = BookingRangeRequest.parse(text, year).to_booking()
        self._logger.debug("Booking parsed", booking=str(booking))
        return booking

    def count_per_day(self, bookings: Sequence[Booking]) -> Dict[int, int]:
        """Считает загрузку по числам месяца."""
        return BookingAnalyzer.count_per_day(bookings)

    def merge_overlapping(self, bookings: Sequence[Booking]) -> List[Booking]:
        """Сливает пересекающиеся и смежные бронирования."""
        return BookingAnalyzer.merge_overlapping(bookings)

    def month_report(
        self, bookings: Sequence[Booking], month: int, year: int
    ) -> MonthReportDTO:
        """Строит отчет о загрузке за месяц."""
        counts = BookingAnalyzer.count_per_day(bookings)
        rows = BookingAnalyzer.daily_counts_for_month(counts, month, year)
        return MonthReportDTO(
            month=month,
            year=year,
            rows=[DailyCountDTO(day=day, count=count) for day, count in rows],
        )

    def analyze(
        self, bookings: Sequence[Booking], month: int, year: int
    ) -> AnalysisResultDTO:
        """Выполняет полный анализ: загрузка, слияние, загрузка после слияния."""
        self._logger.info(
            "Analyzing bookings", count=len(bookings), month=month, year=year
        )

        daily_report = self.month_report(bookings, month, year)
        merged = self.merge_overlapping(bookings)
        merged_report = self.month_report(merged, month, year)

        self._logger.info(
            "Bookings merged", original=len(bookings), merged=len(merged)
        )

        return AnalysisResultDTO(
            bookings_count=len(bookings),
            daily_report=daily_report,
            merged_bookings=[BookingDTO.from_domain(b) for b in merged],
            merged_report=merged_report,
        )
