"""
Инфраструктурный слой контекста загрузки.

Содержит реализации портов для работы с консолью:
логгер, чтение периодов бронирования и вывод отчета.
"""
import json
import sys
from typing import Callable, List, Optional

import click

from ..shared_kernel import ValidationError
from . import interfaces as ports
from .application import AnalysisResultDTO, BookingAnalysisService, MonthReportDTO
from .domain import Booking

LOG_LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}

MONTH_NAMES = (
    "январь",
    "февраль",
    "март",
    "апрель",
    "май",
    "июнь",
    "июль",
    "август",
    "сентябрь",
    "октябрь",
    "ноябрь",
    "декабрь",
)


class ConsoleLogger(ports.ILogger):
    """Простая реализация логгера, выводящая сообщения в консоль."""

    def __init__(self, level: str = "INFO"):
        level = level.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Неизвестный уровень логирования: {level}")
        self._threshold = LOG_LEVELS[level]

    def _log(self, level: str, message: str, **kwargs) -> None:
        if LOG_LEVELS[level] < self._threshold:
            return
        print(f"[{level}] {message}", file=sys.stderr, flush=True)
        if kwargs:
            print(
                "  Context:",
                json.dumps(kwargs, default=str, indent=2),
                file=sys.stderr,
                flush=True,
            )

    def debug(self, message: str, **kwargs) -> None:
        self._log("DEBUG", message, **kwargs)

    def info(self, message: str, **kwargs) -> None:
        self._log("INFO", message, **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        self._log("WARNING", message, **kwargs)

    def error(self, message: str, **kwargs) -> None:
        self._log("ERROR", message, **kwargs)


class ConsoleBookingReader(ports.IBookingSource):
    """Читает периоды бронирования построчно, пока не встретит стоп-слово."""

    def __init__(
        self,
        service: BookingAnalysisService,
        year: int,
        stop_word: str = "done",
        logger: Optional[ports.ILogger] = None,
        input_func: Callable[[], str] = input,
    ):
        self._service = service
        self._year = year
        self._stop_word = stop_word.strip().lower()
        self._logger = logger or ConsoleLogger()
        self._input = input_func

    @property
    def prompt(self) -> str:
        return (
            "Введите период бронирования (MM/DD - MM/DD) "
            f"или '{self._stop_word}' для завершения:"
        )

    def read_bookings(self) -> List[Booking]:
        """Собирает бронирования, повторяя запрос после каждой ошибки."""
        bookings: List[Booking] = []

        while True:
            click.echo(self.prompt)
            try:
                line = self._input()
            except EOFError:
                self._logger.debug("Input stream closed")
                break

            if line.strip().lower() == self._stop_word:
                break

            try:
                booking = self._service.parse_booking(line, self._year)
            except ValidationError as e:
                # Ошибочная строка не добавляется, накопленное сохраняется
                self._logger.warning(
                    "Booking rejected", kind=e.kind.value, line=line
                )
                click.echo(f"Ошибка: {e.message}. Попробуйте ещё раз.")
                continue

            bookings.append(booking)

        self._logger.info("Bookings collected", count=len(bookings))
        return bookings


class ConsoleReportRenderer(ports.IReportRenderer):
    """Выводит результаты анализа в виде таблиц."""

    def __init__(self, echo: Callable[[str], None] = click.echo):
        self._echo = echo

    def render_month(self, report: MonthReportDTO) -> None:
        month_name = MONTH_NAMES[report.month - 1]
        self._echo(f"Количество бронирований за {month_name} {report.year}:")
        self._echo("День | Кол-во")
        self._echo("-----|-------")
        for row in report.rows:
            self._echo(f"{row.day:>4} | {row.count}")

    def render(self, result: AnalysisResultDTO) -> None:
        self.render_month(result.daily_report)

        self._echo("")
        self._echo("Объединенные периоды бронирования:")
        for booking in result.merged_bookings:
            self._echo(booking.label)

        self._echo("")
        self._echo("Загрузка по дням (после объединения, без пересечений):")
        self.render_month(result.merged_report)

    def render_empty(self) -> None:
        self._echo("Бронирования не введены.")
