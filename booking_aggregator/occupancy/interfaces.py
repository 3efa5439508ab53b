"""
Интерфейсы (порты) для контекста загрузки.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Protocol

from .domain import Booking

if TYPE_CHECKING:
    from .application import AnalysisResultDTO


class ILogger(Protocol):
    """Интерфейс для логгера."""

    def info(self, message: str, **kwargs: Any) -> None: ...
    def error(self, message: str, **kwargs: Any) -> None: ...
    def warning(self, message: str, **kwargs: Any) -> None: ...
    def debug(self, message: str, **kwargs: Any) -> None: ...


class IBookingSource(Protocol):
    """Интерфейс источника бронирований."""

    def read_bookings(self) -> List[Booking]: ...


class IReportRenderer(Protocol):
    """Интерфейс вывода отчета."""

    def render(self, result: AnalysisResultDTO) -> None: ...
    def render_empty(self) -> None: ...
