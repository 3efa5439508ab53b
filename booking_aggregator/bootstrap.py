from typing import Any, Dict, Optional

from .config import Settings
from .occupancy.application import BookingAnalysisService
from .occupancy.infrastructure import (
    ConsoleBookingReader,
    ConsoleLogger,
    ConsoleReportRenderer,
)


def bootstrap_app(settings: Optional[Settings] = None) -> Dict[str, Any]:
    """Создает и настраивает все компоненты приложения."""
    settings = settings or Settings()
    month, year = settings.resolved_period()

    # 1. Общий логгер для всех компонентов
    logger = ConsoleLogger(level=settings.LOG_LEVEL)

    # 2. Сервис приложения
    analysis_service = BookingAnalysisService(logger=logger)

    # 3. Адаптеры консоли
    reader = ConsoleBookingReader(
        service=analysis_service,
        year=year,
        stop_word=settings.STOP_WORD,
        logger=logger,
    )
    renderer = ConsoleReportRenderer()

    return {
        "settings": settings,
        "month": month,
        "year": year,
        "logger": logger,
        "analysis_service": analysis_service,
        "reader": reader,
        "renderer": renderer,
    }
