"""Точка входа командной строки агрегатора бронирований."""

from typing import Optional

import click

from booking_aggregator import __version__
from booking_aggregator.bootstrap import bootstrap_app
from booking_aggregator.config import Settings


@click.command()
@click.version_option(version=__version__)
@click.option(
    "--month",
    type=click.IntRange(1, 12),
    default=None,
    help="Месяц отчета (по умолчанию текущий).",
)
@click.option(
    "--year",
    type=click.IntRange(1, 9999),
    default=None,
    help="Год отчета и введенных дат (по умолчанию текущий).",
)
@click.option("--stop-word", default=None, help="Слово для завершения ввода.")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Минимальный уровень сообщений в stderr.",
)
def main(
    month: Optional[int],
    year: Optional[int],
    stop_word: Optional[str],
    log_level: Optional[str],
) -> None:
    """Агрегатор периодов бронирования.

    Читает периоды в формате MM/DD - MM/DD, печатает загрузку по дням
    месяца, объединенные периоды и загрузку после объединения.
    """
    overrides = {
        "REPORT_MONTH": month,
        "REPORT_YEAR": year,
        "STOP_WORD": stop_word,
        "LOG_LEVEL": log_level,
    }
    settings = Settings(**{k: v for k, v in overrides.items() if v is not None})
    app = bootstrap_app(settings)

    bookings = app["reader"].read_bookings()
    if not bookings:
        app["renderer"].render_empty()
        return

    result = app["analysis_service"].analyze(bookings, app["month"], app["year"])
    app["renderer"].render(result)


if __name__ == "__main__":
    main()
