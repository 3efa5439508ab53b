"""
Тесты для точки входа командной строки.
"""

import pytest
from click.testing import CliRunner

from booking_aggregator import __version__
from booking_aggregator.bootstrap import bootstrap_app
from booking_aggregator.cli import main
from booking_aggregator.config import Settings
from booking_aggregator.occupancy.application import BookingAnalysisService
from booking_aggregator.occupancy.infrastructure import (
    ConsoleBookingReader,
    ConsoleLogger,
    ConsoleReportRenderer,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Убирает переменные окружения агрегатора, чтобы тесты были изолированы."""
    for name in ("REPORT_YEAR", "REPORT_MONTH", "STOP_WORD", "LOG_LEVEL"):
        monkeypatch.delenv(f"BOOKING_AGGREGATOR_{name}", raising=False)


def test_bootstrap_app_wires_components():
    app = bootstrap_app(
        Settings(_env_file=None, REPORT_MONTH=3, REPORT_YEAR=2026, LOG_LEVEL="ERROR")
    )

    assert (app["month"], app["year"]) == (3, 2026)
    assert isinstance(app["logger"], ConsoleLogger)
    assert isinstance(app["analysis_service"], BookingAnalysisService)
    assert isinstance(app["reader"], ConsoleBookingReader)
    assert isinstance(app["renderer"], ConsoleReportRenderer)


class TestMainCommand:
    """Тесты для команды booking-aggregator."""

    def test_full_session(self):
        runner = CliRunner()
        result = runner.invoke(
            main,
            ["--month", "3", "--year", "2026"],
            input="03/01 - 03/05\n03/04 - 03/10\ndone\n",
        )

        assert result.exit_code == 0, result.output
        assert "Количество бронирований за март 2026:" in result.output
        assert "   4 | 2" in result.output
        assert "03/01 - 03/10" in result.output
        assert "Загрузка по дням (после объединения, без пересечений):" in result.output
        assert "   4 | 1" in result.output

    def test_invalid_entry_is_retried(self):
        runner = CliRunner()
        result = runner.invoke(
            main,
            ["--month", "3", "--year", "2026", "--log-level", "error"],
            input="03/10 - 03/01\n03/01 - 03/02\n03/05 - 03/06\ndone\n",
        )

        assert result.exit_code == 0, result.output
        assert "Ошибка: Дата начала должна быть не позже даты окончания" in result.output
        assert "03/01 - 03/02\n03/05 - 03/06" in result.output

    def test_no_bookings(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--year", "2026"], input="done\n")

        assert result.exit_code == 0, result.output
        assert "Бронирования не введены." in result.output

    def test_end_of_input_without_stop_word(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--month", "2", "--year", "2024"], input="02/28 - 03/01\n")

        assert result.exit_code == 0, result.output
        assert "Количество бронирований за февраль 2024:" in result.output
        assert "  29 | 1" in result.output

    def test_custom_stop_word(self):
        runner = CliRunner()
        result = runner.invoke(
            main,
            ["--month", "3", "--year", "2026", "--stop-word", "quit"],
            input="03/01 - 03/01\nquit\n",
        )

        assert result.exit_code == 0, result.output
        assert "'quit'" in result.output
        assert "03/01 - 03/01" in result.output

    def test_invalid_month_option(self):
        result = CliRunner().invoke(main, ["--month", "13"])
        assert result.exit_code == 2

    def test_version(self):
        result = CliRunner().invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output
