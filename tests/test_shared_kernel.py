"""
Тесты для типов общего ядра.
"""

from datetime import date, datetime

from booking_aggregator.shared_kernel import (
    DomainException,
    ValidationError,
    ValidationErrorKind,
    to_date,
    to_datetime,
)


class TestValidationError:
    """Тесты для исключения ValidationError."""

    def test_carries_kind_and_message(self):
        error = ValidationError(ValidationErrorKind.INVERTED_RANGE, "Ошибка периода")
        assert error.kind is ValidationErrorKind.INVERTED_RANGE
        assert error.message == "Ошибка периода"
        assert str(error) == "Ошибка периода"

    def test_is_domain_exception(self):
        error = ValidationError(ValidationErrorKind.MALFORMED_INPUT, "x")
        assert isinstance(error, DomainException)
        assert not isinstance(error, ValueError)

    def test_kind_values(self):
        assert ValidationErrorKind.INVERTED_RANGE == "InvertedRange"
        assert ValidationErrorKind.MALFORMED_INPUT == "MalformedInput"
        assert ValidationErrorKind.INVALID_DATE == "InvalidDate"
        assert ValidationErrorKind.INVALID_MONTH == "InvalidMonth"


def test_to_date_drops_time_of_day():
    assert to_date(datetime(2026, 3, 1, 23, 59, 59)) == date(2026, 3, 1)
    assert type(to_date(datetime(2026, 3, 1, 12))) is date


def test_to_date_keeps_plain_date():
    value = date(2026, 3, 1)
    assert to_date(value) is value


def test_to_datetime_promotes_date_to_midnight():
    assert to_datetime(date(2026, 3, 1)) == datetime(2026, 3, 1, 0, 0)
    value = datetime(2026, 3, 1, 15, 30)
    assert to_datetime(value) is value
