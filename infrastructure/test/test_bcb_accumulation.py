from __future__ import annotations

from datetime import date

import pytest

from infrastructure.bcb.accumulation import (
    accumulated_index,
    accumulated_percentage,
    first_of_month,
    format_service_date,
    twelve_month_window,
)
from infrastructure.bcb.models import IndexSeriesPoint


def _points(*values: float) -> list[IndexSeriesPoint]:
    return [IndexSeriesPoint(month=i + 1, year=2023, value=v) for i, v in enumerate(values)]


def test_accumulated_index_compounds_percentages() -> None:
    assert accumulated_index(_points(0.5, -0.1)) == pytest.approx(1.003995)
    assert accumulated_index(_points(10.0, 10.0)) == pytest.approx(1.21)


def test_accumulated_index_of_empty_sequence_is_neutral() -> None:
    assert accumulated_index([]) == 1.0
    assert accumulated_percentage([]) == 0.0


def test_accumulated_percentage_matches_factor() -> None:
    values = _points(0.53, 0.84, 0.71, 0.61)
    assert accumulated_percentage(values) == pytest.approx((accumulated_index(values) - 1) * 100)
    assert accumulated_percentage(_points(0.5, -0.1)) == pytest.approx(0.3995)


def test_format_service_date() -> None:
    assert format_service_date(date(2024, 3, 9)) == "09/03/2024"
    assert format_service_date("2024-03-09") == "2024-03-09"


def test_first_of_month_pads_fields() -> None:
    assert first_of_month(3, 2024) == "01/03/2024"
    assert first_of_month(12, 999) == "01/12/0999"


@pytest.mark.parametrize(
    "month, year, expected",
    [
        (3, 2024, ("01/04/2023", "01/03/2024")),
        (12, 2023, ("01/01/2022", "01/12/2023")),
        (1, 2024, ("01/02/2024", "01/01/2024")),
        (11, 2023, ("01/00/2022", "01/11/2023")),
    ],
)
def test_twelve_month_window_keeps_historical_rule(month: int, year: int, expected: tuple[str, str]) -> None:
    assert twelve_month_window(month, year) == expected
