"""Compounding helpers and date formatting for SGS queries.

The accumulation functions only make sense for series published as
period-over-period percentages (IGP-M, INPC and IPCA among them). Nothing
checks that at runtime.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, Tuple, Union

from .models import IndexSeriesPoint

DateLike = Union[str, date]

SERVICE_DATE_FORMAT = "%d/%m/%Y"


def accumulated_index(values: Iterable[IndexSeriesPoint]) -> float:
    """Return ``prod(1 + value / 100)``; ``1.0`` for an empty sequence."""

    accumulated = 1.0
    for point in values:
        accumulated *= 1 + float(point.value) / 100
    return accumulated


def accumulated_percentage(values: Iterable[IndexSeriesPoint]) -> float:
    """Return the compounded change of ``values`` expressed as a percentage."""

    return accumulated_index(values) * 100 - 100


def format_service_date(value: DateLike) -> str:
    """Render ``value`` as ``dd/mm/yyyy``; strings are passed through untouched."""

    if isinstance(value, date):
        return value.strftime(SERVICE_DATE_FORMAT)
    return value


def first_of_month(month: int, year: int) -> str:
    return "01/%02d/%04d" % (month, year)


def twelve_month_window(month: int, year: int) -> Tuple[str, str]:
    """Return the ``(start, end)`` bounds covering twelve months up to ``month/year``.

    ``start`` keeps the historical year rule: the previous year unless the
    latest month is January. For ``month`` 11 the start month comes out as 0.
    """

    start_month = (month + 1) % 12
    start_year = year - 1 if month > 1 else year
    return first_of_month(start_month, start_year), first_of_month(month, year)


__all__ = [
    "DateLike",
    "SERVICE_DATE_FORMAT",
    "accumulated_index",
    "accumulated_percentage",
    "format_service_date",
    "first_of_month",
    "twelve_month_window",
]
