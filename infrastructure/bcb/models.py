"""Value objects returned by the SGS webservice."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Mapping, Optional


class MalformedPayloadError(ValueError):
    """Raised when a ``WSValorSerieVO`` cannot be interpreted."""


def payload_field(item: Any, name: str) -> Any:
    # zeep returns CompoundValue objects (attribute access); mappings work too
    if isinstance(item, Mapping):
        return item.get(name)
    return getattr(item, name, None)


def _to_int(raw: Any) -> Optional[int]:
    if raw is None or isinstance(raw, bool):
        return None
    try:
        return int(str(raw).strip())
    except ValueError:
        return None


def _to_float(raw: Any) -> Optional[float]:
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float, Decimal)):
        return float(raw)
    s = str(raw).strip().replace(" ", "")
    if not s:
        return None
    # "1.234,56" -> "1234.56"
    if "," in s and s.count(",") == 1 and s.rfind(",") > s.rfind("."):
        s = s.replace(".", "").replace(",", ".")
    try:
        return float(s)
    except ValueError:
        return None


@dataclass(frozen=True)
class IndexSeriesPoint:
    """One published observation of a series."""

    month: int
    year: int
    value: float
    day: Optional[int] = None

    @classmethod
    def from_remote(cls, item: Any) -> "IndexSeriesPoint":
        """Build a point from a ``WSValorSerieVO`` payload."""

        if item is None:
            raise MalformedPayloadError("empty series value")
        month = _to_int(payload_field(item, "mes"))
        year = _to_int(payload_field(item, "ano"))
        if month is None or not 1 <= month <= 12:
            raise MalformedPayloadError(f"invalid month in series value: {payload_field(item, 'mes')!r}")
        if year is None:
            raise MalformedPayloadError(f"invalid year in series value: {payload_field(item, 'ano')!r}")
        value = _to_float(payload_field(item, "valor"))
        if value is None:
            value = _to_float(payload_field(item, "svalor"))
        if value is None:
            raise MalformedPayloadError(f"non numeric value for {month:02d}/{year:04d}")
        day = _to_int(payload_field(item, "dia")) or None
        return cls(month=month, year=year, value=value, day=day)


__all__ = ["IndexSeriesPoint", "MalformedPayloadError", "payload_field"]
