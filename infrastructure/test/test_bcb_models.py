from __future__ import annotations

from decimal import Decimal
from types import SimpleNamespace

import pytest

from infrastructure.bcb.indices import IndexId, describe_index, normalize_index_id
from infrastructure.bcb.models import IndexSeriesPoint, MalformedPayloadError


def test_point_from_attribute_payload() -> None:
    payload = SimpleNamespace(ano=2024, mes=3, dia=1, valor=Decimal("0.47"), svalor="0.47")

    point = IndexSeriesPoint.from_remote(payload)

    assert point == IndexSeriesPoint(month=3, year=2024, value=0.47, day=1)


def test_point_falls_back_to_string_value() -> None:
    point = IndexSeriesPoint.from_remote({"ano": "2023", "mes": "12", "valor": None, "svalor": "-0,12"})

    assert point.value == pytest.approx(-0.12)
    assert point.day is None


@pytest.mark.parametrize(
    "payload",
    [
        None,
        {"ano": 2024, "mes": 13, "valor": "1"},
        {"ano": None, "mes": 1, "valor": "1"},
        {"ano": 2024, "mes": 1, "valor": ""},
    ],
)
def test_point_rejects_malformed_payload(payload: object) -> None:
    with pytest.raises(MalformedPayloadError):
        IndexSeriesPoint.from_remote(payload)


def test_point_is_immutable() -> None:
    point = IndexSeriesPoint(month=1, year=2024, value=0.1)
    with pytest.raises(AttributeError):
        point.value = 0.2  # type: ignore[misc]


def test_well_known_indices() -> None:
    assert int(IndexId.IGPM) == 189
    assert int(IndexId.INPC) == 188
    assert int(IndexId.IPCA) == 433
    assert describe_index(IndexId.IPCA) == "IPCA (IBGE)"
    assert describe_index(4389) == "SGS 4389"
    assert normalize_index_id(IndexId.IGPM) == 189
    assert type(normalize_index_id(IndexId.IGPM)) is int
