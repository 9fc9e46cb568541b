"""Well-known SGS series identifiers."""

from __future__ import annotations

from enum import IntEnum
from typing import Dict


class IndexId(IntEnum):
    """Series ids published by the BCB registry for the most used indices.

    Any other positive integer is a valid SGS id as well and is passed through
    uninterpreted.
    """

    INPC = 188  # INPC do IBGE
    IGPM = 189  # IGP-M da FGV
    IPCA = 433  # IPCA do IBGE


INDEX_LABELS: Dict[int, str] = {
    IndexId.INPC: "INPC (IBGE)",
    IndexId.IGPM: "IGP-M (FGV)",
    IndexId.IPCA: "IPCA (IBGE)",
}


def normalize_index_id(index_id: int) -> int:
    """Return ``index_id`` as a plain ``int`` or raise ``ValueError``."""

    if isinstance(index_id, bool) or not isinstance(index_id, int):
        raise ValueError(f"index id must be an integer, got {index_id!r}")
    if index_id <= 0:
        raise ValueError(f"index id must be positive, got {index_id}")
    return int(index_id)


def describe_index(index_id: int) -> str:
    return INDEX_LABELS.get(int(index_id), f"SGS {int(index_id)}")


__all__ = ["IndexId", "INDEX_LABELS", "normalize_index_id", "describe_index"]
