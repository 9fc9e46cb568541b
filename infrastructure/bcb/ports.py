# infrastructure/bcb/ports.py
from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence, runtime_checkable


@runtime_checkable
class IndexServiceGateway(Protocol):
    """Port to the SGS webservice.

    Returns raw payloads; parsing is left to the client.
    """

    def latest_value(self, index_id: int) -> Any: ...
    def series_values(self, index_ids: Sequence[int], start: str, end: str) -> Any: ...
    def call(self, operation: str, params: Optional[Mapping[str, Any]] = None) -> Any: ...
