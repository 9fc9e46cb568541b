"""Client for the price indices published by the BCB SGS webservice.

``IndexClient`` is bound to one series id. It caches the latest published
value, fetches series values for a period and derives compounded factors from
them (accumulated index, accumulated percentage and monetary adjustment).
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, List, Mapping, Optional

from shared.config import settings
from shared.errors import RemoteServiceError

from .accumulation import (
    DateLike,
    accumulated_index,
    accumulated_percentage,
    first_of_month,
    format_service_date,
    twelve_month_window,
)
from .cache import LatestValueCache
from .indices import IndexId, describe_index, normalize_index_id
from .models import IndexSeriesPoint, MalformedPayloadError, payload_field
from .ports import IndexServiceGateway
from .soap import SoapIndexGateway

logger = logging.getLogger(__name__)

GatewayFactory = Callable[[str], IndexServiceGateway]


class IndexClient:
    """Typed access to one SGS series.

    The index id defaults to IGP-M. Building the client loads the WSDL, so an
    unreachable endpoint raises ``shared.errors.ConnectionError`` right away.
    Every remote failure afterwards surfaces as ``RemoteServiceError``; nothing
    is retried and the cached latest value is left as it was.
    """

    def __init__(
        self,
        index_id: int = IndexId.IGPM,
        wsdl_url: Optional[str] = None,
        *,
        gateway: Optional[IndexServiceGateway] = None,
        gateway_factory: Optional[GatewayFactory] = None,
    ) -> None:
        self._index_id = normalize_index_id(index_id)
        self._wsdl_url = wsdl_url or settings.BCB_WSDL_URL
        if gateway is None:
            factory = gateway_factory or SoapIndexGateway
            gateway = factory(self._wsdl_url)
        self._gateway = gateway
        self._latest = LatestValueCache()
        logger.info(
            "IndexClient init",
            extra={"index_id": self._index_id, "index": describe_index(self._index_id), "wsdl": self._wsdl_url},
        )

    @classmethod
    def from_settings(cls, index_id: Optional[int] = None) -> "IndexClient":
        """Build a client with the configured WSDL and default index."""

        return cls(index_id if index_id is not None else settings.BCB_DEFAULT_INDEX, settings.BCB_WSDL_URL)

    @property
    def index_id(self) -> int:
        return self._index_id

    @property
    def wsdl_url(self) -> str:
        return self._wsdl_url

    @property
    def latest_cache(self) -> LatestValueCache:
        return self._latest

    # ------------------------------------------------------------------
    # Retrieval
    # ------------------------------------------------------------------
    def get_latest_value(self, force_refresh: bool = False) -> IndexSeriesPoint:
        """Return the latest published point, from cache unless ``force_refresh``."""

        return self._latest.read(self._fetch_latest_value, refresh=force_refresh)

    def get_values_for_period(
        self, start_date: DateLike, end_date: Optional[DateLike] = None
    ) -> List[IndexSeriesPoint]:
        """Return the points published between ``start_date`` and ``end_date``.

        Both bounds are inclusive and sent as ``dd/mm/yyyy``. Without
        ``end_date`` the period ends at the month of the latest value.
        The order is the one the service returns.
        """

        start = format_service_date(start_date)
        if end_date is None:
            latest = self.get_latest_value()
            end = first_of_month(latest.month, latest.year)
        else:
            end = format_service_date(end_date)

        logger.debug("SGS values for %s between %s and %s", self._index_id, start, end)
        response = self._gateway.series_values([self._index_id], start, end)
        entries = _as_list(response)
        if not entries:
            logger.warning("SGS returned an empty result for %s (%s - %s)", self._index_id, start, end)
            raise RemoteServiceError(f"SGS returned no series for index {self._index_id}")
        entry = entries[0]
        if entry is None:
            logger.warning("SGS returned an empty series entry for %s (%s - %s)", self._index_id, start, end)
            raise RemoteServiceError(f"SGS returned an empty series entry for index {self._index_id}")
        return _parse_points(payload_field(entry, "valores"), index_id=self._index_id)

    def get_last_twelve_values(self) -> List[IndexSeriesPoint]:
        """Return the last twelve published values (monthly series only)."""

        latest = self.get_latest_value()
        start, end = twelve_month_window(latest.month, latest.year)
        return self.get_values_for_period(start, end)

    # ------------------------------------------------------------------
    # Derived computations
    # ------------------------------------------------------------------
    @staticmethod
    def get_accumulated_index(period_values: Iterable[IndexSeriesPoint]) -> float:
        return accumulated_index(period_values)

    def get_accumulated_index_for_period(self, start_date: DateLike, end_date: Optional[DateLike] = None) -> float:
        return self.get_accumulated_index(self.get_values_for_period(start_date, end_date))

    def get_accumulated_percentage(self, start_date: DateLike, end_date: Optional[DateLike] = None) -> float:
        """Compounded change over the period, as a percentage."""

        return accumulated_percentage(self.get_values_for_period(start_date, end_date))

    def adjust_value(self, amount: float, start_date: DateLike, end_date: Optional[DateLike] = None) -> float:
        """Correct ``amount`` by the index, including the value of ``start_date``."""

        return amount * self.get_accumulated_index_for_period(start_date, end_date)

    # ------------------------------------------------------------------
    # Escape hatch
    # ------------------------------------------------------------------
    def call_raw(self, operation: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """Invoke any WSDL operation by name and return the unparsed response."""

        return self._gateway.call(operation, params)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _fetch_latest_value(self) -> IndexSeriesPoint:
        logger.debug("SGS latest value for %s", self._index_id)
        response = self._gateway.latest_value(self._index_id)
        item = payload_field(response, "ultimoValor") if response is not None else None
        if item is None:
            logger.warning("SGS returned no latest value for %s", self._index_id)
            raise RemoteServiceError(f"SGS returned no latest value for index {self._index_id}")
        try:
            return IndexSeriesPoint.from_remote(item)
        except MalformedPayloadError as exc:
            logger.warning("Malformed latest value for %s: %s", self._index_id, exc)
            raise RemoteServiceError(f"Malformed latest value for index {self._index_id}: {exc}") from exc


def _as_list(payload: Any) -> List[Any]:
    if payload is None:
        return []
    if isinstance(payload, (str, bytes, Mapping)):
        raise RemoteServiceError(f"Unexpected SGS payload type: {type(payload).__name__}")
    try:
        return list(payload)
    except TypeError as exc:
        raise RemoteServiceError(f"Unexpected SGS payload type: {type(payload).__name__}") from exc


def _parse_points(raw_values: Any, *, index_id: int) -> List[IndexSeriesPoint]:
    points: List[IndexSeriesPoint] = []
    for item in _as_list(raw_values):
        try:
            points.append(IndexSeriesPoint.from_remote(item))
        except MalformedPayloadError as exc:
            logger.warning("Malformed value in series %s: %s", index_id, exc)
            raise RemoteServiceError(f"Malformed series value for index {index_id}: {exc}") from exc
    return points


__all__ = ["IndexClient", "GatewayFactory"]
