"""SOAP gateway to the BCB SGS webservice built on ``zeep``.

The WSDL is fetched once, when the gateway is created. Transport concerns
(User-Agent, timeout) live in the ``requests`` session handed to ``zeep``; no
retries are configured at any level.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Optional, Sequence

import requests
from zeep import Client
from zeep.exceptions import Error as ZeepError
from zeep.transports import Transport

from infrastructure.http.session import build_session
from shared.config import settings
from shared.errors import ConnectionError, RemoteServiceError

logger = logging.getLogger(__name__)

LATEST_VALUE_OPERATION = "getUltimoValorVO"
SERIES_VALUES_OPERATION = "getValoresSeriesVO"

_REMOTE_ERRORS = (requests.RequestException, ZeepError, OSError)
# zeep raises TypeError when the arguments do not match the operation signature
_CALL_ERRORS = _REMOTE_ERRORS + (TypeError,)

ClientFactory = Callable[..., Any]


class SoapIndexGateway:
    """Dedicated SOAP client for the SGS ``FachadaWSSGS`` service."""

    def __init__(
        self,
        wsdl_url: Optional[str] = None,
        *,
        session: Optional[requests.Session] = None,
        user_agent: Optional[str] = None,
        timeout: Optional[float] = None,
        client_factory: ClientFactory = Client,
    ) -> None:
        self._wsdl_url = wsdl_url or settings.BCB_WSDL_URL
        timeout_value = float(timeout or settings.BCB_TIMEOUT)
        agent = user_agent or settings.USER_AGENT
        self._session = session or build_session(agent, timeout=timeout_value)
        transport = Transport(
            session=self._session,
            timeout=timeout_value,
            operation_timeout=timeout_value,
        )
        # Transport overwrites the session User-Agent with its own
        self._session.headers["User-Agent"] = agent
        try:
            self._client = client_factory(self._wsdl_url, transport=transport)
        except _REMOTE_ERRORS as exc:
            logger.warning("Could not load WSDL %s: %s", self._wsdl_url, exc)
            raise ConnectionError(f"Could not load SGS service description from {self._wsdl_url}") from exc
        logger.debug("SGS WSDL loaded from %s", self._wsdl_url)

    @property
    def wsdl_url(self) -> str:
        return self._wsdl_url

    # Public API -----------------------------------------------------------
    def latest_value(self, index_id: int) -> Any:
        return self._invoke(LATEST_VALUE_OPERATION, int(index_id))

    def series_values(self, index_ids: Sequence[int], start: str, end: str) -> Any:
        return self._invoke(SERIES_VALUES_OPERATION, [int(i) for i in index_ids], start, end)

    def call(self, operation: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        return self._invoke(operation, **dict(params or {}))

    # Internal helpers ----------------------------------------------------
    def _invoke(self, operation: str, *args: Any, **kwargs: Any) -> Any:
        try:
            proxy = self._client.service[operation]
        except (AttributeError, KeyError) as exc:
            raise RemoteServiceError(f"Operation {operation!r} is not published by the SGS service") from exc
        logger.debug("SGS call %s args=%s kwargs=%s", operation, args, kwargs)
        try:
            return proxy(*args, **kwargs)
        except _CALL_ERRORS as exc:
            logger.warning("SGS %s failed: %s", operation, exc)
            raise RemoteServiceError(f"SGS operation {operation} failed: {exc}") from exc


__all__ = ["SoapIndexGateway", "LATEST_VALUE_OPERATION", "SERIES_VALUES_OPERATION"]
