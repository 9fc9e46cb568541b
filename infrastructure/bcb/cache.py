from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Union

from .models import IndexSeriesPoint

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EmptyCache:
    """No value fetched yet."""


@dataclass(frozen=True)
class PopulatedCache:
    point: IndexSeriesPoint


CacheState = Union[EmptyCache, PopulatedCache]


class LatestValueCache:
    """Single-slot cache for the latest published point.

    There is no TTL: the slot is replaced only when a read asks for a refresh.
    Not thread-safe, the owning client is expected to have one caller.
    """

    def __init__(self) -> None:
        self._state: CacheState = EmptyCache()

    @property
    def state(self) -> CacheState:
        return self._state

    @property
    def is_populated(self) -> bool:
        return isinstance(self._state, PopulatedCache)

    def read(self, loader: Callable[[], IndexSeriesPoint], *, refresh: bool = False) -> IndexSeriesPoint:
        """Return the cached point, calling ``loader`` on a miss or a refresh.

        If ``loader`` raises, the previous state is kept.
        """

        state = self._state
        if isinstance(state, PopulatedCache) and not refresh:
            logger.debug("latest value cache hit")
            return state.point
        point = loader()
        self._state = PopulatedCache(point)
        return point


__all__ = ["CacheState", "EmptyCache", "PopulatedCache", "LatestValueCache"]
