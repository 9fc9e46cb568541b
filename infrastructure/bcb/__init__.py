"""Client for the BCB SGS economic indices webservice."""

from .accumulation import (
    accumulated_index,
    accumulated_percentage,
    first_of_month,
    format_service_date,
    twelve_month_window,
)
from .cache import EmptyCache, LatestValueCache, PopulatedCache
from .client import IndexClient
from .indices import IndexId, describe_index
from .models import IndexSeriesPoint
from .ports import IndexServiceGateway
from .soap import SoapIndexGateway

__all__ = [
    "IndexClient",
    "IndexId",
    "IndexSeriesPoint",
    "IndexServiceGateway",
    "SoapIndexGateway",
    "LatestValueCache",
    "EmptyCache",
    "PopulatedCache",
    "accumulated_index",
    "accumulated_percentage",
    "first_of_month",
    "format_service_date",
    "twelve_month_window",
    "describe_index",
]
