from dashboard_api.metrics.catalog import (
    OVERVIEW_ENDPOINTS,
    PAIRED_ENDPOINTS,
    SERIES_ENDPOINTS,
    MetricTemplate,
    PairedSeriesEndpoint,
    SeriesEndpoint,
)
from dashboard_api.metrics.transforms import to_megabytes_text

__all__ = [
    "MetricTemplate",
    "OVERVIEW_ENDPOINTS",
    "PAIRED_ENDPOINTS",
    "PairedSeriesEndpoint",
    "SERIES_ENDPOINTS",
    "SeriesEndpoint",
    "to_megabytes_text",
]
