"""Metric fetch-and-normalize pipeline."""

from .combiner import combine
from .fetcher import MetricFetcher
from .models import Dimension, MetricQuery, PairedSample, Sample

__all__ = [
    "Dimension",
    "MetricFetcher",
    "MetricQuery",
    "PairedSample",
    "Sample",
    "combine",
]
