"""Service abstractions for the pubtimeline application."""

from .dates import MissingDateError, day_distance, month_year, parse_full
from .discovery import ListingCrawler
from .documents import Document, HttpPageLoader, PageLoader, SoupDocument
from .features import CSV_HEADER, FeatureCalculator
from .harvest import BatchResult, BatchRunner
from .layouts import (
    CURRENT_LAYOUT,
    DEFAULT_LAYOUTS,
    LEGACY_LAYOUT,
    ExtractedFields,
    ExtractionFailure,
    ExtractionOutcome,
    ExtractionSuccess,
    LayoutResolver,
    LayoutStrategy,
    SelectorLayout,
)

__all__ = [
    "MissingDateError",
    "day_distance",
    "month_year",
    "parse_full",
    "ListingCrawler",
    "Document",
    "PageLoader",
    "SoupDocument",
    "HttpPageLoader",
    "CSV_HEADER",
    "FeatureCalculator",
    "BatchResult",
    "BatchRunner",
    "CURRENT_LAYOUT",
    "LEGACY_LAYOUT",
    "DEFAULT_LAYOUTS",
    "ExtractedFields",
    "ExtractionFailure",
    "ExtractionOutcome",
    "ExtractionSuccess",
    "LayoutResolver",
    "LayoutStrategy",
    "SelectorLayout",
]
