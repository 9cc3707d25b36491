"""Derive month/year columns and day spans from harvested records."""

from __future__ import annotations

from typing import Iterable

import structlog

from pubtimeline.models import ArticleRecord, FeatureRow
from .dates import day_distance, month_year, parse_full

logger = structlog.get_logger(__name__)

CSV_HEADER = (
    "title",
    "doi",
    "received month",
    "received year",
    "accepted month",
    "accepted year",
    "published month",
    "published year",
    "issued month",
    "issued year",
    "received - accepted",
    "accepted - published",
    "published - issued",
)


class FeatureCalculator:
    """Turns an ``ArticleRecord`` into a ``FeatureRow``; holds no state."""

    def calculate(self, record: ArticleRecord) -> FeatureRow:
        time = record.time
        received_month, received_year = month_year(time.received)
        accepted_month, accepted_year = month_year(time.accepted)
        published_month, published_year = month_year(time.published)
        issued_month, issued_year = month_year(time.issuedate)
        return FeatureRow(
            title=record.title,
            doi=record.doi,
            received_month=received_month,
            received_year=received_year,
            accepted_month=accepted_month,
            accepted_year=accepted_year,
            published_month=published_month,
            published_year=published_year,
            issued_month=issued_month,
            issued_year=issued_year,
            received_to_accepted=_span(time.received, time.accepted),
            accepted_to_published=_span(time.accepted, time.published),
            published_to_issued=_span(time.published, time.issuedate),
        )

    def calculate_many(self, records: Iterable[ArticleRecord]) -> list[FeatureRow]:
        rows = [self.calculate(record) for record in records]
        logger.info("features.calculated", rows=len(rows))
        return rows


def _span(start_raw: str, end_raw: str) -> int | None:
    start = parse_full(start_raw)
    end = parse_full(end_raw)
    if start is None or end is None:
        return None
    return day_distance(start, end)
