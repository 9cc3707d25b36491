"""Serializers for harvested records, failure lists and feature tables."""

from __future__ import annotations

import csv
import io
import json
from typing import Iterable

from pydantic import TypeAdapter

from pubtimeline.models import ArticleRecord, FeatureRow
from pubtimeline.services.features import CSV_HEADER

_RECORD_LIST = TypeAdapter(list[ArticleRecord])


def export_records_json(records: Iterable[ArticleRecord]) -> str:
    payload = [record.model_dump() for record in records]
    return json.dumps(payload, indent=2, ensure_ascii=False)


def load_records_json(content: str) -> list[ArticleRecord]:
    """Parse a records file; raises ``pydantic.ValidationError`` on bad input."""
    return _RECORD_LIST.validate_json(content)


def export_link_list(links: Iterable[str]) -> str:
    return "\n".join(links)


def export_feature_csv(rows: Iterable[FeatureRow]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, delimiter=";", lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for row in rows:
        writer.writerow(row.cells())
    return buffer.getvalue()
