"""Core data models shared by extraction and feature derivation."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class LifecycleTimestamps(BaseModel):
    """Raw date strings for the four publication steps; empty means absent."""

    model_config = ConfigDict(frozen=True)

    received: str = ""
    accepted: str = ""
    published: str = ""
    issuedate: str = ""


class ArticleRecord(BaseModel):
    """Metadata harvested from a single article page."""

    model_config = ConfigDict(frozen=True)

    title: str
    link: str
    doi: str = ""
    time: LifecycleTimestamps = Field(default_factory=LifecycleTimestamps)


class FeatureRow(BaseModel):
    """Tabular projection of an article record.

    Deltas are whole days between adjacent lifecycle steps. ``None`` marks a
    delta that could not be computed because an endpoint is missing or
    unparseable; ``0`` is a real value (including collapsed negative spans).
    """

    model_config = ConfigDict(frozen=True)

    title: str
    doi: str
    received_month: str = ""
    received_year: str = ""
    accepted_month: str = ""
    accepted_year: str = ""
    published_month: str = ""
    published_year: str = ""
    issued_month: str = ""
    issued_year: str = ""
    received_to_accepted: int | None = None
    accepted_to_published: int | None = None
    published_to_issued: int | None = None

    def cells(self) -> list[str]:
        """Flatten into column order; uncomputable deltas become empty cells."""
        deltas = (
            self.received_to_accepted,
            self.accepted_to_published,
            self.published_to_issued,
        )
        return [
            self.title,
            self.doi,
            self.received_month,
            self.received_year,
            self.accepted_month,
            self.accepted_year,
            self.published_month,
            self.published_year,
            self.issued_month,
            self.issued_year,
            *("" if value is None else str(value) for value in deltas),
        ]
