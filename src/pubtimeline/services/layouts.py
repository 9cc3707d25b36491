"""Layout strategies that recognize article page structures and read their fields."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol, Union

import structlog

from pubtimeline.models import ArticleRecord, LifecycleTimestamps
from .documents import Document, ElementHandle

logger = structlog.get_logger(__name__)

STRUCTURE_UNRECOGNIZED = "structure_unrecognized"
LOAD_FAILED = "load_failed"

# Heading text on the page -> field on ExtractedFields. Matching is exact.
FIELD_LABELS = {
    "Received": "received",
    "Accepted": "accepted",
    "Published": "published",
    "Issue Date": "issuedate",
    "DOI": "doi",
}


@dataclass(slots=True)
class ExtractedFields:
    """Whatever a matched layout managed to read; empty strings are absent."""

    title: str
    doi: str = ""
    received: str = ""
    accepted: str = ""
    published: str = ""
    issuedate: str = ""

    def to_record(self, link: str) -> ArticleRecord:
        return ArticleRecord(
            title=self.title,
            link=link,
            doi=self.doi,
            time=LifecycleTimestamps(
                received=self.received,
                accepted=self.accepted,
                published=self.published,
                issuedate=self.issuedate,
            ),
        )


@dataclass(slots=True)
class ExtractionSuccess:
    record: ArticleRecord
    layout: str


@dataclass(slots=True)
class ExtractionFailure:
    link: str
    reason: str


ExtractionOutcome = Union[ExtractionSuccess, ExtractionFailure]


class LayoutStrategy(Protocol):
    """One known page structure."""

    name: str

    def matches(self, document: Document) -> bool:
        ...

    def extract(self, document: Document) -> ExtractedFields:
        ...


@dataclass(frozen=True, slots=True)
class SelectorLayout:
    """Layout described entirely by CSS selectors.

    ``field_selector`` finds the repeated bibliographic containers; inside each
    one ``label_selector`` holds the heading and ``date_selector`` or
    ``doi_selector`` the value. Layouts that print the DOI outside those
    containers use ``doi_heading_selector``/``doi_link_selector`` instead.
    """

    name: str
    title_selector: str
    field_selector: str
    label_selector: str
    date_selector: str
    doi_selector: str | None = None
    doi_heading_selector: str | None = None
    doi_link_selector: str | None = None
    title_as_html: bool = False

    def matches(self, document: Document) -> bool:
        return document.query_selector(self.title_selector) is not None

    def extract(self, document: Document) -> ExtractedFields:
        title_node = document.query_selector(self.title_selector)
        fields = ExtractedFields(title=self._read_title(document, title_node))
        for container in document.query_selector_all(self.field_selector):
            label_node = document.query_selector(self.label_selector, within=container)
            if label_node is None:
                continue
            slot = FIELD_LABELS.get(document.text(label_node))
            if slot is None:
                continue
            value = self._read_value(document, container, slot)
            if value:
                setattr(fields, slot, value)
        if not fields.doi:
            fields.doi = self._read_document_doi(document)
        return fields

    def _read_title(self, document: Document, node: ElementHandle | None) -> str:
        if node is None:
            return ""
        return document.html(node) if self.title_as_html else document.text(node)

    def _read_value(self, document: Document, container: ElementHandle, slot: str) -> str:
        if slot == "doi":
            if self.doi_selector is None:
                return ""
            node = document.query_selector(self.doi_selector, within=container)
            return document.attribute(node, "href") if node is not None else ""
        node = document.query_selector(self.date_selector, within=container)
        return document.html(node) if node is not None else ""

    def _read_document_doi(self, document: Document) -> str:
        if not self.doi_heading_selector or not self.doi_link_selector:
            return ""
        heading = document.query_selector(self.doi_heading_selector)
        if heading is None or document.text(heading) != "DOI":
            return ""
        link = document.query_selector(self.doi_link_selector)
        return document.attribute(link, "href") if link is not None else ""


CURRENT_LAYOUT = SelectorLayout(
    name="current",
    title_selector=".c-article-title",
    field_selector=(
        ".c-bibliographic-information div ul li.c-bibliographic-information__list-item"
    ),
    label_selector="h4",
    date_selector=".c-bibliographic-information__value time",
    doi_selector=".c-bibliographic-information__value a",
)

LEGACY_LAYOUT = SelectorLayout(
    name="legacy",
    title_selector="h1[itemprop='name headline']",
    field_selector="#article-info-content .grid div",
    label_selector="h4",
    date_selector="p time",
    doi_heading_selector="#article-info-content h3.strong.mb4 abbr",
    doi_link_selector="#article-info-content p.standard-space-below.text14 a",
    title_as_html=True,
)

DEFAULT_LAYOUTS: tuple[LayoutStrategy, ...] = (CURRENT_LAYOUT, LEGACY_LAYOUT)


class LayoutResolver:
    """Tries layouts in priority order; the first whose title resolves wins."""

    def __init__(self, layouts: Iterable[LayoutStrategy] | None = None) -> None:
        self._layouts = list(DEFAULT_LAYOUTS if layouts is None else layouts)
        if not self._layouts:
            raise ValueError("LayoutResolver needs at least one layout")

    @property
    def layouts(self) -> list[LayoutStrategy]:
        return list(self._layouts)

    def match(self, document: Document) -> LayoutStrategy | None:
        for layout in self._layouts:
            if layout.matches(document):
                return layout
        return None

    def resolve(self, document: Document, link: str) -> ExtractionOutcome:
        layout = self.match(document)
        if layout is None:
            logger.info("layout.miss", link=link)
            return ExtractionFailure(link=link, reason=STRUCTURE_UNRECOGNIZED)
        logger.debug("layout.match", link=link, layout=layout.name)
        record = layout.extract(document).to_record(link)
        return ExtractionSuccess(record=record, layout=layout.name)
