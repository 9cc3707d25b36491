"""Sequential batch harvesting of article pages."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

import structlog

from pubtimeline.models import ArticleRecord
from .documents import PageLoader
from .layouts import (
    LOAD_FAILED,
    ExtractionFailure,
    ExtractionOutcome,
    ExtractionSuccess,
    LayoutResolver,
)

logger = structlog.get_logger(__name__)


@dataclass(slots=True)
class BatchResult:
    successes: list[ArticleRecord] = field(default_factory=list)
    failures: list[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.successes) + len(self.failures)


class BatchRunner:
    """Loads and resolves every link in order; a failed page never stops the batch."""

    def __init__(
        self,
        loader: PageLoader,
        resolver: LayoutResolver | None = None,
        *,
        on_outcome: Callable[[ExtractionOutcome], None] | None = None,
    ) -> None:
        self._loader = loader
        self._resolver = resolver or LayoutResolver()
        self._on_outcome = on_outcome

    async def run(self, links: Iterable[str]) -> BatchResult:
        result = BatchResult()
        for link in links:
            outcome = await self.process(link)
            if isinstance(outcome, ExtractionSuccess):
                result.successes.append(outcome.record)
                logger.info("harvest.success", link=link, layout=outcome.layout)
            else:
                result.failures.append(outcome.link)
                logger.info("harvest.failure", link=link, reason=outcome.reason)
            if self._on_outcome is not None:
                self._on_outcome(outcome)
        logger.info(
            "harvest.summary",
            total=result.total,
            succeeded=len(result.successes),
            failed=len(result.failures),
        )
        return result

    async def process(self, link: str) -> ExtractionOutcome:
        document = await self._loader.load(link)
        if document is None:
            return ExtractionFailure(link=link, reason=LOAD_FAILED)
        return self._resolver.resolve(document, link)
