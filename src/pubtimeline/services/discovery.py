"""Collect article links by walking a paged listing."""

from __future__ import annotations

import structlog

from .documents import PageLoader

logger = structlog.get_logger(__name__)

ARTICLE_LINK_SELECTOR = "h3[itemprop='name headline'] a"
NEXT_PAGE_SELECTOR = ".inline-group-item[data-page='next'] a"


class ListingCrawler:
    def __init__(
        self,
        loader: PageLoader,
        *,
        link_selector: str = ARTICLE_LINK_SELECTOR,
        next_selector: str = NEXT_PAGE_SELECTOR,
    ) -> None:
        self._loader = loader
        self._link_selector = link_selector
        self._next_selector = next_selector

    async def collect(self, start_url: str, pages: int) -> list[str]:
        """Gather links from up to ``pages`` listing pages, in page order.

        Stops early when a page cannot be loaded or has no next-page link.
        """
        links: list[str] = []
        url = start_url
        for number in range(1, pages + 1):
            document = await self._loader.load(url)
            if document is None:
                logger.warning("listing.page_failed", page=number, url=url)
                break
            anchors = document.query_selector_all(self._link_selector)
            found = [href for href in (document.attribute(a, "href") for a in anchors) if href]
            links.extend(found)
            logger.info("listing.page", page=number, links=len(found))

            next_anchor = document.query_selector(self._next_selector)
            next_url = document.attribute(next_anchor, "href") if next_anchor is not None else ""
            if not next_url:
                break
            url = next_url
        return links
