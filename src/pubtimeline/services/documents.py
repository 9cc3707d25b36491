"""Loaded-page query capability and the HTTP loader that produces it."""

from __future__ import annotations

from typing import Any, Protocol
from urllib.parse import urljoin

import httpx
import structlog
from bs4 import BeautifulSoup, Tag

from pubtimeline.settings import Settings
from pubtimeline.utils import normalize_whitespace

logger = structlog.get_logger(__name__)

ElementHandle = Any


class Document(Protocol):
    """Read-only selector queries against a loaded page."""

    url: str

    def query_selector(
        self, selector: str, within: ElementHandle | None = None
    ) -> ElementHandle | None:
        ...

    def query_selector_all(
        self, selector: str, within: ElementHandle | None = None
    ) -> list[ElementHandle]:
        ...

    def text(self, element: ElementHandle) -> str:
        ...

    def html(self, element: ElementHandle) -> str:
        ...

    def attribute(self, element: ElementHandle, name: str) -> str:
        ...


class PageLoader(Protocol):
    """Navigates to a URL and hands back its document, or ``None`` on failure."""

    async def load(self, url: str) -> Document | None:
        ...


class SoupDocument:
    """``Document`` backed by BeautifulSoup CSS selectors."""

    def __init__(self, markup: str, url: str = "") -> None:
        self.url = url
        self._soup = BeautifulSoup(markup, "html.parser")

    def query_selector(self, selector: str, within: Tag | None = None) -> Tag | None:
        root = self._soup if within is None else within
        return root.select_one(selector)

    def query_selector_all(self, selector: str, within: Tag | None = None) -> list[Tag]:
        root = self._soup if within is None else within
        return list(root.select(selector))

    def text(self, element: Tag) -> str:
        return normalize_whitespace(element.get_text())

    def html(self, element: Tag) -> str:
        return element.decode_contents().strip()

    def attribute(self, element: Tag, name: str) -> str:
        value = element.get(name)
        if value is None:
            return ""
        if isinstance(value, list):
            value = " ".join(value)
        value = value.strip()
        # Browsers expose href resolved against the page URL.
        if name == "href" and value and self.url:
            return urljoin(self.url, value)
        return value


class HttpPageLoader:
    """Fetches a page once with httpx and parses it into a ``SoupDocument``."""

    name = "http"

    def __init__(self, client: httpx.AsyncClient, settings: Settings) -> None:
        self._client = client
        self._settings = settings

    async def load(self, url: str) -> SoupDocument | None:
        logger.debug("loader.fetch", url=url)
        try:
            response = await self._client.get(
                url,
                headers={"User-Agent": self._settings.user_agent},
                timeout=self._settings.request_timeout,
                follow_redirects=True,
            )
            response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("loader.error", url=url, error=str(exc))
            return None
        return SoupDocument(response.text, url=str(response.url))
