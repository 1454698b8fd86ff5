"""HTTP client for the American Presidency Project document archive."""

from __future__ import annotations

from typing import Collection, List, Optional, Protocol
from urllib.parse import urlsplit
import logging
import time

import httpx
from bs4 import BeautifulSoup

from ..core.errors import SourceUnavailable
from ..core.types import DocumentMarkup

LOGGER = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.presidency.ucsb.edu"
DEFAULT_CATALOG_PATH = (
    "/documents/presidential-documents-archive-guidebook/"
    "annual-messages-congress-the-state-the-union"
)


class DocumentSource(Protocol):
    """Anything that can list and fetch archived documents."""

    def list_document_ids(self, catalog_reference: Optional[str] = None) -> List[str]:
        ...

    def fetch(self, identifier: str) -> DocumentMarkup:
        ...


class PresidencyClient:
    """Minimal scraper for annual messages on presidency.ucsb.edu."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        catalog_path: str = DEFAULT_CATALOG_PATH,
        catalog_link_selector: str = "td a[href*='/documents/']",
        title_selector: str = ".diet-title a",
        date_selector: str = ".date-display-single",
        body_selector: str = ".field-docs-content p",
        excluded_ids: Collection[str] = (),
        timeout: float = 30.0,
        max_retries: int = 3,
        request_delay: float = 0.0,
        user_agent: str = "sotu-stats/0.1",
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._catalog_path = catalog_path
        self._catalog_link_selector = catalog_link_selector
        self._title_selector = title_selector
        self._date_selector = date_selector
        self._body_selector = body_selector
        self._excluded_ids = frozenset(self._normalize(identifier) for identifier in excluded_ids)
        self._max_retries = max(1, max_retries)
        self._request_delay = max(0.0, request_delay)
        self._client = httpx.Client(
            timeout=timeout,
            headers={"User-Agent": user_agent},
            follow_redirects=True,
            transport=transport,
        )

    # --- public API -----------------------------------------------------
    def list_document_ids(self, catalog_reference: Optional[str] = None) -> List[str]:
        """Return the document identifiers linked from the catalog page.

        Identifiers are site-relative paths. Duplicates are collapsed and the
        configured exclusions are removed; catalog order is kept.
        """

        html = self._request(catalog_reference or self._catalog_path)
        soup = BeautifulSoup(html, "html.parser")
        identifiers: List[str] = []
        seen = set()
        unmatched = set(self._excluded_ids)
        for link in soup.select(self._catalog_link_selector):
            href = (link.get("href") or "").strip()
            if not href:
                continue
            identifier = self._normalize(href)
            if identifier in seen:
                continue
            seen.add(identifier)
            if identifier in self._excluded_ids:
                unmatched.discard(identifier)
                LOGGER.info("Skipping excluded document %s", identifier)
                continue
            identifiers.append(identifier)
        for identifier in sorted(unmatched):
            LOGGER.warning("Excluded document %s is not listed in the catalog", identifier)
        if not identifiers:
            raise SourceUnavailable(f"Catalog {catalog_reference or self._catalog_path} lists no documents")
        LOGGER.info("Catalog lists %s documents", len(identifiers))
        return identifiers

    def fetch(self, identifier: str) -> DocumentMarkup:
        """Download one document and return its title, date and paragraphs."""

        html = self._request(identifier)
        soup = BeautifulSoup(html, "html.parser")
        title = soup.select_one(self._title_selector)
        date_node = soup.select_one(self._date_selector)
        paragraphs = [node.get_text() for node in soup.select(self._body_selector)]
        if title is None or date_node is None or not paragraphs:
            raise SourceUnavailable(
                f"Document {identifier} is missing title, date or body markup", identifier=identifier
            )
        return DocumentMarkup(
            identifier=identifier,
            title_text=title.get_text(" ", strip=True),
            date_text=date_node.get_text(" ", strip=True),
            paragraphs=tuple(paragraphs),
        )

    def close(self) -> None:
        """Close the underlying HTTP client."""

        self._client.close()

    def __enter__(self) -> "PresidencyClient":  # pragma: no cover - trivial
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # pragma: no cover - trivial
        self.close()

    # --- helpers --------------------------------------------------------
    @staticmethod
    def _normalize(reference: str) -> str:
        parts = urlsplit(reference.strip())
        path = "/" + parts.path.strip("/")
        return f"{path}?{parts.query}" if parts.query else path

    def _url(self, reference: str) -> str:
        if reference.startswith(("http://", "https://")):
            return reference
        if not reference.startswith("/"):
            reference = f"/{reference}"
        return f"{self._base_url}{reference}"

    def _request(self, reference: str) -> str:
        url = self._url(reference)
        last_exc: Optional[Exception] = None
        error_message: Optional[str] = None
        for attempt in range(1, self._max_retries + 1):
            if self._request_delay:
                time.sleep(self._request_delay)
            try:
                response = self._client.get(url)
                response.raise_for_status()
                return response.text
            except httpx.HTTPStatusError as exc:
                last_exc = exc
                status = exc.response.status_code
                LOGGER.warning(
                    "Archive returned status %s for %s (attempt %s/%s)", status, url, attempt, self._max_retries
                )
                error_message = f"The archive rejected {url} with status {status}"
                if status == 404:
                    break
            except httpx.HTTPError as exc:
                last_exc = exc
                error_message = None
                LOGGER.warning(
                    "HTTP error while requesting %s (attempt %s/%s): %s", url, attempt, self._max_retries, exc
                )
        raise SourceUnavailable(error_message or f"Failed to request {url}", identifier=reference) from last_exc


__all__ = ["DEFAULT_BASE_URL", "DEFAULT_CATALOG_PATH", "DocumentSource", "PresidencyClient"]
