from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional, Sequence

import structlog
from bs4 import BeautifulSoup, ParserRejectedMarkup

from .exceptions import UpstreamFetchError
from .extractor import MAX_NEWS_ITEMS, SITE_ORIGIN, extract_articles
from .fetcher import fetch_html
from .models import NewsItem, NewsResponse
from .queries import QuerySet, get_query_set

SOURCE_URL = "https://www.corriere.it"

logger = structlog.get_logger(__name__)


def assemble_response(items: Sequence[NewsItem], error: Optional[str] = None) -> NewsResponse:
    return NewsResponse(
        scraped_at=datetime.now(timezone.utc),
        news=list(items),
        error=error,
    )


def extract(
    document_text: str,
    *,
    queries: Optional[QuerySet] = None,
    limit: int = MAX_NEWS_ITEMS,
    origin: str = SITE_ORIGIN,
) -> NewsResponse:
    """
    Parse a homepage and return its news items wrapped in a NewsResponse.

    Pure apart from the timestamp: the same text always yields the same items.
    """
    queries = queries or get_query_set()
    try:
        document = BeautifulSoup(document_text, "html.parser")
    except ParserRejectedMarkup as e:
        logger.warning("parse_failed", error=str(e))
        return assemble_response([], error=f"Failed to parse document: {e}")

    items = extract_articles(document, queries, limit=limit, origin=origin)
    return assemble_response(items)


@dataclass
class FetchOptions:
    url: str = SOURCE_URL
    origin: str = SITE_ORIGIN
    limit: int = MAX_NEWS_ITEMS
    timeout: float = 10.0


class NewsScraper:
    """
    High-level API: fetch the homepage and return a NewsResponse.

    Pipeline: fetch → parse → locate body → extract articles (first 20) → assemble
    """

    def __init__(
        self,
        *,
        url: str = SOURCE_URL,
        origin: str = SITE_ORIGIN,
        limit: int = MAX_NEWS_ITEMS,
        timeout: float = 10.0,
        queries: Optional[QuerySet] = None,
    ) -> None:
        self.options = FetchOptions(url=url, origin=origin, limit=limit, timeout=timeout)
        # Compiled up front so a broken selector fails at startup, not on a request
        self.queries = queries or get_query_set()

    async def fetch(self) -> NewsResponse:
        try:
            text = await fetch_html(self.options.url, timeout=self.options.timeout)
        except UpstreamFetchError as e:
            return assemble_response([], error=str(e))

        response = extract(
            text,
            queries=self.queries,
            limit=self.options.limit,
            origin=self.options.origin,
        )
        logger.info("news_extracted", url=self.options.url, count=len(response.news))
        return response

    async def fetch_items(self) -> List[NewsItem]:
        """Like fetch(), but raises UpstreamFetchError instead of returning an error response."""
        response = await self.fetch()
        if response.error:
            raise UpstreamFetchError(response.error)
        return response.news
