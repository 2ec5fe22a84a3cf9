from __future__ import annotations

from typing import List, Optional

import structlog
from bs4 import Tag

from .models import NewsItem
from .queries import QuerySet

SITE_ORIGIN = "https://www.corriere.it"
MAX_NEWS_ITEMS = 20

logger = structlog.get_logger(__name__)


def normalize_url(href: str, origin: str = SITE_ORIGIN) -> str:
    """Prefix site-relative hrefs with the origin. Empty and absolute hrefs are returned as-is."""
    if href and not href.startswith("http"):
        return f"{origin}{href}"
    return href


def _text(element: Tag) -> str:
    return element.get_text(" ").strip()


def extract_article(element: Tag, queries: QuerySet, *, origin: str = SITE_ORIGIN) -> Optional[NewsItem]:
    """
    Build a NewsItem from one article fragment.

    Only the first match of each query inside the fragment is used. Returns None when the
    fragment has no title element or the title text is empty.
    """
    title_el = queries.title.select_one(element)
    if title_el is None:
        return None

    title = _text(title_el)
    anchor = queries.anchor.select_one(title_el)
    href = (anchor.get("href") if anchor is not None else None) or ""
    link = normalize_url(href, origin)

    description = ""
    summary = queries.summary.select_one(element)
    if summary is not None:
        description = _text(summary)

    image_url = None
    img = queries.image.select_one(element)
    if img is not None:
        # data-src holds the real URL on lazily loaded images; src only when it is absent
        src = img.get("data-src")
        if src is None:
            src = img.get("src")
        if src:
            image_url = normalize_url(src, origin)
        if not description:
            description = img.get("alt") or ""

    if not title:
        return None

    return NewsItem(
        title=title,
        description=description,
        link=link,
        image_url=image_url,
    )


def extract_articles(
    document: Tag,
    queries: QuerySet,
    *,
    limit: int = MAX_NEWS_ITEMS,
    origin: str = SITE_ORIGIN,
) -> List[NewsItem]:
    """
    Collect news items from the page body in document order.

    A page without the body container yields an empty list. Iteration stops as soon as
    `limit` items (never more than MAX_NEWS_ITEMS) have been collected.
    """
    limit = min(limit, MAX_NEWS_ITEMS)
    items: List[NewsItem] = []
    if limit <= 0:
        return items

    section = queries.body.select_one(document)
    if section is None:
        logger.debug("body_container_missing")
        return items

    for element in queries.article.iselect(section):
        item = extract_article(element, queries, origin=origin)
        if item is None:
            continue
        items.append(item)
        if len(items) >= limit:
            break
    return items
