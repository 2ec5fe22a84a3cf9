from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping

import soupsieve
from soupsieve import SoupSieve

from .exceptions import ConfigurationError

# Homepage markup as served by corriere.it
DEFAULT_PATTERNS: Mapping[str, str] = {
    "article": ".bck-media-news",
    "title": "h4.title-art-hp",
    "anchor": "a",
    "summary": "p[class^='subtitle']",
    "image": "img.is_full_image",
    "body": ".body-hp",
}


@dataclass(frozen=True)
class QuerySet:
    """Compiled selectors shared by every extraction in the process."""
    article: SoupSieve
    title: SoupSieve
    anchor: SoupSieve
    summary: SoupSieve
    image: SoupSieve
    body: SoupSieve


def compile_queries(patterns: Mapping[str, str] = DEFAULT_PATTERNS) -> QuerySet:
    """
    Compile all six selectors.

    Raises ConfigurationError naming the first query that is missing or does not compile.
    """
    compiled = {}
    for name in ("article", "title", "anchor", "summary", "image", "body"):
        pattern = patterns.get(name)
        if not pattern:
            raise ConfigurationError(name, "no pattern given")
        try:
            compiled[name] = soupsieve.compile(pattern)
        except soupsieve.SelectorSyntaxError as e:
            raise ConfigurationError(name, str(e)) from e
    return QuerySet(**compiled)


@lru_cache()
def get_query_set() -> QuerySet:
    return compile_queries()
