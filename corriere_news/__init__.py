"""
corriere_news

Scrapes the corriere.it homepage and returns the headline articles as normalized news items.

Core ideas:
- Input: homepage HTML
- Process: parse → locate the page body → extract each article block (title, link, description, image)
- Output: NewsResponse with at most 20 NewsItem, in page order

Example
-------
import asyncio
from corriere_news import NewsScraper

scraper = NewsScraper(limit=5)
response = asyncio.run(scraper.fetch())

if response.error:
    print("fetch failed:", response.error)
for item in response.news:
    print(item.title, item.link)

The extraction step is usable on its own:

from corriere_news import extract

response = extract(open("homepage.html").read())
"""
from .models import NewsItem, NewsResponse
from .core import NewsScraper, assemble_response, extract
from .exceptions import ConfigurationError, CorriereNewsError, UpstreamFetchError

__all__ = [
    "NewsItem",
    "NewsResponse",
    "NewsScraper",
    "assemble_response",
    "extract",
    "ConfigurationError",
    "CorriereNewsError",
    "UpstreamFetchError",
]
