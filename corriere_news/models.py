from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class NewsItem:
    """
    One article extracted from the homepage.

    WARNING: Do not change fields lightly. The JSON rendering is what the frontend reads.
    """
    title: str
    description: str
    link: str
    image_url: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "link": self.link,
            "image_url": self.image_url,
        }


@dataclass
class NewsResponse:
    scraped_at: datetime
    news: List[NewsItem] = field(default_factory=list)
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "scraped_at": self.scraped_at.isoformat(),
            "news": [item.to_dict() for item in self.news],
            "error": self.error,
        }
