"""Data models for the dashboard."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from common.datetime import parse_datetime


@dataclass(frozen=True)
class DashboardArticle:
    """Article as displayed on a dashboard card."""
    id: int
    headline: str
    summary: Optional[str] = None
    key_takeaway: Optional[str] = None
    tldr: Optional[str] = None
    category: Optional[str] = None
    url: Optional[str] = None
    created_time: Optional[datetime] = None

    @classmethod
    def from_api(cls, record: dict[str, Any]) -> "DashboardArticle":
        """Map a stored article record from the listing endpoint.

        Raises:
            KeyError: If the record has no id
        """
        return cls(
            id=record["id"],
            headline=record.get("headline") or "",
            summary=record.get("summary"),
            key_takeaway=record.get("key_takeaway"),
            tldr=record.get("tldr"),
            category=record.get("category"),
            url=record.get("url"),
            created_time=parse_datetime(record.get("created_time")),
        )


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of a generate action, as shown to the user."""
    submitted: bool
    alert: str
    article_count: int = 0
