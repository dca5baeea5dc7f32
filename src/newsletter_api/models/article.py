"""Article Pydantic models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_serializer

from common.datetime import ensure_utc


class ArticleCreate(BaseModel):
    """Article payload posted by the content automation.

    client_id is optional here so a missing value reaches the store and is
    reported as a persistence failure.
    """

    client_id: str | None = None
    headline: str | None = None
    summary: str | None = None
    key_takeaway: str | None = None
    tldr: str | None = None
    title: str | None = None
    category: str | None = None
    url: str | None = None
    image_prompt: str | None = None


class ArticleResponse(BaseModel):
    """Stored article row."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    client_id: str
    headline: str | None = None
    title: str | None = None
    summary: str | None = None
    key_takeaway: str | None = None
    tldr: str | None = None
    category: str | None = None
    url: str | None = None
    image_prompt: str | None = None
    created_time: datetime
    is_selected: bool = False

    @field_serializer("created_time")
    def serialize_created_time(self, value: datetime) -> str:
        return ensure_utc(value).isoformat()


class ArticleCreatedResponse(BaseModel):
    success: bool = True
    message: str = "Article saved successfully"
    article: ArticleResponse


class ArticleListResponse(BaseModel):
    """All articles for one client, newest first."""

    success: bool = True
    articles: list[ArticleResponse]
    client_id: str
