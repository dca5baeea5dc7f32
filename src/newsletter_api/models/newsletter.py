"""Newsletter generation Pydantic models."""

from pydantic import BaseModel, Field


class GenerateNewsletterRequest(BaseModel):
    client_id: str | None = None
    selected_article_ids: list[int] = Field(default_factory=list)
    webhook_url: str | None = None


class GenerateNewsletterResponse(BaseModel):
    success: bool = True
    message: str
    article_count: int
