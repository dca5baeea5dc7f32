"""Newsletter generation endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from newsletter_api.config import APIConfig
from newsletter_api.dependencies import get_app_config, get_db_session
from newsletter_api.models.newsletter import GenerateNewsletterRequest, GenerateNewsletterResponse
from newsletter_api.services.article_service import ArticleService
from newsletter_api.services.newsletter_service import NewsletterService

router = APIRouter(prefix="/api", tags=["newsletter"])


def get_newsletter_service(
    session: Annotated[Session, Depends(get_db_session)],
    config: Annotated[APIConfig, Depends(get_app_config)],
) -> NewsletterService:
    """Dependency to get newsletter service."""
    return NewsletterService(config.webhook, ArticleService(session))


@router.post("/generate-newsletter", response_model=GenerateNewsletterResponse)
def generate_newsletter(
    request: GenerateNewsletterRequest,
    service: Annotated[NewsletterService, Depends(get_newsletter_service)],
):
    """Forward the selected articles to the newsletter webhook.

    Empty selections and ids that do not belong to the client are rejected
    with 400 before anything is sent downstream.
    """
    count = service.generate(request)
    return GenerateNewsletterResponse(
        message=f"Newsletter generation started with {count} articles",
        article_count=count,
    )
