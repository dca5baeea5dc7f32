"""Article API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from newsletter_api.dependencies import get_db_session
from newsletter_api.models.article import (
    ArticleCreate,
    ArticleCreatedResponse,
    ArticleListResponse,
    ArticleResponse,
)
from newsletter_api.services.article_service import ArticleService

router = APIRouter(prefix="/api/articles", tags=["articles"])


def get_article_service(session: Annotated[Session, Depends(get_db_session)]) -> ArticleService:
    """Dependency to get article service."""
    return ArticleService(session)


@router.post("", response_model=ArticleCreatedResponse, status_code=201)
def create_article(
    payload: ArticleCreate,
    service: Annotated[ArticleService, Depends(get_article_service)],
):
    """Receive an article from the content automation.

    The row is stamped with the current time and starts out unselected.
    Store failures return 500 with a fixed message; the automation is
    responsible for retrying.
    """
    article = service.create_article(payload)
    return ArticleCreatedResponse(article=ArticleResponse.model_validate(article))


@router.get("/{client_id}", response_model=ArticleListResponse)
def list_articles(
    client_id: str,
    service: Annotated[ArticleService, Depends(get_article_service)],
):
    """List every article for a client, newest first.

    An unknown client simply has no articles.
    """
    articles = service.list_articles(client_id)
    return ArticleListResponse(
        articles=[ArticleResponse.model_validate(a) for a in articles],
        client_id=client_id,
    )
