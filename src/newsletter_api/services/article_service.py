"""Article data access service."""

import logging
from datetime import datetime
from typing import Callable, Iterable

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from common.datetime import utc_now
from newsletter_api.db.models import Article
from newsletter_api.errors import StoreError
from newsletter_api.models.article import ArticleCreate

logger = logging.getLogger(__name__)

SAVE_FAILED_MESSAGE = "Failed to save article"
FETCH_FAILED_MESSAGE = "Failed to fetch articles"


class ArticleService:
    """Service for storing and reading curated articles."""

    def __init__(self, session: Session, clock: Callable[[], datetime] = utc_now):
        self.session = session
        self.clock = clock

    def create_article(self, payload: ArticleCreate) -> Article:
        """Insert one article row.

        The creation time is stamped here and the row always starts out
        unselected. Any store failure rolls the insert back.

        Args:
            payload: Article fields posted by the automation

        Returns:
            The stored Article with its store-assigned id

        Raises:
            StoreError: If the store rejects the row
        """
        article = Article(
            **payload.model_dump(),
            created_time=self.clock(),
            is_selected=False,
        )
        try:
            self.session.add(article)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error("Database error saving article for client %s: %s", payload.client_id, e)
            raise StoreError(SAVE_FAILED_MESSAGE) from e

        logger.info("Article saved for client %s: %s", article.client_id, article.headline)
        return article

    def list_articles(self, client_id: str) -> list[Article]:
        """List all articles for a client, most recent first.

        Raises:
            StoreError: If the query fails
        """
        stmt = (
            select(Article)
            .where(Article.client_id == client_id)
            .order_by(Article.created_time.desc(), Article.id.desc())
        )
        try:
            return list(self.session.scalars(stmt))
        except SQLAlchemyError as e:
            logger.error("Database error fetching articles for client %s: %s", client_id, e)
            raise StoreError(FETCH_FAILED_MESSAGE) from e

    def get_articles(self, client_id: str, article_ids: Iterable[int]) -> dict[int, Article]:
        """Load the given articles of a client, keyed by id.

        Ids that do not exist or belong to another client are absent from
        the result.

        Raises:
            StoreError: If the query fails
        """
        ids = list(article_ids)
        if not ids:
            return {}

        stmt = select(Article).where(Article.client_id == client_id, Article.id.in_(ids))
        try:
            return {article.id: article for article in self.session.scalars(stmt)}
        except SQLAlchemyError as e:
            logger.error("Database error loading selected articles for client %s: %s", client_id, e)
            raise StoreError(FETCH_FAILED_MESSAGE) from e
