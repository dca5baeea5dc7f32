"""Newsletter generation trigger service."""

import logging
from datetime import datetime
from typing import Any, Callable

import requests

from common.datetime import utc_now
from newsletter_api.config import WebhookConfig
from newsletter_api.errors import GenerationStoreError, SelectionError, StoreError, WebhookError
from newsletter_api.models.article import ArticleResponse
from newsletter_api.models.newsletter import GenerateNewsletterRequest
from newsletter_api.services.article_service import ArticleService

logger = logging.getLogger(__name__)

WEBHOOK_FAILED_MESSAGE = "Failed to trigger newsletter generation"


class NewsletterService:
    """Hands a finalized selection off to the newsletter-assembly webhook."""

    def __init__(
        self,
        config: WebhookConfig,
        article_service: ArticleService,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.config = config
        self.article_service = article_service
        self.clock = clock

    def generate(self, request: GenerateNewsletterRequest) -> int:
        """Validate the selection and forward it to the webhook.

        Args:
            request: Client id, selected article ids and optional webhook target

        Returns:
            Number of articles submitted

        Raises:
            SelectionError: Missing client id, empty selection, unknown ids or no webhook
            GenerationStoreError: If the selected articles cannot be loaded
            WebhookError: If the webhook cannot be reached or rejects the payload
        """
        if not request.client_id:
            raise SelectionError("client_id is required")
        if not request.selected_article_ids:
            raise SelectionError("No articles selected")

        webhook_url = request.webhook_url or self.config.url
        if not webhook_url:
            raise SelectionError("No webhook configured")

        # Duplicate ids collapse; submission order is kept
        article_ids = list(dict.fromkeys(request.selected_article_ids))
        try:
            found = self.article_service.get_articles(request.client_id, article_ids)
        except StoreError as e:
            raise GenerationStoreError(e.message) from e

        missing = [article_id for article_id in article_ids if article_id not in found]
        if missing:
            raise SelectionError("Unknown article ids for client", missing_article_ids=missing)

        articles = [ArticleResponse.model_validate(found[article_id]) for article_id in article_ids]
        payload = build_webhook_payload(request.client_id, articles, self.clock())
        post_to_webhook(webhook_url, payload, self.config.timeout_seconds)

        logger.info(
            "Newsletter generation triggered for client %s with %d articles",
            request.client_id,
            len(articles),
        )
        return len(articles)


def build_webhook_payload(
    client_id: str,
    articles: list[ArticleResponse],
    requested_at: datetime,
) -> dict[str, Any]:
    """Build the JSON body sent to the newsletter webhook."""
    return {
        "client_id": client_id,
        "article_count": len(articles),
        "articles": [article.model_dump(mode="json") for article in articles],
        "requested_at": requested_at.isoformat(),
    }


def post_to_webhook(url: str, payload: dict[str, Any], timeout: float) -> None:
    """POST the payload to the webhook.

    Raises:
        WebhookError: On transport failure or a non-2xx response
    """
    try:
        response = requests.post(url, json=payload, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        logger.error("Newsletter webhook failed for %s: %s", url, e)
        raise WebhookError(WEBHOOK_FAILED_MESSAGE) from e
