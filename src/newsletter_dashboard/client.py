"""HTTP client for the newsletter API."""

import logging
from typing import Any, Optional, Sequence
from urllib.parse import quote

import requests

from newsletter_dashboard.models import DashboardArticle

logger = logging.getLogger(__name__)


class DashboardAPIError(Exception):
    """The API could not be reached, answered non-2xx, or sent an unreadable body."""


class NewsletterAPIClient:
    def __init__(self, base_url: str, timeout: float = 30.0, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._owns_session = session is None
        self.session = session or requests.Session()

    def close(self) -> None:
        """Release the HTTP session if this client created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "NewsletterAPIClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def fetch_articles(self, client_id: str) -> list[DashboardArticle]:
        """Fetch all articles for a client, newest first.

        A response without a truthy ``success`` yields an empty list.

        Raises:
            DashboardAPIError: On any transport, HTTP or parse failure
        """
        url = f"{self.base_url}/api/articles/{quote(client_id, safe='')}"
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.error("Failed to fetch articles from %s: %s", url, e)
            raise DashboardAPIError(str(e)) from e

        if not isinstance(data, dict):
            raise DashboardAPIError("Unexpected response body")
        if not data.get("success") or not data.get("articles"):
            return []

        try:
            return [DashboardArticle.from_api(record) for record in data["articles"]]
        except (KeyError, TypeError, AttributeError) as e:
            logger.error("Unreadable article record from %s: %s", url, e)
            raise DashboardAPIError(f"Malformed article record: {e}") from e

    def generate_newsletter(
        self,
        client_id: str,
        article_ids: Sequence[Any],
        webhook_url: Optional[str] = None,
    ) -> dict[str, Any]:
        """Submit a selection to the generation-trigger endpoint.

        Non-2xx responses that still carry a JSON body are returned as-is so
        the caller can read their ``success`` flag.

        Raises:
            DashboardAPIError: If the API cannot be reached or the body is not JSON
        """
        url = f"{self.base_url}/api/generate-newsletter"
        body = {
            "client_id": client_id,
            "selected_article_ids": list(article_ids),
            "webhook_url": webhook_url,
        }
        try:
            response = self.session.post(url, json=body, timeout=self.timeout)
            result = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.error("Newsletter generation request to %s failed: %s", url, e)
            raise DashboardAPIError(str(e)) from e

        if not isinstance(result, dict):
            raise DashboardAPIError("Unexpected response body")
        return result
