"""Dashboard controller: owns the dashboard state and applies user actions."""

import logging

from newsletter_dashboard.client import DashboardAPIError, NewsletterAPIClient
from newsletter_dashboard.config import DashboardConfig
from newsletter_dashboard.models import GenerationResult
from newsletter_dashboard.state import DashboardState

logger = logging.getLogger(__name__)

EMPTY_SELECTION_ALERT = "Please select at least one article before generating the newsletter."
GENERATION_FAILED_ALERT = "Failed to generate newsletter. Please try again."
CONNECTION_FAILED_ALERT = "Error generating newsletter. Please check your connection."
SUBMISSION_PENDING_ALERT = "A newsletter generation request is already in progress."


class DashboardController:
    """Top-level owner of the dashboard state.

    Renderers only read ``state``; the selection changes only through
    ``toggle`` and is reset by ``load`` and by a successful ``generate``.
    """

    def __init__(self, client: NewsletterAPIClient, config: DashboardConfig):
        self.client = client
        self.config = config
        self.state = DashboardState()

    def load(self) -> DashboardState:
        """Fetch the article list once, ending in ready or error."""
        self.state = self.state.loading()
        try:
            articles = self.client.fetch_articles(self.config.client_id)
        except DashboardAPIError as e:
            logger.error("Failed to fetch articles: %s", e)
            self.state = self.state.failed()
            return self.state

        self.state = self.state.loaded(articles)
        logger.info("Loaded %d articles for %s", len(articles), self.config.client_id)
        return self.state

    def reload(self) -> DashboardState:
        """User-initiated retry: drops the current list and selection."""
        return self.load()

    def toggle(self, article_id) -> bool:
        """Flip selection of a loaded article. Returns its new membership.

        Raises:
            KeyError: If no loaded article has this id
        """
        if article_id not in self.state.article_ids:
            raise KeyError(article_id)
        self.state = self.state.toggled(article_id)
        return self.state.selection.contains(article_id)

    def generate(self) -> GenerationResult:
        """Submit the current selection to the generation trigger.

        An empty selection never reaches the network. The selection is only
        cleared once the API confirms success.
        """
        if self.state.submitting:
            return GenerationResult(submitted=False, alert=SUBMISSION_PENDING_ALERT)
        if not self.state.can_generate:
            return GenerationResult(submitted=False, alert=EMPTY_SELECTION_ALERT)

        selected_ids = self.state.selected_ids
        self.state = self.state.with_submitting(True)
        try:
            result = self.client.generate_newsletter(
                self.config.client_id,
                selected_ids,
                webhook_url=self.config.webhook_url,
            )
        except DashboardAPIError as e:
            logger.error("Newsletter generation error: %s", e)
            return GenerationResult(submitted=False, alert=CONNECTION_FAILED_ALERT)
        finally:
            self.state = self.state.with_submitting(False)

        if not result.get("success"):
            logger.warning("Newsletter generation rejected: %s", result.get("error"))
            return GenerationResult(submitted=False, alert=GENERATION_FAILED_ALERT)

        self.state = self.state.with_selection_cleared()
        return GenerationResult(
            submitted=True,
            alert=f"Newsletter generation started with {len(selected_ids)} articles!",
            article_count=len(selected_ids),
        )
