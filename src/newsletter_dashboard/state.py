"""Dashboard state: article list fetch status plus the current selection."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

from newsletter_dashboard.models import DashboardArticle
from newsletter_dashboard.selection import SelectionSet

LOAD_FAILED_MESSAGE = "Failed to load articles. Please try again later."


class FetchStatus(str, Enum):
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


@dataclass(frozen=True)
class DashboardState:
    """Everything the dashboard renders.

    Transitions: loading -> ready | error, and error -> loading on a
    user-initiated reload. Entering loading always starts from an empty
    selection.
    """

    status: FetchStatus = FetchStatus.LOADING
    articles: tuple[DashboardArticle, ...] = ()
    selection: SelectionSet = field(default_factory=SelectionSet)
    error: str | None = None
    submitting: bool = False

    def loading(self) -> DashboardState:
        return DashboardState(status=FetchStatus.LOADING)

    def loaded(self, articles: list[DashboardArticle]) -> DashboardState:
        return DashboardState(status=FetchStatus.READY, articles=tuple(articles))

    def failed(self, message: str = LOAD_FAILED_MESSAGE) -> DashboardState:
        return DashboardState(status=FetchStatus.ERROR, error=message)

    def toggled(self, article_id) -> DashboardState:
        return replace(self, selection=self.selection.toggle(article_id))

    def with_selection_cleared(self) -> DashboardState:
        return replace(self, selection=self.selection.cleared())

    def with_submitting(self, submitting: bool) -> DashboardState:
        return replace(self, submitting=submitting)

    @property
    def article_ids(self) -> list:
        return [article.id for article in self.articles]

    @property
    def selected_ids(self) -> list:
        return self.selection.ordered(self.article_ids)

    @property
    def can_generate(self) -> bool:
        return self.status is FetchStatus.READY and self.selection.can_generate and not self.submitting
