"""Tests for newsletter_dashboard.controller."""

from unittest.mock import Mock

import pytest

from newsletter_dashboard.client import DashboardAPIError, NewsletterAPIClient
from newsletter_dashboard.config import DashboardConfig
from newsletter_dashboard.controller import (
    CONNECTION_FAILED_ALERT,
    EMPTY_SELECTION_ALERT,
    GENERATION_FAILED_ALERT,
    DashboardController,
)
from newsletter_dashboard.models import DashboardArticle
from newsletter_dashboard.state import FetchStatus

ARTICLES = [DashboardArticle(id=i, headline=f"H{i}") for i in range(1, 6)]


@pytest.fixture
def api():
    client = Mock(spec=NewsletterAPIClient)
    client.fetch_articles.return_value = list(ARTICLES)
    client.generate_newsletter.return_value = {"success": True, "article_count": 2}
    return client


@pytest.fixture
def controller(api):
    config = DashboardConfig(client_id="tech_weekly", webhook_url="https://hooks.example.com/n")
    controller = DashboardController(api, config)
    controller.load()
    return controller


class TestLoad:
    def test_ready_after_fetch(self, controller, api) -> None:
        assert controller.state.status is FetchStatus.READY
        assert len(controller.state.articles) == 5
        api.fetch_articles.assert_called_once_with("tech_weekly")

    def test_error_then_reload(self, api) -> None:
        api.fetch_articles.side_effect = [DashboardAPIError("down"), list(ARTICLES)]
        controller = DashboardController(api, DashboardConfig())

        assert controller.load().status is FetchStatus.ERROR
        assert controller.reload().status is FetchStatus.READY

    def test_empty_store_keeps_generate_disabled(self, api) -> None:
        api.fetch_articles.return_value = []
        controller = DashboardController(api, DashboardConfig())
        controller.load()

        assert controller.state.status is FetchStatus.READY
        assert controller.state.can_generate is False

    def test_reload_clears_selection(self, controller) -> None:
        controller.toggle(1)
        controller.reload()
        assert controller.state.selection.count == 0


class TestToggle:
    def test_returns_membership(self, controller) -> None:
        assert controller.toggle(3) is True
        assert controller.toggle(3) is False

    def test_unknown_id_raises(self, controller) -> None:
        with pytest.raises(KeyError):
            controller.toggle(99)


class TestGenerate:
    def test_two_of_five_submitted_then_cleared(self, controller, api) -> None:
        controller.toggle(4)
        controller.toggle(2)

        result = controller.generate()

        api.generate_newsletter.assert_called_once_with(
            "tech_weekly", [2, 4], webhook_url="https://hooks.example.com/n"
        )
        assert result.submitted is True
        assert result.article_count == 2
        assert result.alert == "Newsletter generation started with 2 articles!"
        assert controller.state.selection.count == 0
        assert len(controller.state.articles) == 5

    def test_empty_selection_never_calls_api(self, controller, api) -> None:
        result = controller.generate()

        assert result.submitted is False
        assert result.alert == EMPTY_SELECTION_ALERT
        api.generate_newsletter.assert_not_called()

    def test_rejected_keeps_selection(self, controller, api) -> None:
        api.generate_newsletter.return_value = {"success": False}
        controller.toggle(1)

        result = controller.generate()

        assert result.alert == GENERATION_FAILED_ALERT
        assert controller.state.selection.contains(1)

    def test_connection_error_keeps_selection(self, controller, api) -> None:
        api.generate_newsletter.side_effect = DashboardAPIError("refused")
        controller.toggle(1)

        result = controller.generate()

        assert result.alert == CONNECTION_FAILED_ALERT
        assert controller.state.selection.contains(1)
        assert controller.state.submitting is False

    def test_refuses_while_submitting(self, controller, api) -> None:
        controller.toggle(1)
        controller.state = controller.state.with_submitting(True)

        result = controller.generate()

        assert result.submitted is False
        api.generate_newsletter.assert_not_called()

    def test_blocked_until_loaded(self, api) -> None:
        controller = DashboardController(api, DashboardConfig())

        result = controller.generate()

        assert result.alert == EMPTY_SELECTION_ALERT
        api.generate_newsletter.assert_not_called()
