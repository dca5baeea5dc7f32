"""Tests for newsletter_dashboard.render."""

from datetime import datetime, timedelta, timezone

from newsletter_dashboard.config import DashboardConfig
from newsletter_dashboard.models import DashboardArticle
from newsletter_dashboard.render import format_time, render_card, render_dashboard
from newsletter_dashboard.state import DashboardState

CONFIG = DashboardConfig(client_name="Tech Weekly", next_publish="Friday, Sep 8, 2025")

ARTICLE = DashboardArticle(
    id=1,
    headline="Chips get faster",
    summary="A summary.",
    key_takeaway="Buy chips.",
    tldr="Faster chips.",
    category="AI/ML",
    url="https://example.com/chips",
    created_time=datetime(2025, 9, 1, 12, 30, tzinfo=timezone.utc),
)


class TestFormatTime:
    def test_missing(self) -> None:
        assert format_time(None) == "Unknown time"

    def test_converts_to_utc(self) -> None:
        value = datetime(2025, 9, 1, 14, 30, tzinfo=timezone(timedelta(hours=2)))
        assert format_time(value) == "2025-09-01 12:30 UTC"


class TestRenderCard:
    def test_full_card(self) -> None:
        card = render_card(1, ARTICLE, selected=True)
        assert card.startswith(" 1. [x] <AI/ML:blue>")
        assert "Chips get faster" in card
        assert "Key Takeaway: Buy chips." in card
        assert "TL;DR: Faster chips." in card
        assert "2025-09-01 12:30 UTC" in card
        assert "Read source: https://example.com/chips" in card

    def test_sparse_card(self) -> None:
        card = render_card(2, DashboardArticle(id=2, headline="Bare"), selected=False)
        assert "[ ] <General:gray>" in card
        assert "Key Takeaway" not in card
        assert "Read source" not in card
        assert "Unknown time" in card


class TestRenderDashboard:
    def test_loading(self) -> None:
        assert "Loading Articles" in render_dashboard(DashboardState(), CONFIG)

    def test_error_offers_retry(self) -> None:
        screen = render_dashboard(DashboardState().failed(), CONFIG)
        assert "Connection Error" in screen
        assert "Try Again" in screen

    def test_empty_state(self) -> None:
        screen = render_dashboard(DashboardState().loaded([]), CONFIG)
        assert "No Articles Yet" in screen
        assert "0 of 0 selected" in screen
        assert "[g] Generate Newsletter" not in screen

    def test_header_counts_selection(self) -> None:
        articles = [ARTICLE, DashboardArticle(id=2, headline="Other")]
        state = DashboardState().loaded(articles).toggled(2)
        screen = render_dashboard(state, CONFIG)
        assert screen.startswith("Tech Weekly\nNext publication: Friday, Sep 8, 2025")
        assert "1 of 2 selected" in screen
        assert "[g] Generate Newsletter" in screen

    def test_header_shows_pending_submission(self) -> None:
        state = DashboardState().loaded([ARTICLE]).toggled(1).with_submitting(True)
        screen = render_dashboard(state, CONFIG)
        assert "Generating newsletter..." in screen
        assert "[g] Generate Newsletter" not in screen
