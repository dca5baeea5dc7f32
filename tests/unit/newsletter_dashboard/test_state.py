"""Tests for newsletter_dashboard.state."""

from newsletter_dashboard.models import DashboardArticle
from newsletter_dashboard.state import LOAD_FAILED_MESSAGE, DashboardState, FetchStatus

ARTICLES = [DashboardArticle(id=i, headline=f"H{i}") for i in range(1, 4)]


class TestFetchTransitions:
    def test_initial_is_loading(self) -> None:
        assert DashboardState().status is FetchStatus.LOADING

    def test_loaded_is_ready(self) -> None:
        state = DashboardState().loaded(ARTICLES)
        assert state.status is FetchStatus.READY
        assert state.article_ids == [1, 2, 3]

    def test_failed_carries_generic_message(self) -> None:
        state = DashboardState().failed()
        assert state.status is FetchStatus.ERROR
        assert state.error == LOAD_FAILED_MESSAGE
        assert state.articles == ()

    def test_loading_resets_selection(self) -> None:
        state = DashboardState().loaded(ARTICLES).toggled(1).toggled(2)
        assert state.loading().selection.count == 0


class TestGenerateEnabled:
    def test_disabled_without_selection(self) -> None:
        assert DashboardState().loaded(ARTICLES).can_generate is False

    def test_enabled_with_selection(self) -> None:
        assert DashboardState().loaded(ARTICLES).toggled(2).can_generate is True

    def test_disabled_while_submitting(self) -> None:
        state = DashboardState().loaded(ARTICLES).toggled(2).with_submitting(True)
        assert state.can_generate is False

    def test_selected_ids_in_display_order(self) -> None:
        state = DashboardState().loaded(ARTICLES).toggled(3).toggled(1)
        assert state.selected_ids == [1, 3]
