"""Tests for newsletter_dashboard.selection."""

import random

import pytest

from newsletter_dashboard.selection import SelectionSet


class TestToggle:
    def test_starts_empty(self) -> None:
        selection = SelectionSet()
        assert selection.count == 0
        assert selection.can_generate is False

    def test_toggle_selects_then_unselects(self) -> None:
        once = SelectionSet().toggle(7)
        assert once.contains(7)
        assert not once.toggle(7).contains(7)

    def test_toggle_returns_new_value(self) -> None:
        original = SelectionSet()
        original.toggle(1)
        assert original.count == 0

    @pytest.mark.parametrize("seed", range(10))
    def test_membership_is_toggle_parity(self, seed) -> None:
        rng = random.Random(seed)
        toggles = [rng.choice(["a", "b", "c", "d"]) for _ in range(rng.randint(0, 40))]

        selection = SelectionSet()
        for article_id in toggles:
            selection = selection.toggle(article_id)

        for article_id in ["a", "b", "c", "d"]:
            assert selection.contains(article_id) == (toggles.count(article_id) % 2 == 1)
        assert selection.count == len(selection.selected)
        assert selection.can_generate == (selection.count > 0)


class TestDerived:
    def test_cleared_is_empty(self) -> None:
        selection = SelectionSet().toggle(1).toggle(2).toggle(3)
        assert selection.cleared().count == 0

    def test_ordered_follows_article_list(self) -> None:
        selection = SelectionSet().toggle(5).toggle(1).toggle(3)
        assert selection.ordered([1, 2, 3, 4, 5]) == [1, 3, 5]
