"""Tests for newsletter_dashboard.categories."""

import pytest

from newsletter_dashboard.categories import category_label, category_style


class TestCategoryStyle:
    @pytest.mark.parametrize(
        "category,expected",
        [
            ("AI/ML", "blue"),
            ("Security", "red"),
            ("Quantum", "purple"),
            ("CleanTech", "green"),
            ("Space", "indigo"),
            ("Tech", "gray"),
            ("General", "orange"),
        ],
    )
    def test_known_categories(self, category, expected) -> None:
        assert category_style(category) == expected

    @pytest.mark.parametrize("category", [None, "", "Biotech", "ai/ml"])
    def test_fallback_is_gray(self, category) -> None:
        assert category_style(category) == "gray"


class TestCategoryLabel:
    def test_missing_is_general(self) -> None:
        assert category_label(None) == "General"

    def test_passthrough(self) -> None:
        assert category_label("Space") == "Space"
