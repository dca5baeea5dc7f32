"""Category to display-style mapping for article cards."""

from typing import Optional

DEFAULT_CATEGORY = "General"
DEFAULT_STYLE = "gray"

CATEGORY_STYLES = {
    "AI/ML": "blue",
    "Security": "red",
    "Quantum": "purple",
    "CleanTech": "green",
    "Space": "indigo",
    "Tech": "gray",
    "General": "orange",
}


def category_style(category: Optional[str]) -> str:
    """Style token for a category, gray for anything unknown."""
    if not category:
        return DEFAULT_STYLE
    return CATEGORY_STYLES.get(category, DEFAULT_STYLE)


def category_label(category: Optional[str]) -> str:
    return category or DEFAULT_CATEGORY
