"""Text rendering of dashboard screens and article cards."""

import textwrap
from datetime import datetime, timezone
from typing import Optional

from newsletter_dashboard.categories import category_label, category_style
from newsletter_dashboard.config import DashboardConfig
from newsletter_dashboard.models import DashboardArticle
from newsletter_dashboard.state import DashboardState, FetchStatus

WIDTH = 78
INDENT = "    "

UNKNOWN_TIME = "Unknown time"


def format_time(value: Optional[datetime]) -> str:
    if value is None:
        return UNKNOWN_TIME
    return value.astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M UTC")


def _wrap(text: str, prefix: str = INDENT) -> list[str]:
    return textwrap.wrap(text, width=WIDTH, initial_indent=prefix, subsequent_indent=prefix) or [prefix]


def render_loading() -> str:
    return "\n".join([
        "Loading Articles",
        "Fetching the latest content for you...",
    ])


def render_error(message: str) -> str:
    return "\n".join([
        "Connection Error",
        message,
        "",
        "Try Again: press [r] to reload.",
    ])


def render_empty() -> str:
    return "\n".join([
        "No Articles Yet",
        "Articles will appear here once your automation runs and processes new content.",
    ])


def render_header(state: DashboardState, config: DashboardConfig) -> str:
    if state.submitting:
        generate = "Generating newsletter..."
    elif state.can_generate:
        generate = "[g] Generate Newsletter"
    else:
        generate = "Generate Newsletter (select an article first)"
    return "\n".join([
        config.client_name,
        f"Next publication: {config.next_publish}",
        f"{state.selection.count} of {len(state.articles)} selected    {generate}",
        "=" * WIDTH,
    ])


def render_card(index: int, article: DashboardArticle, selected: bool) -> str:
    """One article card; ``index`` is the number the user types to toggle it."""
    marker = "[x]" if selected else "[ ]"
    lines = [
        f"{index:>2}. {marker} <{category_label(article.category)}:{category_style(article.category)}>",
    ]
    lines += _wrap(article.headline)

    if article.summary:
        lines += _wrap(article.summary)
    if article.key_takeaway:
        lines += _wrap(f"Key Takeaway: {article.key_takeaway}")
    if article.tldr:
        lines += _wrap(f"TL;DR: {article.tldr}")

    footer = f"{INDENT}{format_time(article.created_time)}"
    if article.url:
        footer += f"  Read source: {article.url}"
    lines.append(footer)
    return "\n".join(lines)


def render_dashboard(state: DashboardState, config: DashboardConfig) -> str:
    """Render whichever screen the current state calls for."""
    if state.status is FetchStatus.LOADING:
        return render_loading()
    if state.status is FetchStatus.ERROR:
        return render_error(state.error or "")

    parts = [render_header(state, config)]
    if not state.articles:
        parts.append(render_empty())
    else:
        parts += [
            render_card(i, article, state.selection.contains(article.id))
            for i, article in enumerate(state.articles, start=1)
        ]
    return "\n\n".join(parts)
