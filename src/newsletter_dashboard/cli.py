"""Interactive terminal dashboard for selecting newsletter articles."""

from __future__ import annotations

import argparse
import os
from dataclasses import replace
from typing import Callable

from common.cli_helpers import parse_positive_float, setup_logging
from newsletter_dashboard.client import NewsletterAPIClient
from newsletter_dashboard.config import DashboardConfig, load_dashboard_config
from newsletter_dashboard.controller import DashboardController
from newsletter_dashboard.render import render_dashboard
from newsletter_dashboard.state import FetchStatus

HELP_TEXT = "Commands: <number> toggle article, g generate, r reload, q quit"


def handle_command(controller: DashboardController, command: str) -> str | None:
    """Apply one user command. Returns a message to show, if any."""
    command = command.strip().lower()
    if not command:
        return None
    if command == "r":
        controller.reload()
        return None
    if command == "g":
        return controller.generate().alert
    if command in ("h", "?"):
        return HELP_TEXT
    if command.isdigit() and controller.state.status is FetchStatus.READY:
        position = int(command)
        articles = controller.state.articles
        if 1 <= position <= len(articles):
            controller.toggle(articles[position - 1].id)
            return None
        return f"No article number {position}."
    return f"Unknown command: {command!r}. {HELP_TEXT}"


def run(
    controller: DashboardController,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """Load once, then render and apply commands until quit or EOF."""
    write(render_dashboard(controller.state, controller.config))
    controller.load()

    while True:
        write(render_dashboard(controller.state, controller.config))
        try:
            command = read("> ")
        except EOFError:
            break
        if command.strip().lower() == "q":
            break
        message = handle_command(controller, command)
        if message:
            write(message)


def _build_config(args: argparse.Namespace) -> DashboardConfig:
    config = load_dashboard_config()
    overrides = {
        "api_url": args.api_url.rstrip("/") if args.api_url else None,
        "client_id": args.client_id,
        "client_name": args.client_name,
        "next_publish": args.next_publish,
        "webhook_url": args.webhook_url,
        "timeout_seconds": args.timeout,
    }
    return replace(config, **{k: v for k, v in overrides.items() if v is not None})


def main() -> None:
    parser = argparse.ArgumentParser(description="Select articles for the next newsletter issue.")
    parser.add_argument("--api-url", default=None, help="API base origin (default: $NEWSLETTER_API_URL).")
    parser.add_argument("--client-id", default=None)
    parser.add_argument("--client-name", default=None)
    parser.add_argument("--next-publish", default=None, help="Next publication label shown in the header.")
    parser.add_argument("--webhook-url", default=None, help="Newsletter webhook forwarded with the selection.")
    parser.add_argument(
        "--timeout",
        type=lambda v: parse_positive_float(v, "timeout"),
        default=None,
        help="Request timeout in seconds.",
    )
    args = parser.parse_args()

    setup_logging(os.getenv("LOG_LEVEL", "WARNING"))
    config = _build_config(args)
    with NewsletterAPIClient(config.api_url, timeout=config.timeout_seconds) as client:
        run(DashboardController(client, config))


if __name__ == "__main__":
    main()
