"""Dashboard configuration from environment variables."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


@dataclass
class DashboardConfig:
    api_url: str = "http://localhost:3001"
    client_id: str = "tech_weekly"
    client_name: str = "Tech Weekly"
    next_publish: str = "Friday"
    webhook_url: Optional[str] = None
    timeout_seconds: float = 30.0


def load_dashboard_config() -> DashboardConfig:
    """Build the dashboard config from NEWSLETTER_* environment variables."""
    defaults = DashboardConfig()
    return DashboardConfig(
        api_url=os.getenv("NEWSLETTER_API_URL", defaults.api_url).rstrip("/"),
        client_id=os.getenv("NEWSLETTER_CLIENT_ID", defaults.client_id),
        client_name=os.getenv("NEWSLETTER_CLIENT_NAME", defaults.client_name),
        next_publish=os.getenv("NEWSLETTER_NEXT_PUBLISH", defaults.next_publish),
        webhook_url=os.getenv("NEWSLETTER_WEBHOOK_URL") or None,
        timeout_seconds=float(os.getenv("NEWSLETTER_API_TIMEOUT", defaults.timeout_seconds)),
    )
