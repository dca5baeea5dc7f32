"""Configuration loader for newsletter-api."""

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml
from dotenv import load_dotenv

load_dotenv()

API_VERSION = "1.0.0"


@dataclass
class DatabaseConfig:
    url: str = "sqlite:///newsletter.db"
    echo: bool = False


@dataclass
class WebhookConfig:
    url: str | None = None  # fallback when the request carries no webhook_url
    timeout_seconds: float = 30.0


@dataclass
class CorsConfig:
    allow_origins: list[str] = field(default_factory=lambda: ["*"])


@dataclass
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 3001
    reload: bool = False


@dataclass
class APIConfig:
    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    webhook: WebhookConfig = field(default_factory=WebhookConfig)
    cors: CorsConfig = field(default_factory=CorsConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    version: str = API_VERSION


def load_config(config_name: str = "prod") -> APIConfig:
    """Load configuration from YAML file.

    Environment variables take precedence over YAML values for the
    deployment-specific settings (database URL, webhook URL, port).

    Args:
        config_name: Name of config file (without .yaml extension)

    Returns:
        APIConfig instance
    """
    config_dir = Path(__file__).resolve().parent / "configs"
    config_path = config_dir / f"{config_name}.yaml"

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    return _parse_config(raw)


def _parse_config(raw: dict) -> APIConfig:
    """Parse config dictionary into APIConfig, applying env overrides."""
    database_raw = raw.get("database", {})
    database_config = DatabaseConfig(
        url=os.getenv("DATABASE_URL") or database_raw.get("url", "sqlite:///newsletter.db"),
        echo=database_raw.get("echo", False),
    )

    webhook_raw = raw.get("webhook", {})
    webhook_config = WebhookConfig(
        url=os.getenv("NEWSLETTER_WEBHOOK_URL") or webhook_raw.get("url"),
        timeout_seconds=float(webhook_raw.get("timeout_seconds", 30.0)),
    )

    cors_raw = raw.get("cors", {})
    cors_config = CorsConfig(
        allow_origins=list(cors_raw.get("allow_origins", ["*"])),
    )

    server_raw = raw.get("server", {})
    server_config = ServerConfig(
        host=server_raw.get("host", "0.0.0.0"),
        port=int(os.getenv("PORT") or server_raw.get("port", 3001)),
        reload=server_raw.get("reload", False),
    )

    return APIConfig(
        database=database_config,
        webhook=webhook_config,
        cors=cors_config,
        server=server_config,
    )


# Global config instance (lazy loaded)
_config: APIConfig | None = None


def get_config() -> APIConfig:
    """Get the global config instance."""
    global _config
    if _config is None:
        config_name = os.getenv("NEWSLETTER_API_CONFIG", "prod")
        _config = load_config(config_name)
    return _config


def set_config(config: APIConfig) -> None:
    """Set the global config instance (for testing)."""
    global _config
    _config = config
