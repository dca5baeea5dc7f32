"""Common CLI helper utilities."""

from __future__ import annotations

import argparse
import logging
import os


def setup_logging(level: str | None = None) -> None:
    """Configure standard logging format for CLI tools and the API server."""
    logging.basicConfig(
        level=(level or os.getenv("LOG_LEVEL", "INFO")).upper(),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def parse_positive_float(value: str, field_name: str = "value") -> float:
    """Parse a strictly positive float for argparse arguments.

    Raises:
        argparse.ArgumentTypeError: If the value is not a positive number.
    """
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"{field_name} must be a number") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError(f"{field_name} must be greater than zero")
    return parsed
