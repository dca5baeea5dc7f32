"""Shared FastAPI dependencies."""

from typing import Iterator

from fastapi import Request
from sqlalchemy.orm import Session

from newsletter_api.config import APIConfig
from newsletter_api.db.connection import session_scope


def get_app_config(request: Request) -> APIConfig:
    """Config the running app was built with."""
    return request.app.state.config


def get_db_session(request: Request) -> Iterator[Session]:
    """One session per request, committed or rolled back on exit."""
    with session_scope(request.app.state.session_factory) as session:
        yield session
