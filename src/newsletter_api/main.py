"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from common.cli_helpers import setup_logging
from newsletter_api.config import APIConfig, get_config
from newsletter_api.db.connection import create_db_engine, create_session_factory, init_db
from newsletter_api.errors import register_exception_handlers
from newsletter_api.routers import articles, health, newsletter

logger = logging.getLogger(__name__)


def create_app(config: APIConfig | None = None) -> FastAPI:
    """Build the API for a config (the global one by default)."""
    config = config or get_config()
    engine = create_db_engine(config.database.url, echo=config.database.echo)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        init_db(engine)
        yield
        engine.dispose()

    app = FastAPI(
        title="Newsletter API",
        description="Receives curated articles and triggers newsletter generation",
        version=config.version,
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.session_factory = create_session_factory(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors.allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(articles.router)
    app.include_router(newsletter.router)

    @app.get("/")
    async def root():
        """API root - returns basic info."""
        return {
            "name": "Newsletter API",
            "version": config.version,
            "docs": "/docs",
        }

    return app


def main():
    """Run the API server."""
    import uvicorn

    setup_logging()
    config = get_config()
    logger.info("Newsletter API server running on port %d", config.server.port)
    logger.info("Health check: http://localhost:%d/api/health", config.server.port)

    uvicorn.run(
        "newsletter_api.main:create_app",
        factory=True,
        host=config.server.host,
        port=config.server.port,
        reload=config.server.reload,
    )


if __name__ == "__main__":
    main()
