"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from blog.application.interfaces import ViewRenderer
from blog.config import Settings, get_settings
from blog.domain.exceptions import StartupError
from blog.infrastructure.context import AppContext
from blog.infrastructure.database import Base
from blog.infrastructure.logging.log_config import setup_logging
from blog.presentation.web.errors import register_exception_handlers
from blog.presentation.web.middleware import ForceHTMLMiddleware, RemoveTrailingSlashMiddleware
from blog.presentation.web.router import router as web_router

logger = logging.getLogger(__name__)


async def _prepare_database(engine: AsyncEngine) -> None:
    """Open the first pooled connection and create missing tables.

    Raises StartupError so the server refuses to start without a database.
    """
    safe_url = engine.url.render_as_string(hide_password=True)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except (SQLAlchemyError, OSError) as exc:
        raise StartupError(f"Could not prepare database at {safe_url}: {exc}") from exc
    logger.info("Database connected: %s", safe_url)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging, connect and create tables."""
    context: AppContext = app.state.context
    setup_logging(context.settings)

    await _prepare_database(context.engine)

    yield

    # Shutdown
    await context.engine.dispose()


def create_app(settings: Settings | None = None, renderer: ViewRenderer | None = None) -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.context = AppContext.from_settings(settings, renderer=renderer)

    # Added last runs first: the slash is stripped before routing
    app.add_middleware(ForceHTMLMiddleware)
    app.add_middleware(RemoveTrailingSlashMiddleware)

    register_exception_handlers(app)

    app.include_router(web_router)

    return app


def main() -> None:
    """Serve the blog with uvicorn; exits non-zero when startup fails."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "blog.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        lifespan="on",
    )


if __name__ == "__main__":
    main()
