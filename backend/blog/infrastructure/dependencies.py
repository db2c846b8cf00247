"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from blog.application.interfaces import ViewRenderer
from blog.application.services import ArticleService
from blog.config import Settings
from blog.infrastructure.context import AppContext
from blog.infrastructure.database.repositories import SQLAlchemyArticleRepository


def get_app_context(request: Request) -> AppContext:
    """The AppContext attached to the running application by ``create_app``."""
    return request.app.state.context


def get_settings_dependency(context: AppContext = Depends(get_app_context)) -> Settings:
    return context.settings


def get_renderer(context: AppContext = Depends(get_app_context)) -> ViewRenderer:
    return context.renderer


async def get_db_session(
    context: AppContext = Depends(get_app_context),
) -> AsyncGenerator[AsyncSession, None]:
    """Yields an async DB session per request, rolled back if the request fails."""
    async with context.session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def get_article_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ArticleService, None]:
    """Provides an ArticleService instance with its repository wired up."""
    repository = SQLAlchemyArticleRepository(session)
    yield ArticleService(repository)
