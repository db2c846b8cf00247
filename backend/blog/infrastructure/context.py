"""Per-application state built once at startup and shared by all requests."""

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from blog.application.interfaces import ViewRenderer
from blog.config import Settings
from blog.infrastructure.database import create_engine_from_settings, create_session_factory
from blog.infrastructure.templating import JinjaViewRenderer


@dataclass
class AppContext:
    """Everything a request handler needs that outlives a single request."""

    settings: Settings
    engine: AsyncEngine
    session_factory: async_sessionmaker[AsyncSession]
    renderer: ViewRenderer

    @classmethod
    def from_settings(cls, settings: Settings, renderer: ViewRenderer | None = None) -> "AppContext":
        engine = create_engine_from_settings(settings)
        return cls(
            settings=settings,
            engine=engine,
            session_factory=create_session_factory(engine),
            renderer=renderer or JinjaViewRenderer(),
        )
