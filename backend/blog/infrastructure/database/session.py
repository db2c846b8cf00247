"""SQLAlchemy async engine and session factory construction."""

from sqlalchemy.engine import URL
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from blog.config import Settings


def _is_memory_sqlite(url: URL) -> bool:
    return url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """Build the async engine and its connection pool.

    The engine connects lazily; the first connection is opened during startup.
    """
    url = settings.sqlalchemy_url

    if _is_memory_sqlite(url):
        # One shared connection, otherwise every checkout sees an empty database
        return create_async_engine(
            url,
            echo=settings.db_echo,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )

    if url.get_backend_name() == "sqlite":
        return create_async_engine(url, echo=settings.db_echo)

    return create_async_engine(
        url,
        echo=settings.db_echo,
        pool_size=settings.db_max_idle_conns,
        max_overflow=max(settings.db_max_open_conns - settings.db_max_idle_conns, 0),
        pool_recycle=settings.db_conn_max_lifetime,
        pool_pre_ping=True,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
