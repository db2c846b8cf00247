from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL, make_url

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)

# Sync URL prefix → async driver used by the SQLAlchemy async engine
_ASYNC_DRIVERS = {
    "sqlite": "sqlite+aiosqlite",
    "mysql": "mysql+aiomysql",
    "postgresql": "postgresql+asyncpg",
}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Simple Blog"
    app_version: str = "0.1.0"
    app_env: str = "development"
    host: str = "0.0.0.0"
    port: int = 3000
    contact_email: str = "feedback@example.com"

    # Database — either a full URL or the individual connection parts
    database_url: str = ""
    db_driver: str = "mysql+aiomysql"
    db_user: str = "root"
    db_password: str = "secret"
    db_host: str = "127.0.0.1"
    db_port: int = 3306
    db_name: str = "go_simple_blog"
    db_echo: bool = False

    # Connection pool
    db_max_open_conns: int = 25
    db_max_idle_conns: int = 25
    db_conn_max_lifetime: int = 300  # seconds

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    @property
    def sqlalchemy_url(self) -> URL:
        """Async SQLAlchemy URL built from ``database_url`` or the ``db_*`` parts."""
        if self.database_url:
            url = make_url(self.database_url)
            driver = _ASYNC_DRIVERS.get(url.drivername)
            if driver is not None:
                url = url.set(drivername=driver)
            return url

        return URL.create(
            drivername=self.db_driver,
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
