"""Concrete repository implementation backed by SQLAlchemy."""

from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from blog.application.interfaces import ArticleRepository
from blog.domain.entities import Article
from blog.domain.exceptions import StorageError
from blog.infrastructure.database.models import ArticleModel

# Largest value a BIGINT primary key can hold
MAX_ARTICLE_ID = 2**63 - 1


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ArticleModel) -> Article:
        """Map ORM model → domain entity."""
        return Article(
            id=model.id,
            title=model.title,
            body=model.body or "",
        )

    async def get_by_id(self, article_id: int) -> Article | None:
        if article_id > MAX_ARTICLE_ID:
            return None
        try:
            result = await self._session.get(ArticleModel, article_id)
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to load article {article_id}") from exc
        return self._to_entity(result) if result else None

    async def create(self, title: str, body: str) -> int:
        model = ArticleModel(title=title, body=body)
        try:
            self._session.add(model)
            await self._session.flush()
            await self._session.commit()
        except SQLAlchemyError as exc:
            raise StorageError("Failed to insert article") from exc

        if not model.id or model.id <= 0:
            raise StorageError(f"Database assigned an invalid article id: {model.id!r}")
        return model.id

    async def update(self, article_id: int, title: str, body: str) -> int:
        if article_id > MAX_ARTICLE_ID:
            return 0
        stmt = (
            update(ArticleModel)
            .where(ArticleModel.id == article_id)
            .values(title=title, body=body)
        )
        try:
            result = await self._session.execute(stmt)
            await self._session.commit()
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to update article {article_id}") from exc
        return result.rowcount
