"""Application service (use case) for Article operations."""

import logging

from blog.application.interfaces import ArticleRepository
from blog.domain.entities import Article
from blog.domain.exceptions import ArticleValidationError, EntityNotFoundError
from blog.domain.validation import validate_article_form

logger = logging.getLogger(__name__)


class ArticleService:
    """Orchestrates article business logic. Depends on the repository port (DI)."""

    def __init__(self, repository: ArticleRepository):
        self._repository = repository

    async def get_article(self, article_id: int) -> Article:
        article = await self._repository.get_by_id(article_id)
        if article is None:
            raise EntityNotFoundError("Article", article_id)
        return article

    async def create_article(self, title: str, body: str) -> int:
        """Validate and insert a new article, returning its ID.

        Raises ArticleValidationError before touching storage when a field is invalid.
        """
        errors = validate_article_form(title, body)
        if errors:
            raise ArticleValidationError(errors)

        article_id = await self._repository.create(title, body)
        logger.info("Created article %d", article_id)
        return article_id

    async def update_article(self, article_id: int, title: str, body: str) -> int:
        """Validate and apply new values to an existing article.

        Returns the number of changed rows; 0 means the values were already stored.
        """
        current = await self.get_article(article_id)

        errors = validate_article_form(title, body)
        if errors:
            raise ArticleValidationError(errors)

        # Exact comparison; database collations may treat case or accent edits as equal
        if (current.title, current.body) == (title, body):
            logger.debug("Article %d unchanged", article_id)
            return 0

        changed = await self._repository.update(article_id, title, body)
        logger.info("Updated article %d", article_id)
        return changed
