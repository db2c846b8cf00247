"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod

from blog.domain.entities import Article


class ArticleRepository(ABC):
    """Port for article persistence — implemented in the infrastructure layer.

    Implementations raise ``StorageError`` for connection or statement failures.
    """

    @abstractmethod
    async def get_by_id(self, article_id: int) -> Article | None:
        """Retrieve a single article by its ID, or None when no row matches."""
        ...

    @abstractmethod
    async def create(self, title: str, body: str) -> int:
        """Persist a new article and return the database-assigned ID."""
        ...

    @abstractmethod
    async def update(self, article_id: int, title: str, body: str) -> int:
        """Overwrite title and body. Returns the number of rows matched by the ID."""
        ...
