"""Unit tests for the ArticleService."""

import pytest

from blog.application.interfaces import ArticleRepository
from blog.application.services import ArticleService
from blog.domain.entities import Article
from blog.domain.exceptions import ArticleValidationError, EntityNotFoundError


class FakeArticleRepository(ArticleRepository):
    """In-memory fake repository for unit testing."""

    def __init__(self):
        self._articles: dict[int, Article] = {}
        self._next_id = 1
        self.writes = 0

    async def get_by_id(self, article_id: int) -> Article | None:
        return self._articles.get(article_id)

    async def create(self, title: str, body: str) -> int:
        article = Article(id=self._next_id, title=title, body=body)
        self._next_id += 1
        self._articles[article.id] = article
        self.writes += 1
        return article.id

    async def update(self, article_id: int, title: str, body: str) -> int:
        article = self._articles.get(article_id)
        if article is None:
            return 0
        article.title = title
        article.body = body
        self.writes += 1
        return 1


@pytest.fixture
def repository() -> FakeArticleRepository:
    return FakeArticleRepository()


@pytest.fixture
def service(repository: FakeArticleRepository) -> ArticleService:
    return ArticleService(repository)


@pytest.mark.asyncio
async def test_create_article(service: ArticleService):
    article_id = await service.create_article("Test Article", "Some content here")
    article = await service.get_article(article_id)
    assert article.title == "Test Article"
    assert article.body == "Some content here"


@pytest.mark.asyncio
async def test_create_article_rejects_invalid_fields(service: ArticleService, repository: FakeArticleRepository):
    with pytest.raises(ArticleValidationError) as exc_info:
        await service.create_article("Hi", "short")
    assert exc_info.value.errors == {
        "title": "title length out of range",
        "body": "body too short",
    }
    assert repository.writes == 0


@pytest.mark.asyncio
async def test_get_article_not_found(service: ArticleService):
    with pytest.raises(EntityNotFoundError):
        await service.get_article(999)


@pytest.mark.asyncio
async def test_update_article(service: ArticleService):
    article_id = await service.create_article("Old title", "Old content here")
    changed = await service.update_article(article_id, "New title", "Old content here")
    assert changed == 1
    assert (await service.get_article(article_id)).title == "New title"


@pytest.mark.asyncio
async def test_update_with_same_values_changes_nothing(service: ArticleService, repository: FakeArticleRepository):
    article_id = await service.create_article("Same title", "Same content here")
    assert await service.update_article(article_id, "Same title", "Same content here") == 0
    assert repository.writes == 1


@pytest.mark.asyncio
async def test_case_and_accent_only_edits_are_applied(service: ArticleService):
    article_id = await service.create_article("Hello world", "A resume of my work")

    assert await service.update_article(article_id, "hello world", "A resume of my work") == 1
    assert await service.update_article(article_id, "hello world", "A résumé of my work") == 1

    article = await service.get_article(article_id)
    assert article.title == "hello world"
    assert article.body == "A résumé of my work"


@pytest.mark.asyncio
async def test_update_missing_article_is_checked_before_validation(service: ArticleService):
    with pytest.raises(EntityNotFoundError):
        await service.update_article(42, "", "")


@pytest.mark.asyncio
async def test_update_rejects_invalid_fields(service: ArticleService, repository: FakeArticleRepository):
    article_id = await service.create_article("Valid title", "Valid content here")
    with pytest.raises(ArticleValidationError) as exc_info:
        await service.update_article(article_id, "Valid title", "")
    assert exc_info.value.errors == {"body": "body required"}
    assert repository.writes == 1
