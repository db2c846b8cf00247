from .article_repository import ArticleRepository
from .view_renderer import ViewRenderer

__all__ = [
    "ArticleRepository",
    "ViewRenderer",
]
