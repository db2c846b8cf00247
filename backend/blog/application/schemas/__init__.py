from .article import ArticleFormData, ArticleView

__all__ = [
    "ArticleFormData",
    "ArticleView",
]
