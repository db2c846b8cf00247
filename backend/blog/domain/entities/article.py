"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass


@dataclass
class Article:
    """Core domain entity representing a blog post."""

    title: str
    body: str
    id: int | None = None
