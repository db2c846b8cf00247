"""Declarative base shared by the blog's ORM models."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Every table created at startup is registered on ``Base.metadata``."""
