"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class ArticleValidationError(Exception):
    """Raised when submitted article fields fail validation.

    ``errors`` maps the offending field name to a human-readable message.
    """

    def __init__(self, errors: dict[str, str]):
        self.errors = errors
        super().__init__("; ".join(f"{field}: {message}" for field, message in errors.items()))


class StorageError(Exception):
    """Raised when the database connection or a statement fails."""


class StartupError(Exception):
    """Raised when the application cannot reach its database or create the schema."""
