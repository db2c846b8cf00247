"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from pydantic import BaseModel, Field


class ArticleFormData(BaseModel):
    """Values, target URL and field errors rendered into the create/edit forms."""

    title: str = ""
    body: str = ""
    url: str = Field(..., examples=["/articles"])
    errors: dict[str, str] = Field(default_factory=dict)


class ArticleView(BaseModel):
    """Article as exposed to the show template."""

    id: int
    title: str
    body: str

    model_config = {"from_attributes": True}
