"""Pydantic schema for movie data sent and received over the API."""

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class MovieSchema(BaseModel):
    """
    Transfer representation of a movie.

    Used for create and update requests as well as responses. Fields are
    camelCase on the wire; snake_case names are accepted on input too.
    ``id`` is ignored on create, and ``reviews`` is only filled in by the
    with-reviews endpoint.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: int | None = None
    title: str
    director: str
    release_date: date
    duration_minutes: int | None = Field(default=None, gt=0, strict=True)
    genre: str | None = None
    image_path: str | None = None
    description: str | None = Field(default=None, max_length=2000)
    reviews: Any = None

    @field_validator("title", "director")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v
