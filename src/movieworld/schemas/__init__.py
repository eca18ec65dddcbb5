"""Pydantic schemas for API requests and responses."""

from movieworld.schemas.movie import MovieSchema

__all__ = ["MovieSchema"]
