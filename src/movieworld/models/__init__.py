"""SQLAlchemy ORM models."""

from movieworld.models.base import Base
from movieworld.models.movie import Movie

__all__ = ["Base", "Movie"]
