"""Movie model for storing movie details."""

from datetime import date

from sqlalchemy import CheckConstraint, Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from movieworld.models.base import Base


class Movie(Base):
    """
    Movie model.

    Stores the basic details of a movie. Reviews are owned by the Movie
    Review service: ``reviews`` is a plain attribute filled in at read time
    and is never written to the table.
    """

    __tablename__ = "movies"
    __table_args__ = (
        # SQLite ignores VARCHAR lengths
        CheckConstraint("length(description) <= 2000", name="ck_movies_description_length"),
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    director: Mapped[str] = mapped_column(String(255), nullable=False)
    release_date: Mapped[date] = mapped_column(Date, nullable=False)
    duration_minutes: Mapped[int | None] = mapped_column(Integer, nullable=True)
    genre: Mapped[str | None] = mapped_column(String(255), nullable=True)
    image_path: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(String(2000), nullable=True)

    # Not mapped
    reviews = None

    def __repr__(self) -> str:
        return f"<Movie(id={self.id}, title={self.title!r}, director={self.director!r})>"
