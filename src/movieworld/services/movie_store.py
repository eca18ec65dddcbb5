"""Persistence for movie records."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from movieworld.models.movie import Movie


class MovieStore:
    """
    Store for Movie entities backed by an async SQLAlchemy session.

    Changes are flushed but not committed; the session owner decides when
    to commit.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def list_all(self) -> list[Movie]:
        result = await self.db.execute(select(Movie).order_by(Movie.id))
        return list(result.scalars().all())

    async def get(self, movie_id: int) -> Movie | None:
        return await self.db.get(Movie, movie_id)

    async def save(self, movie: Movie) -> Movie:
        """
        Insert a movie without an id, or update the row matching its id.

        Args:
            movie: Movie to persist

        Returns:
            The persisted movie with its id populated
        """
        if movie.id is None:
            self.db.add(movie)
        else:
            reviews = movie.reviews
            movie = await self.db.merge(movie)
            movie.reviews = reviews
        await self.db.flush()
        return movie

    async def exists(self, movie_id: int) -> bool:
        result = await self.db.execute(select(Movie.id).where(Movie.id == movie_id))
        return result.scalar_one_or_none() is not None

    async def delete(self, movie_id: int) -> None:
        movie = await self.db.get(Movie, movie_id)
        if movie is not None:
            await self.db.delete(movie)
            await self.db.flush()
