"""Movie use cases: CRUD plus review enrichment."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from movieworld.schemas.movie import MovieSchema
from movieworld.services import movie_mapper
from movieworld.services.movie_store import MovieStore
from movieworld.services.review_client import MovieReviewClient
from movieworld.utils.timing import timed

logger = logging.getLogger(__name__)


class MovieService:
    """
    Service implementing the movie use cases.

    Reads and writes go through MovieStore; the with-reviews lookup also
    asks the Movie Review service, whose failures only ever result in a
    movie without reviews.
    """

    def __init__(
        self,
        db: AsyncSession,
        review_client: MovieReviewClient | None = None,
    ) -> None:
        """
        Initialize movie service.

        Args:
            db: Database session
            review_client: Review client (creates default if not provided)
        """
        self.store = MovieStore(db)
        self.review_client = review_client or MovieReviewClient()

    @timed
    async def list_movies(self) -> list[MovieSchema]:
        logger.info("Fetching all movies")
        movies = await self.store.list_all()
        return movie_mapper.to_schema_list(movies)

    @timed
    async def get_movie(self, movie_id: int) -> MovieSchema | None:
        logger.info(f"Fetching movie with id: {movie_id}")
        movie = await self.store.get(movie_id)
        return movie_mapper.to_schema(movie)

    @timed
    async def get_movie_with_reviews(self, movie_id: int) -> MovieSchema | None:
        """
        Get a movie together with its reviews.

        Args:
            movie_id: Movie ID

        Returns:
            The movie with ``reviews`` set to whatever the review service
            returned (None if it failed), or None if the movie does not exist
        """
        logger.info(f"Fetching movie with id: {movie_id} including reviews")
        movie = await self.store.get(movie_id)
        if movie is None:
            return None

        movie.reviews = await self.review_client.fetch_reviews(movie_id)
        return movie_mapper.to_schema(movie)

    @timed
    async def create_movie(self, data: MovieSchema) -> MovieSchema:
        logger.info(f"Creating new movie: {data.title!r}")
        movie = movie_mapper.to_entity(data)
        # The store always assigns a fresh id
        movie.id = None
        movie.reviews = None
        saved = await self.store.save(movie)
        logger.info(f"Created movie with id: {saved.id}")
        return movie_mapper.to_schema(saved)

    @timed
    async def update_movie(self, movie_id: int, data: MovieSchema) -> MovieSchema | None:
        """
        Replace every field of an existing movie except its id.

        Args:
            movie_id: Movie ID
            data: New movie details

        Returns:
            The updated movie, or None if no movie has this id
        """
        logger.info(f"Updating movie with id: {movie_id}")
        movie = await self.store.get(movie_id)
        if movie is None:
            return None

        movie_mapper.apply_update(movie, data)
        saved = await self.store.save(movie)
        return movie_mapper.to_schema(saved)

    @timed
    async def delete_movie(self, movie_id: int) -> bool:
        logger.info(f"Deleting movie with id: {movie_id}")
        if not await self.store.exists(movie_id):
            return False

        await self.store.delete(movie_id)
        return True
