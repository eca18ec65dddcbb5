"""Client for the Movie Review service."""

import logging
from typing import Any

import httpx

from movieworld.config import settings

logger = logging.getLogger(__name__)


class MovieReviewClient:
    """Client for fetching movie reviews from the Movie Review service."""

    REVIEWS_PATH = "/api/moviereview/movie/{movie_id}"

    def __init__(self, base_url: str | None = None, timeout: float | None = None) -> None:
        """
        Initialize the review client.

        Args:
            base_url: Movie Review service base URL (uses settings if not provided)
            timeout: Request timeout in seconds (uses settings if not provided)
        """
        self.base_url = (base_url or settings.movie_review_service_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.review_timeout
        if not self.base_url:
            logger.warning("Movie Review service URL not configured")

    async def fetch_reviews(self, movie_id: int) -> Any | None:
        """
        Fetch the reviews for a movie.

        Failures are logged and never raised: an unreachable service, a
        non-success status or an unreadable body all yield None.

        Args:
            movie_id: Movie ID

        Returns:
            Review payload as returned by the service, or None on error
        """
        if not self.base_url:
            logger.warning("Cannot fetch reviews without a Movie Review service URL")
            return None

        url = self.base_url + self.REVIEWS_PATH.format(movie_id=movie_id)

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(url)
                response.raise_for_status()
                return response.json()

        except Exception as e:
            logger.error(f"Error fetching reviews for movie id {movie_id}: {e}")
            return None
