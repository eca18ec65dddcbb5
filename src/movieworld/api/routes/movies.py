"""Movie API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from movieworld.database import get_db
from movieworld.schemas.movie import MovieSchema
from movieworld.services.movie_service import MovieService

logger = logging.getLogger(__name__)
router = APIRouter()

NOT_FOUND = "Movie not found"

# Ids are int4 in the movies table
MovieId = Annotated[int, Path(ge=1, le=2**31 - 1)]


def get_movie_service(db: AsyncSession = Depends(get_db)) -> MovieService:
    """Dependency providing a MovieService bound to the request's session."""
    return MovieService(db)


@router.get("", response_model=list[MovieSchema])
@router.get("/", response_model=list[MovieSchema], include_in_schema=False)
async def get_all_movies(
    service: MovieService = Depends(get_movie_service),
) -> list[MovieSchema]:
    """Get all movies."""
    return await service.list_movies()


@router.get(
    "/{movie_id}",
    response_model=MovieSchema,
    responses={404: {"description": NOT_FOUND}},
)
async def get_movie(
    movie_id: MovieId,
    service: MovieService = Depends(get_movie_service),
) -> MovieSchema:
    """Get a movie by its ID."""
    movie = await service.get_movie(movie_id)
    if movie is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return movie


@router.get(
    "/{movie_id}/with-reviews",
    response_model=MovieSchema,
    responses={404: {"description": NOT_FOUND}},
)
async def get_movie_with_reviews(
    movie_id: MovieId,
    service: MovieService = Depends(get_movie_service),
) -> MovieSchema:
    """
    Get a movie by its ID including reviews from the Movie Review service.

    If the review service cannot be reached the movie is still returned,
    with ``reviews`` set to null.
    """
    movie = await service.get_movie_with_reviews(movie_id)
    if movie is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return movie


@router.post("", response_model=MovieSchema, status_code=status.HTTP_201_CREATED)
@router.post(
    "/",
    response_model=MovieSchema,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
async def create_movie(
    data: MovieSchema,
    service: MovieService = Depends(get_movie_service),
) -> MovieSchema:
    """Create a new movie. Any id in the request body is ignored."""
    return await service.create_movie(data)


@router.put(
    "/{movie_id}",
    response_model=MovieSchema,
    responses={404: {"description": NOT_FOUND}},
)
async def update_movie(
    movie_id: MovieId,
    data: MovieSchema,
    service: MovieService = Depends(get_movie_service),
) -> MovieSchema:
    """Update an existing movie, replacing every field except its id."""
    movie = await service.update_movie(movie_id, data)
    if movie is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return movie


@router.delete(
    "/{movie_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"description": NOT_FOUND}},
)
async def delete_movie(
    movie_id: MovieId,
    service: MovieService = Depends(get_movie_service),
) -> Response:
    """Delete a movie by its ID."""
    if not await service.delete_movie(movie_id):
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
