"""Conversion between Movie entities and their transfer representation."""

from collections.abc import Iterable

from movieworld.models.movie import Movie
from movieworld.schemas.movie import MovieSchema


def to_schema(movie: Movie | None) -> MovieSchema | None:
    """Copy an entity into a MovieSchema, including its fetched reviews."""
    if movie is None:
        return None

    return MovieSchema(
        id=movie.id,
        title=movie.title,
        director=movie.director,
        release_date=movie.release_date,
        duration_minutes=movie.duration_minutes,
        genre=movie.genre,
        image_path=movie.image_path,
        description=movie.description,
        reviews=movie.reviews,
    )


def to_entity(schema: MovieSchema | None) -> Movie | None:
    """Copy a MovieSchema into a new, unsaved entity."""
    if schema is None:
        return None

    movie = Movie(
        id=schema.id,
        title=schema.title,
        director=schema.director,
        release_date=schema.release_date,
        duration_minutes=schema.duration_minutes,
        genre=schema.genre,
        image_path=schema.image_path,
        description=schema.description,
    )
    movie.reviews = schema.reviews
    return movie


def apply_update(movie: Movie | None, schema: MovieSchema | None) -> Movie | None:
    """
    Overwrite every mutable field of ``movie`` with the values in ``schema``.

    The id is left untouched, and so are reviews since they are never
    persisted. Fields missing from the request are overwritten with None.

    Args:
        movie: Existing entity, modified in place
        schema: Incoming movie data

    Returns:
        The same entity instance
    """
    if movie is None or schema is None:
        return movie

    movie.title = schema.title
    movie.director = schema.director
    movie.release_date = schema.release_date
    movie.duration_minutes = schema.duration_minutes
    movie.genre = schema.genre
    movie.image_path = schema.image_path
    movie.description = schema.description
    return movie


def to_schema_list(movies: Iterable[Movie] | None) -> list[MovieSchema]:
    if not movies:
        return []
    return [to_schema(movie) for movie in movies]
