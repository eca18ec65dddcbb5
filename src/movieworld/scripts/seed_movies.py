"""Seed script to populate a few sample movies."""

import asyncio
from datetime import date

from sqlalchemy import select

from movieworld.database import AsyncSessionLocal
from movieworld.models.movie import Movie


async def seed_movies() -> None:
    """Seed the database with sample movies, skipping titles already present."""
    movies_data = [
        {
            "title": "Inception",
            "director": "Christopher Nolan",
            "release_date": date(2010, 7, 16),
            "duration_minutes": 148,
            "genre": "Science Fiction",
            "image_path": "images/inception.jpg",
            "description": "A thief who steals corporate secrets through dream-sharing technology.",
        },
        {
            "title": "The Godfather",
            "director": "Francis Ford Coppola",
            "release_date": date(1972, 3, 24),
            "duration_minutes": 175,
            "genre": "Crime",
            "image_path": "images/the-godfather.jpg",
            "description": "The ageing patriarch of an organised crime dynasty hands over to his son.",
        },
        {
            "title": "Spirited Away",
            "director": "Hayao Miyazaki",
            "release_date": date(2001, 7, 20),
            "duration_minutes": 125,
            "genre": "Animation",
            "image_path": "images/spirited-away.jpg",
            "description": None,
        },
    ]

    async with AsyncSessionLocal() as session:
        for movie_data in movies_data:
            # Check if movie already exists
            query = select(Movie.id).where(Movie.title == movie_data["title"])
            result = await session.execute(query)
            if result.first():
                print(f"Movie {movie_data['title']!r} already exists, skipping")
                continue

            session.add(Movie(**movie_data))
            print(f"Added movie: {movie_data['title']}")

        await session.commit()
        print("Movie seeding complete")


if __name__ == "__main__":
    asyncio.run(seed_movies())
