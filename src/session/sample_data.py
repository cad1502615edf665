"""Sample movies for trying the catalog out."""

import logging
from typing import List, Optional

from models.catalog import MovieCreate, MovieRecord
from session.actions import resolve_genre_ids
from store.movie_store import MovieStore

logger = logging.getLogger(__name__)

SAMPLE_MOVIES = [
    {
        "title": "The Matrix",
        "details": "A hacker learns that reality is a simulation.",
        "year": "1999",
        "genres": ["Action", "Sci-Fi"],
    },
    {
        "title": "Inception",
        "details": "A thief plants an idea inside a dream.",
        "year": "2010",
        "genres": ["Action", "Sci-Fi", "Thriller"],
    },
    {
        "title": "The Shawshank Redemption",
        "details": "Two imprisoned men bond over a number of years.",
        "year": "1994",
        "genres": ["Drama"],
    },
    {
        "title": "Spirited Away",
        "details": "A girl wanders into a world of spirits.",
        "year": "2001",
        "genres": ["Animation", "Fantasy"],
    },
]


def add_sample_movies(
    store: MovieStore, samples: Optional[List[dict]] = None
) -> List[MovieRecord]:
    """Insert sample movies, skipping titles already present.

    Genres go through the same find-or-create path as the Add movie action.
    """
    samples = SAMPLE_MOVIES if samples is None else samples
    existing = {movie.title for movie in store.list_movies()}

    added = []
    for sample in samples:
        if sample["title"] in existing:
            logger.info(f"Sample movie '{sample['title']}' already present")
            continue

        genre_ids = resolve_genre_ids(store, sample["genres"])
        added.append(
            store.create_movie(
                MovieCreate(
                    title=sample["title"],
                    details=sample["details"],
                    year=sample["year"],
                    genre_ids=genre_ids,
                )
            )
        )
        existing.add(sample["title"])

    return added
