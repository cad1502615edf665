"""Data access for movies and genres."""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from models.catalog import (
    Genre,
    GenreRecord,
    Movie,
    MovieCreate,
    MovieGenre,
    MovieRecord,
    MovieUpdate,
)
from store.database import Database

logger = logging.getLogger(__name__)


class RecordNotFoundError(LookupError):
    """Raised when a row addressed by id does not exist."""


def _movie_query():
    return select(Movie).options(
        selectinload(Movie.genres).selectinload(MovieGenre.genre)
    )


class MovieStore:
    """CRUD operations over the movie catalog.

    Every call runs in its own transaction and returns immutable records,
    never live ORM objects.
    """

    def __init__(self, database: Database):
        self.database = database

    def _load_movie(self, session: Session, movie_id: int) -> Optional[Movie]:
        return session.scalars(_movie_query().where(Movie.id == movie_id)).first()

    def _require_movie(self, session: Session, movie_id: int) -> Movie:
        movie = self._load_movie(session, movie_id)
        if movie is None:
            raise RecordNotFoundError(f"Movie {movie_id} does not exist")
        return movie

    # Movies

    def create_movie(self, data: MovieCreate) -> MovieRecord:
        """Insert a movie and link it to ``data.genre_ids`` in order."""
        try:
            with self.database.session() as session:
                movie = Movie(title=data.title, details=data.details, year=data.year)
                # Same genre twice in one submission is one link
                for genre_id in dict.fromkeys(data.genre_ids):
                    movie.genres.append(MovieGenre(genre_id=genre_id))
                session.add(movie)
                session.flush()
                record = MovieRecord.from_movie(movie)

            logger.info(f"Created movie {record.id} '{record.title}'")
            return record

        except SQLAlchemyError as e:
            logger.error(f"Error creating movie '{data.title}': {e}")
            raise

    def update_movie(self, movie_id: int, changes: MovieUpdate) -> MovieRecord:
        """Apply ``changes`` to one movie. Only title and year are touched."""
        try:
            with self.database.session() as session:
                movie = self._require_movie(session, movie_id)
                for field, value in changes.model_dump(exclude_none=True).items():
                    setattr(movie, field, value)
                session.flush()
                record = MovieRecord.from_movie(movie)

            logger.info(f"Updated movie {movie_id}")
            return record

        except SQLAlchemyError as e:
            logger.error(f"Error updating movie {movie_id}: {e}")
            raise

    def delete_movie(self, movie_id: int) -> MovieRecord:
        """Delete one movie and its genre links; return what was removed."""
        try:
            with self.database.session() as session:
                movie = self._require_movie(session, movie_id)
                record = MovieRecord.from_movie(movie)
                session.delete(movie)

            logger.info(f"Deleted movie {movie_id} '{record.title}'")
            return record

        except SQLAlchemyError as e:
            logger.error(f"Error deleting movie {movie_id}: {e}")
            raise

    def list_movies(
        self, limit: Optional[int] = None, genre_id: Optional[int] = None
    ) -> List[MovieRecord]:
        """Movies ordered by title, optionally only those linked to ``genre_id``."""
        query = _movie_query().order_by(Movie.title, Movie.id)
        if genre_id is not None:
            query = query.where(
                Movie.genres.any(MovieGenre.genre_id == genre_id)
            )
        if limit is not None:
            query = query.limit(limit)

        with self.database.session() as session:
            return [MovieRecord.from_movie(movie) for movie in session.scalars(query)]

    def get_movie(self, movie_id: int) -> Optional[MovieRecord]:
        with self.database.session() as session:
            movie = self._load_movie(session, movie_id)
            return MovieRecord.from_movie(movie) if movie else None

    # Genres

    def find_genre_by_title(self, title: str) -> Optional[GenreRecord]:
        """Exact-match lookup on the genre title."""
        with self.database.session() as session:
            genre = session.scalars(select(Genre).where(Genre.title == title)).first()
            return GenreRecord.model_validate(genre) if genre else None

    def create_genre(self, title: str) -> GenreRecord:
        try:
            with self.database.session() as session:
                genre = Genre(title=title)
                session.add(genre)
                session.flush()
                record = GenreRecord.model_validate(genre)

            logger.info(f"Created genre {record.id} '{record.title}'")
            return record

        except SQLAlchemyError as e:
            logger.error(f"Error creating genre '{title}': {e}")
            raise

    def list_genres(self) -> List[GenreRecord]:
        with self.database.session() as session:
            genres = session.scalars(select(Genre).order_by(Genre.title, Genre.id))
            return [GenreRecord.model_validate(genre) for genre in genres]

    def disconnect(self) -> None:
        self.database.dispose()
