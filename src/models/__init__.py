"""Models package initialization."""

from .catalog import (
    Base,
    Genre,
    GenreRecord,
    Movie,
    MovieCreate,
    MovieGenre,
    MovieRecord,
    MovieUpdate,
)

__all__ = [
    "Base",
    "Movie",
    "Genre",
    "MovieGenre",
    "MovieRecord",
    "GenreRecord",
    "MovieCreate",
    "MovieUpdate",
]
