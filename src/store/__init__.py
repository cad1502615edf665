"""Store package initialization."""

from .database import Database
from .movie_store import MovieStore, RecordNotFoundError

__all__ = ["Database", "MovieStore", "RecordNotFoundError"]
