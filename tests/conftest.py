"""Test configuration and fixtures."""

import os
import sys
from collections import deque
from typing import Any, Generator, Iterable, List, Optional, Sequence
from unittest.mock import patch

import pytest

# Add src directory to Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from models.catalog import MovieCreate, MovieRecord
from session.actions import resolve_genre_ids
from session.prompts import Choice
from store.database import Database
from store.movie_store import MovieStore


class ScriptedPrompter:
    """Prompter that replays canned answers instead of reading stdin.

    ``selections`` holds, per select() call, either a choice label to pick,
    an int index into the choices, or None to pick nothing.
    """

    def __init__(
        self, answers: Iterable[str] = (), selections: Iterable[Any] = ()
    ):
        self.answers = deque(answers)
        self.selections = deque(selections)
        self.messages: List[str] = []
        self.offered: List[List[Choice]] = []
        self.pauses = 0
        self.clears = 0

    def text(self, message: str) -> str:
        self.messages.append(message)
        return self.answers.popleft()

    def select(self, message: str, choices: Sequence[Choice]) -> Optional[Any]:
        self.messages.append(message)
        self.offered.append(list(choices))
        if not choices:
            return None

        pick = self.selections.popleft()
        if isinstance(pick, int):
            return choices[pick].value
        for choice in choices:
            if choice.name == pick:
                return choice.value
        raise AssertionError(f"No choice labelled {pick!r}")

    def pause(self) -> None:
        self.pauses += 1

    def clear(self) -> None:
        self.clears += 1


@pytest.fixture
def database() -> Generator[Database, None, None]:
    """In-memory SQLite database with the schema created."""
    db = Database("sqlite://")
    db.create_schema()

    yield db

    db.dispose()


@pytest.fixture
def store(database: Database) -> MovieStore:
    return MovieStore(database)


@pytest.fixture
def add_movie_record(store: MovieStore):
    """Insert a movie directly through the store, resolving genre titles."""

    def _add(
        title: str, details: str = "", year: str = "", genres: Sequence[str] = ()
    ) -> MovieRecord:
        genre_ids = resolve_genre_ids(store, genres)
        return store.create_movie(
            MovieCreate(title=title, details=details, year=year, genre_ids=genre_ids)
        )

    return _add


@pytest.fixture(autouse=True)
def setup_test_environment():
    """Setup test environment variables."""
    test_env = {
        "DATABASE_URL": "sqlite://",
        "LOG_LEVEL": "DEBUG",
    }

    with patch.dict(os.environ, test_env):
        yield
