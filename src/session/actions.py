"""Menu actions for the movie catalog session."""

import logging
import sys
from enum import Enum
from typing import Callable, Dict, Iterable, List, Tuple

from models.catalog import GenreRecord, MovieCreate, MovieRecord, MovieUpdate
from session.prompts import Choice, Prompter
from store.movie_store import MovieStore

logger = logging.getLogger(__name__)

PAGE_SIZE = 10
AFFIRMATIVE = "y"


class Action(str, Enum):
    """Menu entries, in display order."""

    ADD_MOVIE = "Add movie"
    UPDATE_MOVIE = "Update movie"
    DELETE_MOVIE = "Delete movie"
    LIST_MOVIES = "List all movies"
    GET_MOVIE = "Get movie by ID"
    LIST_BY_GENRE = "Get movies by genre"
    ADD_GENRE = "Add genre"
    EXIT = "Exit"


def print_movie(movie: MovieRecord) -> None:
    print(f"{movie.title}\n{movie.details}\n{movie.year}")
    for title in movie.genre_titles:
        print(title)


def print_movies(movies: Iterable[MovieRecord]) -> None:
    for movie in movies:
        print_movie(movie)
        print()


def movie_choices(store: MovieStore) -> List[Choice]:
    return [Choice(name=movie.label, value=movie.id) for movie in store.list_movies()]


def resolve_genre(store: MovieStore, title: str) -> Tuple[GenreRecord, bool]:
    """Return the genre named ``title``, creating it if absent.

    The second item is True when a new genre row was created.
    """
    genre = store.find_genre_by_title(title)
    if genre is not None:
        return genre, False
    return store.create_genre(title), True


def resolve_genre_ids(store: MovieStore, titles: Iterable[str]) -> List[int]:
    return [resolve_genre(store, title)[0].id for title in titles]


def collect_genre_titles(prompter: Prompter) -> List[str]:
    """Ask for genres until the user answers anything but yes."""
    titles = []
    while True:
        titles.append(prompter.text("Enter a genre:").strip())
        answer = prompter.text("Do you want to enter another genre (y/n):")
        if answer.strip().lower() != AFFIRMATIVE:
            return titles


def add_movie(store: MovieStore, prompter: Prompter) -> None:
    title = prompter.text("Enter movie title:")
    details = prompter.text("Enter movie details:")
    year = prompter.text("Enter year of creation:")
    genre_titles = collect_genre_titles(prompter)

    genre_ids = resolve_genre_ids(store, genre_titles)
    movie = store.create_movie(
        MovieCreate(title=title, details=details, year=year, genre_ids=genre_ids)
    )

    print()
    print_movie(movie)
    print()


def update_movie(store: MovieStore, prompter: Prompter) -> None:
    movie_id = prompter.select("Choose what movie to update", movie_choices(store))
    if movie_id is None:
        print("No movies to update.")
        return

    current = store.get_movie(movie_id)
    if current is not None:
        print(f"\nMovie to update: {current.title}\nCreated year: {current.year}")

    title = prompter.text("Enter new movie title:")
    year = prompter.text("Enter new year of creation:")
    movie = store.update_movie(movie_id, MovieUpdate(title=title, year=year))

    print(f"\n{movie.title}\n{movie.details}\n{movie.year}")


def delete_movie(store: MovieStore, prompter: Prompter) -> None:
    movie_id = prompter.select("Choose what movie to delete", movie_choices(store))
    if movie_id is None:
        print("No movies to delete.")
        return

    movie = store.delete_movie(movie_id)
    print(f"\n✅ Deleted '{movie.title}'")


def list_movies(store: MovieStore, prompter: Prompter) -> None:
    movies = store.list_movies(limit=PAGE_SIZE)
    if not movies:
        print("No movies found.")
        return

    print()
    print_movies(movies)


def get_movie(store: MovieStore, prompter: Prompter) -> None:
    movie_id = prompter.select("Choose a movie", movie_choices(store))
    if movie_id is None:
        print("No movies to show.")
        return

    movie = store.get_movie(movie_id)
    print("\nMovie:")
    if movie is None:
        logger.warning(f"Movie {movie_id} vanished before it could be shown")
        print("\n\n")
        return
    print_movie(movie)


def list_movies_by_genre(store: MovieStore, prompter: Prompter) -> None:
    choices = [Choice(name=genre.title, value=genre) for genre in store.list_genres()]
    genre = prompter.select("Choose a genre", choices)
    if genre is None:
        print("No genres found.")
        return

    movies = store.list_movies(limit=PAGE_SIZE, genre_id=genre.id)
    if not movies:
        print(f"No movies found for genre '{genre.title}'.")
        return

    print()
    print_movies(movies)


def add_genre(store: MovieStore, prompter: Prompter) -> None:
    title = prompter.text("Enter genre title:").strip()
    genre, created = resolve_genre(store, title)

    status = "Created genre" if created else "Genre already exists"
    print(f"\n{status}: {genre.title} (id {genre.id})")


def exit_program(store: MovieStore, prompter: Prompter) -> None:
    store.disconnect()
    sys.exit(0)


ActionHandler = Callable[[MovieStore, Prompter], None]

ACTION_HANDLERS: Dict[Action, ActionHandler] = {
    Action.ADD_MOVIE: add_movie,
    Action.UPDATE_MOVIE: update_movie,
    Action.DELETE_MOVIE: delete_movie,
    Action.LIST_MOVIES: list_movies,
    Action.GET_MOVIE: get_movie,
    Action.LIST_BY_GENRE: list_movies_by_genre,
    Action.ADD_GENRE: add_genre,
    Action.EXIT: exit_program,
}
