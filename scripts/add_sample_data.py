#!/usr/bin/env python3
"""Add sample movie data to the catalog database."""

import os
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), "..", "src"))


def main() -> int:
    print("🎬 Adding Sample Movie Data")
    print("=" * 40)

    from config import ConfigurationError, load_config
    from session.sample_data import add_sample_movies
    from store.database import Database
    from store.movie_store import MovieStore

    try:
        config = load_config()
    except ConfigurationError as e:
        print(f"❌ {e}")
        return 1

    database = Database(config.database_url, echo=config.sql_echo)
    database.connect()
    database.create_schema()
    store = MovieStore(database)

    try:
        added = add_sample_movies(store)
        for movie in added:
            print(f"✅ Added '{movie.title}' ({', '.join(movie.genre_titles)})")

        print(f"\n🎉 {len(added)} movies added, {len(store.list_genres())} genres in catalog")
        return 0
    finally:
        store.disconnect()


if __name__ == "__main__":
    sys.exit(main())
