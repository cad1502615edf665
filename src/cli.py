"""Interactive command-line interface for the movie catalog."""

import logging
import sys

from sqlalchemy.exc import SQLAlchemyError

from config import AppConfig, ConfigurationError, load_config
from session.loop import run_session
from session.prompts import Prompter
from store.database import Database
from store.movie_store import MovieStore


def setup_logging(config: AppConfig) -> None:
    """Setup logging configuration."""
    level = logging.DEBUG if config.debug else getattr(
        logging, config.log_level, logging.INFO
    )
    handlers = [logging.FileHandler(config.log_file)]
    if config.debug:
        handlers.append(logging.StreamHandler(sys.stdout))

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def connect_store(config: AppConfig) -> MovieStore:
    """Open the database, make sure the schema exists and wrap it in a store."""
    database = Database(config.database_url, echo=config.sql_echo)
    database.connect()
    database.create_schema()
    return MovieStore(database)


def main() -> None:
    """Main CLI function."""
    try:
        config = load_config()
    except ConfigurationError as e:
        print(f"❌ {e}")
        sys.exit(1)

    setup_logging(config)

    try:
        store = connect_store(config)
    except SQLAlchemyError as e:
        print(f"❌ Could not connect to the database: {e}")
        logging.error(f"Startup failed: {e}")
        sys.exit(1)

    try:
        run_session(store, Prompter())
    except (KeyboardInterrupt, EOFError):
        print("\n⚠️  Operation cancelled by user")
        store.disconnect()
        sys.exit(0)


if __name__ == "__main__":
    main()
