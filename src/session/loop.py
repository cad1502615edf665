"""Menu / dispatch / pause cycle of the interactive session."""

import logging
from typing import Mapping, Optional

from session.actions import ACTION_HANDLERS, Action, ActionHandler
from session.prompts import Choice, Prompter
from store.movie_store import MovieStore

logger = logging.getLogger(__name__)

MENU_CHOICES = [Choice(name=action.value, value=action) for action in Action]


def report_error(error: Exception) -> None:
    print(f"❌ An error occurred: {error}")
    print("Please try again.")


def run_action(
    action: Action,
    store: MovieStore,
    prompter: Prompter,
    handlers: Mapping[Action, ActionHandler] = ACTION_HANDLERS,
) -> bool:
    """Run one handler. Errors are reported, never propagated.

    Returns True if the handler completed without raising.
    """
    try:
        handlers[action](store, prompter)
        return True
    except Exception as e:
        logger.exception(f"Action '{action.value}' failed")
        report_error(e)
        return False


def run_session(
    store: MovieStore,
    prompter: Optional[Prompter] = None,
    handlers: Mapping[Action, ActionHandler] = ACTION_HANDLERS,
) -> None:
    """Loop until the Exit action ends the process."""
    prompter = prompter or Prompter()

    while True:
        prompter.clear()
        try:
            action = prompter.select("Select an action:", MENU_CHOICES)
        except Exception as e:
            logger.exception("Menu selection failed")
            report_error(e)
        else:
            logger.debug(f"Selected action: {action.value}")
            run_action(action, store, prompter, handlers)

        print()
        prompter.pause()
