"""Session package initialization."""

from .actions import ACTION_HANDLERS, Action
from .loop import run_session
from .prompts import Choice, Prompter

__all__ = ["Action", "ACTION_HANDLERS", "Choice", "Prompter", "run_session"]
