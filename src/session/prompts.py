"""Blocking terminal prompts used by the session loop and its actions."""

import os
from dataclasses import dataclass
from typing import Any, Optional, Sequence


@dataclass(frozen=True)
class Choice:
    """One entry of a selection list: a display label and an opaque value."""

    name: str
    value: Any


class Prompter:
    """Synchronous request/response prompts over stdin and stdout."""

    def text(self, message: str) -> str:
        return input(f"{message} ")

    def select(self, message: str, choices: Sequence[Choice]) -> Optional[Any]:
        """Show a numbered list and return the chosen value.

        Returns None when there is nothing to choose from. Anything other than
        a listed number is rejected and asked again.
        """
        if not choices:
            print(f"{message} (no choices available)")
            return None

        print(message)
        for i, choice in enumerate(choices, 1):
            print(f"  {i}. {choice.name}")

        while True:
            answer = input(f"Enter a number (1-{len(choices)}): ").strip()
            if answer.isdecimal() and 1 <= int(answer) <= len(choices):
                return choices[int(answer) - 1].value
            print("⚠️  Invalid choice, try again.")

    def pause(self) -> None:
        input("Press Enter to continue...")

    def clear(self) -> None:
        os.system("cls" if os.name == "nt" else "clear")
