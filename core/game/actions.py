"""Player actions and the sources that supply them."""

from enum import Enum
from typing import Callable, Iterable, Protocol

ACTION_PROMPT = "Hit (h) or Stand (s)?"


class InvalidActionError(ValueError):
    """Raised when player input is not a recognized action."""

    def __init__(self, raw: str) -> None:
        super().__init__(f"Unrecognized action: {raw!r}")
        self.raw = raw


class PlayerAction(Enum):
    """Actions available during the player's turn."""

    HIT = "h"
    STAND = "s"

    def __str__(self) -> str:
        return self.name.lower()


def parse_action(raw: str) -> PlayerAction:
    """
    Parse a single-token command into an action.

    Surrounding whitespace is ignored; commands are case-sensitive.

    Raises:
        InvalidActionError: For anything other than "h" or "s"
    """
    token = raw.strip()
    try:
        return PlayerAction(token)
    except ValueError:
        raise InvalidActionError(raw) from None


class ActionSource(Protocol):
    """Anything that can answer the hit-or-stand prompt."""

    def next_action(self) -> str:
        """Block until the player's next command is available and return it raw."""
        ...


class ConsoleActionSource:
    """Reads one command per line from a text stream."""

    def __init__(self, reader: Callable[[], str] = input) -> None:
        self._reader = reader

    def next_action(self) -> str:
        return self._reader()


class ScriptedActionSource:
    """
    Replays a fixed list of commands.

    Raises EOFError once the script is exhausted, like input() does at the
    end of a piped stream.
    """

    def __init__(self, commands: Iterable[str]) -> None:
        self._commands = list(commands)
        self._position = 0

    def next_action(self) -> str:
        if self._position >= len(self._commands):
            raise EOFError("Scripted actions exhausted")
        command = self._commands[self._position]
        self._position += 1
        return command
