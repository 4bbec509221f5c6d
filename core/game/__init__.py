"""Round engine and state management."""

from core.game.actions import (
    ActionSource,
    ConsoleActionSource,
    InvalidActionError,
    PlayerAction,
    ScriptedActionSource,
    parse_action,
)
from core.game.events import GameEvent, EventType
from core.game.state import RoundState
from core.game.engine import BlackjackRound

__all__ = [
    "ActionSource",
    "ConsoleActionSource",
    "InvalidActionError",
    "PlayerAction",
    "ScriptedActionSource",
    "parse_action",
    "GameEvent",
    "EventType",
    "RoundState",
    "BlackjackRound",
]
