"""Round state enumeration."""

from enum import Enum, auto


class RoundState(Enum):
    """
    Round state machine states.

    Flow: DEALING → PLAYER_TURN → DEALER_TURN → RESOLVED
    """

    # Initial cards being dealt
    DEALING = auto()

    # Player hits or stands
    PLAYER_TURN = auto()

    # Dealer reveals and plays out its hand
    DEALER_TURN = auto()

    # Outcome decided
    RESOLVED = auto()

    # Deck ran out mid-round
    ABORTED = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()
