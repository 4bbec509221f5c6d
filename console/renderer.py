"""Text transcript of a round, driven by engine events."""

from typing import Callable

from core.game.events import EventType, GameEvent


class TranscriptRenderer:
    """
    Turns round events into the lines a player reads.

    Subscribe `handle` to a round as a catch-all handler. Events with no
    player-facing text are ignored.
    """

    def __init__(self, write: Callable[[str], None] = print) -> None:
        self._write = write
        self._formatters: dict[EventType, Callable[[GameEvent], list[str]]] = {
            EventType.ROUND_STARTED: self._round_started,
            EventType.ACTION_REQUESTED: lambda e: [e.data["prompt"]],
            EventType.INVALID_ACTION: self._invalid_action,
            EventType.PLAYER_HIT: lambda e: [_cards_line("Your cards:", e.data["player_cards"], e.data["hand_value"])],
            EventType.PLAYER_BUSTS: lambda e: ["Bust!"],
            EventType.PLAYER_BLACKJACK: lambda e: ["Blackjack!"],
            EventType.DEALER_REVEALS: self._dealer_reveals,
            EventType.DEALER_HITS: lambda e: [f"Dealer hits: {e.data['card']}"],
            EventType.DEALER_BUSTS: lambda e: ["Dealer busts!"],
            EventType.PLAYER_WINS: lambda e: [e.data["message"]],
            EventType.DEALER_WINS: lambda e: [e.data["message"]],
            EventType.PUSH: lambda e: [e.data["message"]],
            EventType.ROUND_ABORTED: lambda e: ["Round aborted: the deck ran out of cards."],
        }

    def handle(self, event: GameEvent) -> None:
        """Write the lines for one event."""
        formatter = self._formatters.get(event.event_type)
        if formatter is None:
            return
        for line in formatter(event):
            self._write(line)

    @staticmethod
    def _round_started(event: GameEvent) -> list[str]:
        return [
            _cards_line("Your cards:", event.data["player_cards"], event.data["player_value"]),
            f"Dealer shows: {event.data['dealer_upcard']}",
        ]

    @staticmethod
    def _invalid_action(event: GameEvent) -> list[str]:
        # Typed input gets the usage hint; rejected engine calls carry their own message
        if "raw" in event.data:
            return ["Invalid action. Please enter h or s."]
        return [event.data["message"]]

    @staticmethod
    def _dealer_reveals(event: GameEvent) -> list[str]:
        return ["Dealer's cards:", *event.data["cards"]]


def _cards_line(label: str, cards: list[str], value: int) -> str:
    return f"{label} {' '.join(cards)} ({value})"
