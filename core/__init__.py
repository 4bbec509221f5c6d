"""Core blackjack engine - 100% UI-agnostic."""

from core.cards import Card, Deck, EmptyDeckError, Rank, Suit
from core.hand import AceScoring, Hand, Outcome, evaluate_hands, resolve_values

__all__ = [
    "Card",
    "Deck",
    "EmptyDeckError",
    "Rank",
    "Suit",
    "AceScoring",
    "Hand",
    "Outcome",
    "evaluate_hands",
    "resolve_values",
]
