"""Hand evaluation for blackjack."""

from enum import Enum, auto
from typing import Iterator

from core.cards import Card

BUST_LIMIT = 21


class AceScoring(Enum):
    """How a hand decides whether an Ace counts as 11."""

    # Best total recomputed on every read
    OPTIMAL = auto()

    # One-shot soft flag set when an Ace lands on a total of 10 or less
    LEGACY = auto()


class Outcome(Enum):
    """Result of a resolved round."""

    PLAYER_WINS = "Player wins!"
    DEALER_WINS = "Dealer wins!"
    PUSH = "Push!"

    def __str__(self) -> str:
        return self.value


class Hand:
    """A blackjack hand with value calculation."""

    def __init__(self, scoring: AceScoring = AceScoring.OPTIMAL) -> None:
        self._cards: list[Card] = []
        self._scoring = scoring
        self._soft_flag = False

    @property
    def cards(self) -> tuple[Card, ...]:
        """Return the cards held, in the order received."""
        return tuple(self._cards)

    @property
    def scoring(self) -> AceScoring:
        """Return the Ace scoring mode of this hand."""
        return self._scoring

    def add_card(self, card: Card) -> None:
        """
        Add a card to the hand.

        Under LEGACY scoring an Ace arriving while the hand is worth 10 or
        less turns the soft flag on for the rest of the hand.
        """
        self._cards.append(card)
        if self._scoring is AceScoring.LEGACY and card.is_ace:
            if self.value <= 10:
                self._soft_flag = True

    @property
    def value(self) -> int:
        """
        Calculate the hand value.

        A busted hand reports its (over 21) total; nothing is clamped.
        """
        if self._scoring is AceScoring.LEGACY:
            return self._legacy_value()
        return self._optimal_value()

    def _optimal_value(self) -> int:
        hard_total = sum(card.value for card in self._cards)
        # Two Aces at 11 always bust, so at most one is ever upgraded
        if self._has_ace and hard_total + 10 <= BUST_LIMIT:
            return hard_total + 10
        return hard_total

    def _legacy_value(self) -> int:
        total = 0
        for card in self._cards:
            if card.is_ace and self._soft_flag and total + 11 <= BUST_LIMIT:
                total += 11
            else:
                total += card.value
        return total

    @property
    def _has_ace(self) -> bool:
        return any(card.is_ace for card in self._cards)

    @property
    def soft(self) -> bool:
        """
        Return the soft state as tracked by the scoring mode.

        LEGACY hands report the stored flag, which stays set even after the
        Ace has fallen back to 1. OPTIMAL hands report `is_soft`.
        """
        if self._scoring is AceScoring.LEGACY:
            return self._soft_flag
        return self.is_soft

    @property
    def is_soft(self) -> bool:
        """Check if the current value counts an Ace as 11."""
        if not self._has_ace:
            return False
        hard_total = sum(card.value for card in self._cards)
        return self.value > hard_total

    @property
    def is_hard(self) -> bool:
        """Check if the hand is hard (not soft)."""
        return not self.is_soft

    @property
    def is_blackjack(self) -> bool:
        """Check if the hand is a natural (21 with 2 cards)."""
        return len(self._cards) == 2 and self.value == BUST_LIMIT

    @property
    def is_busted(self) -> bool:
        """Check if the hand has busted (value > 21)."""
        return self.value > BUST_LIMIT

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(card) for card in self._cards)
        value_str = f"({self.value})"
        if self.is_soft:
            value_str = f"(soft {self.value})"
        if self.is_busted:
            value_str = f"(BUST {self.value})"
        return f"{cards_str} {value_str}"

    def __repr__(self) -> str:
        return f"Hand({self._cards!r}, value={self.value}, scoring={self._scoring.name})"


def resolve_values(player_value: int, dealer_value: int) -> Outcome:
    """
    Decide a round from the two final totals.

    Clauses are checked in order, so a busted player loses even when the
    dealer has busted too.
    """
    player_busted = player_value > BUST_LIMIT
    dealer_busted = dealer_value > BUST_LIMIT

    if player_busted or (not dealer_busted and dealer_value > player_value):
        return Outcome.DEALER_WINS
    if dealer_busted or (not player_busted and player_value > dealer_value):
        return Outcome.PLAYER_WINS
    return Outcome.PUSH


def evaluate_hands(player_hand: Hand, dealer_hand: Hand, naturals: bool = False) -> Outcome:
    """
    Compare player and dealer hands.

    Args:
        player_hand: The player's final hand
        dealer_hand: The dealer's final hand
        naturals: When True a two-card 21 beats any other 21 and two
            naturals push. Off by default.

    Returns:
        The round outcome
    """
    if naturals:
        player_bj = player_hand.is_blackjack
        dealer_bj = dealer_hand.is_blackjack

        if player_bj and dealer_bj:
            return Outcome.PUSH
        if player_bj:
            return Outcome.PLAYER_WINS
        if dealer_bj:
            return Outcome.DEALER_WINS

    return resolve_values(player_hand.value, dealer_hand.value)
