"""Pytest fixtures for blackjack round tests."""

import pytest
from random import Random

from core.cards import Card, Deck
from core.hand import AceScoring, Hand
from core.strategy import RuleSet
from core.game import BlackjackRound


def _make_hand(*cards: str, scoring: AceScoring = AceScoring.OPTIMAL) -> Hand:
    hand = Hand(scoring=scoring)
    for card in cards:
        hand.add_card(Card.from_string(card))
    return hand


def _stacked_deck(*cards: str) -> Deck:
    return Deck.from_cards(Card.from_string(c) for c in cards)


@pytest.fixture
def make_hand():
    """Factory building a hand from card strings like 'AS', 'KH'."""
    return _make_hand


@pytest.fixture
def stacked_deck():
    """
    Factory for a deck that deals the given cards first, in order.

    Deal order is player, player, dealer hole card, dealer upcard, then hits.
    """
    return _stacked_deck


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    d = Deck(rng=rng)
    d.shuffle()
    return d


@pytest.fixture
def empty_hand():
    """An empty player hand."""
    return Hand()


@pytest.fixture
def blackjack_hand():
    """A two-card 21 (A-K)."""
    return _make_hand("AS", "KH")


@pytest.fixture
def soft_17_hand():
    """A soft 17 hand (A-6)."""
    return _make_hand("AS", "6H")


@pytest.fixture
def hard_16_hand():
    """A hard 16 hand (10-6)."""
    return _make_hand("10S", "6H")


@pytest.fixture
def bust_hand():
    """A busted hand (10-9-5)."""
    return _make_hand("10S", "9H", "5C")


@pytest.fixture
def rules():
    """Default ruleset."""
    return RuleSet()


@pytest.fixture
def legacy_rules():
    """Ruleset with the one-shot soft Ace flag."""
    return RuleSet.legacy()


@pytest.fixture
def game(rng):
    """A new round dealing from a freshly shuffled deck."""
    return BlackjackRound(rng=rng)
