"""Single-round blackjack engine with state machine."""

import logging
from random import Random
from typing import Callable

from transitions import Machine, MachineError

from core.cards import Card, Deck, EmptyDeckError
from core.hand import Hand, Outcome, evaluate_hands
from core.strategy.rules import RuleSet, dealer_should_hit
from core.game.actions import (
    ACTION_PROMPT,
    ActionSource,
    InvalidActionError,
    PlayerAction,
    parse_action,
)
from core.game.events import EventEmitter, EventType, GameEvent
from core.game.state import RoundState

logger = logging.getLogger(__name__)

_OUTCOME_EVENTS = {
    Outcome.PLAYER_WINS: EventType.PLAYER_WINS,
    Outcome.DEALER_WINS: EventType.DEALER_WINS,
    Outcome.PUSH: EventType.PUSH,
}


class BlackjackRound:
    """
    One round of blackjack between a player and the dealer.

    This is the core game logic, completely UI-agnostic.
    Communication happens through events and return values only.
    """

    # State machine states
    STATES = [s.name.lower() for s in RoundState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "begin_player_turn", "source": "dealing", "dest": "player_turn"},
        {"trigger": "skip_player_turn", "source": "dealing", "dest": "dealer_turn"},
        {"trigger": "end_player_turn", "source": "player_turn", "dest": "dealer_turn"},
        {"trigger": "finish_round", "source": "dealer_turn", "dest": "resolved"},
        {
            "trigger": "abort_round",
            "source": ["dealing", "player_turn", "dealer_turn"],
            "dest": "aborted",
        },
    ]

    def __init__(
        self,
        deck: Deck | None = None,
        rules: RuleSet | None = None,
        rng: Random | None = None,
    ) -> None:
        """
        Initialize a new round.

        Args:
            deck: Deck to deal from, used in its current order. When omitted a
                fresh deck is built and shuffled as the round is dealt.
            rules: Table rules (uses defaults if not provided)
            rng: Random number generator for the fresh deck's shuffle
        """
        self.rules = rules or RuleSet()
        self._shuffle_on_deal = deck is None
        self.deck = deck if deck is not None else Deck(rng=rng)

        self.player_hand = Hand(scoring=self.rules.ace_scoring)
        self.dealer_hand = Hand(scoring=self.rules.ace_scoring)
        self.player_busted = False
        self.outcome: Outcome | None = None
        self.events = EventEmitter()

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="dealing",
            auto_transitions=False,
            model_attribute="_machine_state",
            after_state_change="_log_state",
        )

    @property
    def state(self) -> RoundState:
        """Get current round state as enum."""
        return RoundState[self._machine_state.upper()]  # type: ignore

    def _log_state(self) -> None:
        logger.debug("Round moved to %s", self.state.name)

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to round events."""
        self.events.subscribe(handler, event_type)

    @property
    def dealer_upcard(self) -> Card | None:
        """The dealer's face-up card, once dealt."""
        cards = self.dealer_hand.cards
        return cards[1] if len(cards) >= 2 else None

    @property
    def hole_card_hidden(self) -> bool:
        """Check if the dealer's first card is still face down."""
        return self.state in (RoundState.DEALING, RoundState.PLAYER_TURN)

    def _require_state(self, expected: RoundState, action: str) -> None:
        if self.state != expected:
            raise MachineError(f"Cannot {action} in state {self.state.name}")

    def _deal_card_to_hand(self, hand: Hand, face_up: bool = True) -> Card:
        """Deal a card to a hand, aborting the round if the deck is empty."""
        owner = "dealer" if hand is self.dealer_hand else "player"
        try:
            card = self.deck.draw()
        except EmptyDeckError:
            logger.error("Deck exhausted while dealing to %s", owner)
            self.events.emit_new(EventType.ROUND_ABORTED, reason="empty deck", state=self.state.name)
            self.abort_round()
            raise

        hand.add_card(card)
        logger.debug("Dealt %r to %s (%d left)", card, owner, len(self.deck))
        self.events.emit_new(
            EventType.CARD_DEALT,
            card=str(card) if face_up else "??",
            hand=owner,
            hand_value=hand.value if face_up else None,
        )
        return card

    def deal(self) -> None:
        """
        Deal the initial cards: player, player, dealer, dealer.

        The dealer's first card is the hole card and stays hidden until the
        dealer's turn.
        """
        self._require_state(RoundState.DEALING, "deal")

        if self._shuffle_on_deal:
            self.deck.shuffle()
            self.events.emit_new(EventType.DECK_SHUFFLED, cards=len(self.deck))

        self._deal_card_to_hand(self.player_hand)
        self._deal_card_to_hand(self.player_hand)
        self._deal_card_to_hand(self.dealer_hand, face_up=False)
        self._deal_card_to_hand(self.dealer_hand)

        self.events.emit_new(
            EventType.ROUND_STARTED,
            player_cards=[str(c) for c in self.player_hand],
            player_value=self.player_hand.value,
            dealer_upcard=str(self.dealer_upcard),
        )

        if self.rules.naturals and self.player_hand.is_blackjack:
            self.events.emit_new(EventType.PLAYER_BLACKJACK)
            self.skip_player_turn()
            return

        self.begin_player_turn()

    def _reject_outside_turn(self, action: str) -> bool:
        """Report a player action attempted outside the player's turn."""
        if self.state == RoundState.PLAYER_TURN:
            return False
        self.events.emit_new(
            EventType.INVALID_ACTION,
            message=f"Cannot {action} in state {self.state.name}",
            state=self.state.name,
        )
        return True

    def hit(self) -> bool:
        """Player hits (takes another card)."""
        if self._reject_outside_turn("hit"):
            return False

        card = self._deal_card_to_hand(self.player_hand)
        self.events.emit_new(
            EventType.PLAYER_HIT,
            card=str(card),
            player_cards=[str(c) for c in self.player_hand],
            hand_value=self.player_hand.value,
        )

        if self.player_hand.is_busted:
            self.player_busted = True
            self.events.emit_new(EventType.PLAYER_BUSTS, hand_value=self.player_hand.value)
            self.end_player_turn()

        return True

    def stand(self) -> bool:
        """Player stands (keeps current hand)."""
        if self._reject_outside_turn("stand"):
            return False

        self.events.emit_new(EventType.PLAYER_STAND, hand_value=self.player_hand.value)
        self.end_player_turn()
        return True

    def submit(self, raw: str) -> bool:
        """
        Apply a raw text command during the player's turn.

        Unrecognized input emits INVALID_ACTION and leaves the round
        untouched so the caller can prompt again.

        Returns:
            True if the command was applied
        """
        try:
            action = parse_action(raw)
        except InvalidActionError as exc:
            logger.debug("Rejected player input %r", exc.raw)
            self.events.emit_new(EventType.INVALID_ACTION, raw=exc.raw, message=str(exc))
            return False

        if action is PlayerAction.HIT:
            return self.hit()
        return self.stand()

    def play_player_turn(self, source: ActionSource) -> None:
        """Prompt the action source until the player stands or busts."""
        while self.state == RoundState.PLAYER_TURN:
            self.events.emit_new(EventType.ACTION_REQUESTED, prompt=ACTION_PROMPT)
            self.submit(source.next_action())

    def play_dealer(self) -> None:
        """
        Dealer reveals and plays their hand.

        Runs whether or not the player busted; the dealer never looks at the
        player's hand.
        """
        self._require_state(RoundState.DEALER_TURN, "play the dealer")

        self.events.emit_new(
            EventType.DEALER_REVEALS,
            cards=[str(c) for c in self.dealer_hand],
            hole_card=str(self.dealer_hand.cards[0]),
            hand_value=self.dealer_hand.value,
        )

        while dealer_should_hit(self.dealer_hand.value, self.rules):
            card = self._deal_card_to_hand(self.dealer_hand)
            self.events.emit_new(EventType.DEALER_HITS, card=str(card), hand_value=self.dealer_hand.value)

        if self.dealer_hand.is_busted:
            self.events.emit_new(EventType.DEALER_BUSTS, hand_value=self.dealer_hand.value)
        else:
            self.events.emit_new(EventType.DEALER_STANDS, hand_value=self.dealer_hand.value)

    def resolve(self) -> Outcome:
        """Decide the round from the final hand values."""
        self._require_state(RoundState.DEALER_TURN, "resolve")

        outcome = evaluate_hands(self.player_hand, self.dealer_hand, naturals=self.rules.naturals)
        self.outcome = outcome
        logger.info(
            "Round resolved: player %d, dealer %d -> %s",
            self.player_hand.value,
            self.dealer_hand.value,
            outcome.name,
        )

        self.events.emit_new(
            _OUTCOME_EVENTS[outcome],
            message=str(outcome),
            player_value=self.player_hand.value,
            dealer_value=self.dealer_hand.value,
        )
        self.finish_round()
        self.events.emit_new(EventType.ROUND_ENDED, outcome=outcome.name)
        return outcome

    def play(self, source: ActionSource) -> Outcome:
        """
        Play the whole round.

        Raises:
            EmptyDeckError: If the deck runs out; the round is left ABORTED.
        """
        self.deal()
        self.play_player_turn(source)
        self.play_dealer()
        return self.resolve()

    @property
    def can_hit(self) -> bool:
        """Check if hitting is allowed."""
        return self.state == RoundState.PLAYER_TURN and not self.player_hand.is_busted

    @property
    def can_stand(self) -> bool:
        """Check if standing is allowed."""
        return self.state == RoundState.PLAYER_TURN
