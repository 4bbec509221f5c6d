"""Table rules and the fixed dealer strategy."""

from dataclasses import dataclass

from core.hand import AceScoring


@dataclass(frozen=True)
class RuleSet:
    """
    Blackjack table rules configuration.

    Everything that changes how a single round plays out.
    """

    # Dealer draws while below this total
    dealer_stands_on: int = 17

    # Hand scoring
    ace_scoring: AceScoring = AceScoring.OPTIMAL

    # Two-card 21 beats other 21s and ends the player's turn
    naturals: bool = False

    def __post_init__(self) -> None:
        """Validate rule combinations."""
        if not 12 <= self.dealer_stands_on <= 21:
            raise ValueError("dealer_stands_on must be between 12 and 21")
        if not isinstance(self.ace_scoring, AceScoring):
            raise ValueError(f"Unknown ace scoring: {self.ace_scoring!r}")

    @classmethod
    def standard(cls) -> "RuleSet":
        """Dealer stands on 17, best Ace total, no natural bonus."""
        return cls()

    @classmethod
    def legacy(cls) -> "RuleSet":
        """Same table with the one-shot soft Ace flag."""
        return cls(ace_scoring=AceScoring.LEGACY)


def dealer_should_hit(value: int, rules: RuleSet | None = None) -> bool:
    """
    Determine if the dealer draws another card.

    The dealer only looks at its own total, never at the player's hand.
    """
    rules = rules or RuleSet()
    return value < rules.dealer_stands_on
