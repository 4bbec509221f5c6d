"""Table rules and dealer play."""

from core.strategy.rules import RuleSet, dealer_should_hit

__all__ = [
    "RuleSet",
    "dealer_should_hit",
]
