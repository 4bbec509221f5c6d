"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field

from core.hand import AceScoring
from core.strategy.rules import RuleSet


def _env_flag(name: str, default: str = "false") -> bool:
    """Read a true/false environment variable."""
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int | None = None) -> int | None:
    """Read an integer environment variable; unset or empty gives the default."""
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class GameConfig:
    """Default round configuration."""

    seed: int | None = field(default_factory=lambda: _env_int("BLACKJACK_SEED"))
    dealer_stands_on: int = field(
        default_factory=lambda: _env_int("BLACKJACK_DEALER_STANDS_ON", 17)
    )
    legacy_aces: bool = field(default_factory=lambda: _env_flag("BLACKJACK_LEGACY_ACES"))
    naturals: bool = field(default_factory=lambda: _env_flag("BLACKJACK_NATURALS"))

    def to_rules(self) -> RuleSet:
        """Build the table rules for a round."""
        return RuleSet(
            dealer_stands_on=self.dealer_stands_on,
            ace_scoring=AceScoring.LEGACY if self.legacy_aces else AceScoring.OPTIMAL,
            naturals=self.naturals,
        )


@dataclass(frozen=True)
class LogConfig:
    """Logging configuration."""

    level: str = field(default_factory=lambda: os.getenv("BLACKJACK_LOG_LEVEL", "WARNING").upper())
    format: str = "[%(asctime)s] %(levelname)s - %(message)s"
    datefmt: str = "%H:%M:%S"


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    game: GameConfig = field(default_factory=GameConfig)
    log: LogConfig = field(default_factory=LogConfig)


# Global configuration instance
config = AppConfig()
