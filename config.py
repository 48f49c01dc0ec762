"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field
from random import Random


def _parse_seed() -> int | None:
    """Parse TERMJACK_SEED environment variable."""
    seed = os.getenv("TERMJACK_SEED", "").strip()
    return int(seed) if seed else None


@dataclass(frozen=True)
class GameConfig:
    """Deck and shuffling configuration. Dealer rules are fixed."""

    seed: int | None = field(default_factory=_parse_seed)
    shuffle_passes: int = field(
        default_factory=lambda: int(os.getenv("TERMJACK_SHUFFLE_PASSES", "1"))
    )

    def __post_init__(self) -> None:
        if self.shuffle_passes < 1:
            raise ValueError("shuffle_passes must be at least 1")

    def make_rng(self) -> Random:
        """Build the random number generator used for shuffling."""
        return Random(self.seed)


@dataclass(frozen=True)
class DisplayConfig:
    """Terminal display configuration."""

    use_color: bool = field(default_factory=lambda: "NO_COLOR" not in os.environ)
    event_log_lines: int = 4


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(
        default_factory=lambda: os.getenv("TERMJACK_DEBUG", "false").lower() == "true"
    )

    game: GameConfig = field(default_factory=GameConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)


# Global configuration instance
config = AppConfig()
