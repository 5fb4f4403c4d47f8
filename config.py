"""Configuration management with environment variable support."""

import logging
import os
from dataclasses import dataclass, field


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


def _parse_seed() -> int | None:
    """Parse BLACKJACK_SEED. Unset or empty means unseeded."""
    seed = os.getenv("BLACKJACK_SEED", "").strip()
    return int(seed) if seed else None


@dataclass(frozen=True)
class TableDefaults:
    """Default table configuration."""

    num_boxes: int = field(
        default_factory=lambda: int(os.getenv("BLACKJACK_NUM_BOXES", "5"))
    )
    decks_per_shoe: int = field(
        default_factory=lambda: int(os.getenv("BLACKJACK_DECKS_PER_SHOE", "6"))
    )
    max_splits_per_box: int = field(
        default_factory=lambda: int(os.getenv("BLACKJACK_MAX_SPLITS", "3"))
    )
    split_aces: bool = field(
        default_factory=lambda: _env_bool("BLACKJACK_SPLIT_ACES", "true")
    )
    blackjack_payout: float = field(
        default_factory=lambda: float(os.getenv("BLACKJACK_PAYOUT", "1.5"))
    )


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: _env_bool("DEBUG", "false"))
    log_level: str = field(
        default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING").upper()
    )
    seed: int | None = field(default_factory=_parse_seed)

    table: TableDefaults = field(default_factory=TableDefaults)

    @property
    def effective_log_level(self) -> str:
        """DEBUG overrides LOG_LEVEL."""
        return "DEBUG" if self.debug else self.log_level


def configure_logging(app_config: AppConfig | None = None) -> None:
    """Apply the configured log level to the card_core loggers."""
    app_config = app_config or config
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("card_core").setLevel(app_config.effective_log_level)


# Global configuration instance
config = AppConfig()
