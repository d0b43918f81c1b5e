"""Configuration management for bank-ledger."""

from dataclasses import dataclass, field

from bank_ledger.exceptions import ConfigurationError
from bank_ledger.ledger.account import DEFAULT_DATE_FORMAT
from bank_ledger.ledger.numbering import DEFAULT_SEED

LOG_FORMATS = ("standard", "json")


@dataclass
class NumberingConfig:
    """Account number sequence configuration."""

    seed: int = DEFAULT_SEED


@dataclass
class DisplayConfig:
    """History rendering configuration."""

    date_format: str = DEFAULT_DATE_FORMAT


@dataclass
class LedgerConfig:
    """Main configuration for bank-ledger."""

    numbering: NumberingConfig = field(default_factory=NumberingConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    log_level: str = "WARNING"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "LedgerConfig":
        """Create config from environment variables."""
        import os

        seed_str = os.getenv("ACCOUNT_NUMBER_SEED")
        if seed_str:
            try:
                seed = int(seed_str)
            except ValueError:
                raise ConfigurationError(
                    f"ACCOUNT_NUMBER_SEED must be an integer, got {seed_str!r}"
                ) from None
            if seed < 0:
                raise ConfigurationError("ACCOUNT_NUMBER_SEED must be non-negative")
        else:
            seed = DEFAULT_SEED

        log_format = os.getenv("LOG_FORMAT", "standard").lower()
        if log_format not in LOG_FORMATS:
            raise ConfigurationError(f"LOG_FORMAT must be one of {LOG_FORMATS}, got {log_format!r}")

        return cls(
            numbering=NumberingConfig(seed=seed),
            display=DisplayConfig(
                date_format=os.getenv("HISTORY_DATE_FORMAT", DEFAULT_DATE_FORMAT),
            ),
            log_level=os.getenv("LOG_LEVEL", "WARNING"),
            log_format=log_format,
        )
