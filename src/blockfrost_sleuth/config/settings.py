"""Centralized configuration management for blockfrost_sleuth."""

import os
from typing import Optional
from dataclasses import dataclass, field
from dotenv import load_dotenv

from blockfrost_sleuth.core.exceptions import ConfigurationError

load_dotenv()


def _env_number(name: str, default: str, cast):
    raw = os.getenv(name, default)
    try:
        return cast(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from e


@dataclass(frozen=True)
class RetrySettings:
    """How many times a request may be sent and how long to wait in between.

    ``amount`` is the total number of sends, so ``amount=1`` means no retry.
    """

    amount: int = 3
    delay: float = 1.0  # seconds between rate-limited attempts

    def __post_init__(self):
        if self.amount < 1:
            raise ConfigurationError(
                f"Retry amount must be at least 1, got {self.amount}"
            )
        if self.delay < 0:
            raise ConfigurationError(
                f"Retry delay must not be negative, got {self.delay}"
            )


@dataclass
class APIs:
    """API-specific settings."""

    project_id: Optional[str] = None
    retry_amount: Optional[int] = None
    retry_delay: Optional[float] = None
    timeout: Optional[float] = None

    def __post_init__(self):
        # Load from environment if not provided
        if self.project_id is None:
            self.project_id = os.getenv("BLOCKFROST_PROJECT_ID")
        if self.retry_amount is None:
            self.retry_amount = _env_number("BLOCKFROST_RETRY_AMOUNT", "3", int)
        if self.retry_delay is None:
            self.retry_delay = _env_number("BLOCKFROST_RETRY_DELAY", "1.0", float)
        if self.timeout is None:
            self.timeout = _env_number("BLOCKFROST_TIMEOUT", "30", float)

    @property
    def retry_settings(self) -> RetrySettings:
        return RetrySettings(amount=self.retry_amount, delay=self.retry_delay)


class APIUrls:
    """API endpoint URLs."""

    CARDANO_MAINNET = "https://cardano-mainnet.blockfrost.io/api/v0"
    CARDANO_PREPROD = "https://cardano-preprod.blockfrost.io/api/v0"
    CARDANO_PREVIEW = "https://cardano-preview.blockfrost.io/api/v0"
    IPFS = "https://ipfs.blockfrost.io/api/v0"

    NETWORKS = {
        "mainnet": CARDANO_MAINNET,
        "preprod": CARDANO_PREPROD,
        "preview": CARDANO_PREVIEW,
        "ipfs": IPFS,
    }


def get_base_url(project_id: str) -> str:
    """Pick the API base URL from the network prefix of a project id."""
    if project_id.startswith("testnet"):
        raise ConfigurationError(
            "The legacy testnet network is retired; use a preprod or preview project id"
        )
    for network, url in APIUrls.NETWORKS.items():
        if project_id.startswith(network):
            return url

    available = ", ".join(APIUrls.NETWORKS)
    raise ConfigurationError(
        f"Cannot infer network from project id. Expected a prefix among: {available}"
    )


@dataclass
class Settings:
    """Main settings class."""

    api: APIs = field(default_factory=APIs)
    api_urls: APIUrls = field(default_factory=APIUrls)


# Global settings instance
settings = Settings()
