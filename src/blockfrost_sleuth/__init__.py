"""Blockfrost Sleuth - typed client for the Blockfrost Cardano API."""

from .config import settings, Settings, RetrySettings
from .core.base import APIConfig
from .core.exceptions import (
    APIError,
    BlockfrostSleuthError,
    ConfigurationError,
    DecodingError,
    RequestDuplicationError,
    ResponseError,
    TransportError,
    UnrecognizedResponseError,
)
from .pagination import Order, Pagination
from .source import AsyncBlockfrostClient, BlockfrostClient, BlockfrostSource

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "settings",
    "Settings",
    "RetrySettings",
    "APIConfig",
    # Clients
    "BlockfrostClient",
    "AsyncBlockfrostClient",
    "BlockfrostSource",
    # Pagination
    "Order",
    "Pagination",
    # Errors
    "APIError",
    "BlockfrostSleuthError",
    "ConfigurationError",
    "DecodingError",
    "RequestDuplicationError",
    "ResponseError",
    "TransportError",
    "UnrecognizedResponseError",
]
