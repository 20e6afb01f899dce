"""API client implementations."""

from .blockfrost import AsyncBlockfrostClient, BlockfrostClient, BlockfrostSource

__all__ = [
    "AsyncBlockfrostClient",
    "BlockfrostClient",
    "BlockfrostSource",
]
