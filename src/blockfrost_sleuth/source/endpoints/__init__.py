"""Endpoint method groups.

Each group only calls ``self._get``, ``self._get_paged`` and ``self._post``.
On the async client these return coroutines, so the same methods are
awaited there.
"""

from .epochs import EpochsEndpoints
from .health import HealthEndpoints
from .transactions import TransactionsEndpoints

__all__ = [
    "EpochsEndpoints",
    "HealthEndpoints",
    "TransactionsEndpoints",
]
