"""Query-string pagination for list endpoints.

List endpoints accept ``count`` (page size, at most 100), ``page`` (1-based)
and ``order``. The helpers here build that fragment and walk pages until the
API returns a short one.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import AsyncIterator, Awaitable, Callable, Iterator, List, TypeVar

from blockfrost_sleuth.core.exceptions import ConfigurationError

T = TypeVar("T")

MAX_COUNT = 100


class Order(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class Pagination:
    """Which page of a list endpoint to request."""

    count: int = MAX_COUNT
    page: int = 1
    order: Order = Order.ASC
    fetch_all: bool = False  # walk every page starting at ``page``

    def __post_init__(self):
        if not 1 <= self.count <= MAX_COUNT:
            raise ConfigurationError(
                f"count must be between 1 and {MAX_COUNT}, got {self.count}"
            )
        if self.page < 1:
            raise ConfigurationError(f"page must be at least 1, got {self.page}")
        # Accept plain strings such as "desc"
        object.__setattr__(self, "order", Order(self.order))

    @classmethod
    def all(cls, order: Order = Order.ASC) -> "Pagination":
        return cls(order=order, fetch_all=True)

    def next_page(self) -> "Pagination":
        return replace(self, page=self.page + 1)

    def to_query(self) -> str:
        return f"count={self.count}&page={self.page}&order={self.order.value}"


def append_query(url: str, pagination: Pagination) -> str:
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{pagination.to_query()}"


def iter_pages(
    fetch_page: Callable[[Pagination], List[T]], pagination: Pagination
) -> Iterator[T]:
    """Yield items from consecutive pages until a page comes back short."""
    while True:
        items = fetch_page(pagination)
        yield from items
        if len(items) < pagination.count:
            return
        pagination = pagination.next_page()


async def async_iter_pages(
    fetch_page: Callable[[Pagination], Awaitable[List[T]]], pagination: Pagination
) -> AsyncIterator[T]:
    """Async counterpart of :func:`iter_pages`."""
    while True:
        items = await fetch_page(pagination)
        for item in items:
            yield item
        if len(items) < pagination.count:
            return
        pagination = pagination.next_page()
