"""Tests for pagination helpers."""

import pytest

from blockfrost_sleuth import ConfigurationError, Order, Pagination
from blockfrost_sleuth.pagination import append_query, async_iter_pages, iter_pages


def test_default_query():
    assert Pagination().to_query() == "count=100&page=1&order=asc"


def test_order_accepts_plain_strings():
    assert Pagination(order="desc").order is Order.DESC


@pytest.mark.parametrize("kwargs", [{"count": 0}, {"count": 101}, {"page": 0}])
def test_invalid_values_are_rejected(kwargs):
    with pytest.raises(ConfigurationError):
        Pagination(**kwargs)


def test_next_page_keeps_other_fields():
    pagination = Pagination(count=10, page=3, order=Order.DESC)

    assert pagination.next_page() == Pagination(count=10, page=4, order=Order.DESC)


def test_all_sets_fetch_all():
    assert Pagination.all().fetch_all
    assert not Pagination().fetch_all


def test_append_query():
    page = Pagination(count=5, page=2)

    assert append_query("/epochs/1/blocks", page) == "/epochs/1/blocks?count=5&page=2&order=asc"
    assert (
        append_query("/epochs/1/blocks?foo=bar", page)
        == "/epochs/1/blocks?foo=bar&count=5&page=2&order=asc"
    )


def make_pages(total, count):
    items = list(range(total))
    requested = []

    def fetch_page(page):
        requested.append(page.page)
        start = (page.page - 1) * page.count
        return items[start : start + page.count]

    return fetch_page, requested, items


def test_iter_pages_stops_on_short_page():
    fetch_page, requested, items = make_pages(total=25, count=10)

    assert list(iter_pages(fetch_page, Pagination(count=10))) == items
    assert requested == [1, 2, 3]


def test_iter_pages_requests_one_extra_page_on_exact_multiple():
    fetch_page, requested, items = make_pages(total=20, count=10)

    assert list(iter_pages(fetch_page, Pagination(count=10))) == items
    assert requested == [1, 2, 3]


def test_iter_pages_starts_at_given_page():
    fetch_page, requested, items = make_pages(total=25, count=10)

    assert list(iter_pages(fetch_page, Pagination(count=10, page=2))) == items[10:]
    assert requested == [2, 3]


@pytest.mark.asyncio
async def test_async_iter_pages():
    fetch_page, requested, items = make_pages(total=15, count=10)

    async def fetch_page_async(page):
        return fetch_page(page)

    result = [item async for item in async_iter_pages(fetch_page_async, Pagination(count=10))]

    assert result == items
    assert requested == [1, 2]
