"""Tests for the dlt resources built on paged endpoints."""

from unittest.mock import MagicMock

from blockfrost_sleuth import BlockfrostClient, BlockfrostSource, Pagination
from blockfrost_sleuth.models import AddressStake, AddressStakePool


def make_source():
    client = MagicMock(spec=BlockfrostClient)
    return BlockfrostSource(client), client


def test_available_sources():
    source, _ = make_source()

    assert source.get_available_sources() == ["epoch_blocks", "epoch_stakes"]


def test_epoch_blocks_pages_until_short_page():
    source, client = make_source()
    first = [f"hash{i}" for i in range(100)]
    client.epochs_blocks.side_effect = [first, ["hash100"]]

    rows = list(source.epoch_blocks(225))

    assert len(rows) == 101
    assert rows[0] == {"epoch": 225, "hash": "hash0"}
    assert rows[-1] == {"epoch": 225, "hash": "hash100"}
    pages = [c.args[1] for c in client.epochs_blocks.call_args_list]
    assert pages == [Pagination(page=1), Pagination(page=2)]


def test_epoch_stakes_rows():
    source, client = make_source()
    client.epochs_stakes.return_value = [
        AddressStakePool(stake_address="stake1u9", pool_id="pool1", amount="100"),
    ]

    rows = list(source.epoch_stakes(225))

    assert rows == [
        {"stake_address": "stake1u9", "pool_id": "pool1", "amount": "100", "epoch": 225}
    ]


def test_epoch_stakes_for_one_pool():
    source, client = make_source()
    client.epochs_stakes_by_pool.return_value = [
        AddressStake(stake_address="stake1u9", amount="100"),
    ]

    rows = list(source.epoch_stakes(225, pool_id="pool1"))

    assert rows == [
        {"stake_address": "stake1u9", "amount": "100", "pool_id": "pool1", "epoch": 225}
    ]
    client.epochs_stakes_by_pool.assert_called_once_with(225, "pool1", Pagination())
