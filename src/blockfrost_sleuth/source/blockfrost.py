"""Blockfrost API client implementations."""

import dlt
from typing import Dict, List, Optional

import httpx

from blockfrost_sleuth.config.settings import RetrySettings
from blockfrost_sleuth.core.base import APIConfig, BaseAPIClient, BaseAsyncAPIClient, BaseSource
from blockfrost_sleuth.pagination import Order, Pagination, iter_pages
from .endpoints import EpochsEndpoints, HealthEndpoints, TransactionsEndpoints


class BlockfrostEndpoints(HealthEndpoints, EpochsEndpoints, TransactionsEndpoints):
    """Every endpoint group plus the headers Blockfrost expects."""

    config: APIConfig

    def _build_headers(self) -> Dict[str, str]:
        """Build headers with the project id as API key."""
        headers = {"User-Agent": self.config.user_agent}
        if self.config.project_id:
            headers["project_id"] = self.config.project_id
        return headers


class BlockfrostClient(BlockfrostEndpoints, BaseAPIClient):
    """Synchronous Blockfrost API client.

    Example:
        with BlockfrostClient("mainnetXXXX") as client:
            epoch = client.epochs_latest()
            blocks = client.epochs_blocks(epoch.epoch, Pagination.all())
    """

    def __init__(
        self,
        project_id: Optional[str] = None,
        base_url: Optional[str] = None,
        retry_settings: Optional[RetrySettings] = None,
        config: Optional[APIConfig] = None,
    ):
        super().__init__(
            config or APIConfig.from_settings(project_id, base_url, retry_settings)
        )


class AsyncBlockfrostClient(BlockfrostEndpoints, BaseAsyncAPIClient):
    """Asyncio Blockfrost API client; endpoint methods must be awaited.

    Example:
        async with AsyncBlockfrostClient("mainnetXXXX") as client:
            epoch, health = await asyncio.gather(
                client.epochs_latest(), client.health()
            )
    """

    def __init__(
        self,
        project_id: Optional[str] = None,
        base_url: Optional[str] = None,
        retry_settings: Optional[RetrySettings] = None,
        config: Optional[APIConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(
            config or APIConfig.from_settings(project_id, base_url, retry_settings),
            transport=transport,
        )


class BlockfrostSource(BaseSource):
    """Creating DLT resources for paged Blockfrost data."""

    def __init__(self, client: BlockfrostClient):
        super().__init__(client)

    def get_available_sources(self) -> List[str]:
        """Return list of available source names."""
        return ["epoch_blocks", "epoch_stakes"]

    def epoch_blocks(self, number: int, order: Order = Order.ASC):
        """Block hashes minted during an epoch."""

        def _fetch():
            self.logger.info(f"Fetching blocks of epoch {number}")
            pages = iter_pages(
                lambda page: self.client.epochs_blocks(number, page),
                Pagination(order=order),
            )
            for block_hash in pages:
                yield {"epoch": number, "hash": block_hash}

        return dlt.resource(_fetch, name="epoch_blocks", primary_key="hash")

    def epoch_stakes(self, number: int, pool_id: Optional[str] = None):
        """Active stake distribution of an epoch, optionally for one pool."""

        def fetch_page(page: Pagination):
            if pool_id is None:
                return self.client.epochs_stakes(number, page)
            return self.client.epochs_stakes_by_pool(number, pool_id, page)

        def _fetch():
            self.logger.info(f"Fetching stakes of epoch {number}")
            for stake in iter_pages(fetch_page, Pagination()):
                item = stake.model_dump()
                item.setdefault("pool_id", pool_id)
                item["epoch"] = number
                yield item

        return dlt.resource(
            _fetch,
            name="epoch_stakes",
            primary_key=("epoch", "stake_address"),
            columns={"amount": {"data_type": "text"}},
        )
