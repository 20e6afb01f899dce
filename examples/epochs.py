#!/usr/bin/env python3
"""
Fetch the current epoch and load its blocks into DuckDB.

Requires BLOCKFROST_PROJECT_ID in the environment or a .env file.
"""

import asyncio
import logging

import dlt

from blockfrost_sleuth import AsyncBlockfrostClient, BlockfrostClient, BlockfrostSource
from blockfrost_sleuth.utils import setup_logging

logger = logging.getLogger(__name__)


async def show_network_state():
    async with AsyncBlockfrostClient() as client:
        epoch, health = await asyncio.gather(client.epochs_latest(), client.health())
    logger.info(f"Epoch {epoch.epoch}: {epoch.block_count} blocks, healthy={health.is_healthy}")
    return epoch.epoch


def load_epoch_blocks(epoch: int):
    with BlockfrostClient() as client:
        source = BlockfrostSource(client)
        pipeline = dlt.pipeline(
            pipeline_name="blockfrost_epochs",
            destination="duckdb",
            dataset_name="cardano",
        )
        load_info = pipeline.run(source.epoch_blocks(epoch), write_disposition="merge")
    logger.info(load_info)


if __name__ == "__main__":
    setup_logging()
    current_epoch = asyncio.run(show_network_state())
    load_epoch_blocks(current_epoch - 1)
