"""Shared fixtures and sample payloads."""

import json
from unittest.mock import MagicMock

import pytest
import requests

from blockfrost_sleuth import BlockfrostClient, RetrySettings

BASE_URL = "https://cardano-mainnet.blockfrost.io/api/v0"
PROJECT_ID = "mainnetTestProjectId"

EPOCH = {
    "epoch": 225,
    "start_time": 1603403091,
    "end_time": 1603835086,
    "first_block_time": 1603403092,
    "last_block_time": 1603835084,
    "block_count": 21298,
    "tx_count": 17856,
    "output": "7849943934049314",
    "fees": "4203312194",
    "active_stake": "784953934049314",
}

EPOCH_PARAMETERS = {
    "epoch": 225,
    "min_fee_a": 44,
    "min_fee_b": 155381,
    "max_block_size": 65536,
    "max_tx_size": 16384,
    "max_block_header_size": 1100,
    "key_deposit": "2000000",
    "pool_deposit": "500000000",
    "e_max": 18,
    "n_opt": 150,
    "a0": 0.3,
    "rho": 0.003,
    "tau": 0.2,
    "decentralisation_param": 0.5,
    "extra_entropy": None,
    "protocol_major_ver": 2,
    "protocol_minor_ver": 0,
    "min_utxo": "1000000",
    "min_pool_cost": "340000000",
    "nonce": "1a3be38bcbb7911969283716ad7aa550250226b76a61fc51cc9a9a35d9276d81",
    "price_mem": 0.001,
    "price_step": 0.01,
    "max_tx_ex_mem": "11000000000",
    "max_tx_ex_steps": "11000000000",
    "max_block_ex_mem": "110000000000",
    "max_block_ex_steps": "110000000000",
    "max_val_size": "5000",
    "collateral_percent": 1.5,
    "max_collateral_inputs": 6,
    "coins_per_utxo_word": "34482",
}

STAKE_ADDRESS = "stake1u9l5q5jwgelgagzyt6nuaasefgmn8pd25c8e9qpeprq0tdcp0e3uk"
POOL_ID = "pool1pu5jlj4q9w9jlxeu370a3c9myx47md5j5m2str0naunn2q3lkdy"

ADDRESS_STAKE_POOLS = [
    {"stake_address": STAKE_ADDRESS, "pool_id": POOL_ID, "amount": "4440295078"},
]

ADDRESS_STAKES = [{"stake_address": STAKE_ADDRESS, "amount": "4440295078"}]

EPOCH_BLOCKS = [
    "d0fa315687e99ccdc96b14cc2ea74a767405d64427b648c470731a9b69e4606e",
    "38bc6efb92a830a0ed22a64f979d120d26483fd3c811f6622a8c62175f530878",
    "f3258fcd8b975c061b4fcdcfcbb438807134d6961ec278c200151274893b6b7d",
]

HEALTH_CLOCK = {"server_time": 1603400958947}

SERVER_ERROR = {
    "status_code": 500,
    "error": "Internal Server Error",
    "message": "boom",
}

RATE_LIMITED = {
    "status_code": 429,
    "error": "Project Over Limit",
    "message": "Usage is over limit.",
}


def make_response(status_code, body, url=f"{BASE_URL}/epochs/latest"):
    """Build a ``requests.Response`` as the session would return it."""
    response = requests.Response()
    response.status_code = status_code
    response._content = body if isinstance(body, bytes) else json.dumps(body).encode()
    response.encoding = "utf-8"
    response.url = url
    return response


@pytest.fixture
def retry_settings():
    return RetrySettings(amount=3, delay=0.5)


@pytest.fixture
def client(retry_settings):
    """Sync client whose session never touches the network."""
    client = BlockfrostClient(PROJECT_ID, retry_settings=retry_settings)
    client._session.get = MagicMock()
    client._session.send = MagicMock()
    yield client
    client.close()


@pytest.fixture
def session():
    session = MagicMock(spec=requests.Session)
    return session
