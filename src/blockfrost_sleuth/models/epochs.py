"""Response models for the ``/epochs`` endpoints."""

from typing import Any, Dict, Optional
from pydantic import BaseModel, Field


class Epoch(BaseModel):
    """Returned by ``epochs_latest``, ``epochs_by_number`` and the epoch lists."""

    epoch: int = Field(..., description="Epoch number")
    start_time: int = Field(..., description="Unix time of the start of the epoch")
    end_time: int = Field(..., description="Unix time of the end of the epoch")
    first_block_time: int = Field(..., description="Unix time of the first block of the epoch")
    last_block_time: int = Field(..., description="Unix time of the last block of the epoch")
    block_count: int = Field(..., description="Number of blocks within the epoch")
    tx_count: int = Field(..., description="Number of transactions within the epoch")
    output: str = Field(..., description="Sum of all transaction outputs in Lovelaces")
    fees: str = Field(..., description="Sum of all fees in Lovelaces")
    active_stake: Optional[str] = Field(None, description="Sum of all active stake in Lovelaces")


class EpochParameters(BaseModel):
    """Protocol parameters in force for an epoch.

    Parameters introduced by later hard forks are null for earlier epochs,
    hence the optional fields.
    """

    epoch: int
    min_fee_a: int
    min_fee_b: int
    max_block_size: int
    max_tx_size: int
    max_block_header_size: int
    key_deposit: str
    pool_deposit: str
    e_max: int
    n_opt: int
    a0: float
    rho: float
    tau: float
    decentralisation_param: float
    extra_entropy: Optional[Any] = None
    protocol_major_ver: int
    protocol_minor_ver: int
    min_utxo: str
    min_pool_cost: str
    nonce: str
    cost_models: Optional[Dict[str, Any]] = None
    price_mem: Optional[float] = None
    price_step: Optional[float] = None
    max_tx_ex_mem: Optional[str] = None
    max_tx_ex_steps: Optional[str] = None
    max_block_ex_mem: Optional[str] = None
    max_block_ex_steps: Optional[str] = None
    max_val_size: Optional[str] = None
    collateral_percent: Optional[float] = None
    max_collateral_inputs: Optional[int] = None
    coins_per_utxo_size: Optional[str] = None
    coins_per_utxo_word: Optional[str] = None


class AddressStakePool(BaseModel):
    """Active stake of one address, with the pool it is delegated to."""

    stake_address: str
    pool_id: str
    amount: str


class AddressStake(BaseModel):
    """Active stake of one address delegated to a given pool."""

    stake_address: str
    amount: str
