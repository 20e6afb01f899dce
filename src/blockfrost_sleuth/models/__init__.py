"""Pydantic response models."""

from .epochs import Epoch, EpochParameters, AddressStakePool, AddressStake
from .health import Root, Health, HealthClock

__all__ = [
    "Epoch",
    "EpochParameters",
    "AddressStakePool",
    "AddressStake",
    "Root",
    "Health",
    "HealthClock",
]
