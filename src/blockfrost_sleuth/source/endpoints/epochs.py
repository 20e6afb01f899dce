"""Cardano epoch endpoints.

See https://docs.blockfrost.io/#tag/cardano--epochs
"""

from typing import List, Optional

from blockfrost_sleuth.models import AddressStake, AddressStakePool, Epoch, EpochParameters
from blockfrost_sleuth.pagination import Pagination


class EpochsEndpoints:
    """Epoch endpoints, mixed into a client providing ``_get`` and ``_get_paged``."""

    def epochs_latest(self) -> Epoch:
        """Return the latest, therefore current, epoch."""
        return self._get("/epochs/latest", Epoch)

    def epochs_latest_parameters(self) -> EpochParameters:
        """Return the protocol parameters for the latest epoch."""
        return self._get("/epochs/latest/parameters", EpochParameters)

    def epochs_by_number(self, number: int) -> Epoch:
        return self._get(f"/epochs/{number}", Epoch)

    def epochs_parameters(self, number: int) -> EpochParameters:
        return self._get(f"/epochs/{number}/parameters", EpochParameters)

    def epochs_next(
        self, number: int, pagination: Optional[Pagination] = None
    ) -> List[Epoch]:
        """Return the epochs following ``number``."""
        return self._get_paged(f"/epochs/{number}/next", List[Epoch], pagination)

    def epochs_previous(
        self, number: int, pagination: Optional[Pagination] = None
    ) -> List[Epoch]:
        """Return the epochs preceding ``number``."""
        return self._get_paged(f"/epochs/{number}/previous", List[Epoch], pagination)

    def epochs_stakes(
        self, number: int, pagination: Optional[Pagination] = None
    ) -> List[AddressStakePool]:
        """Return the active stake distribution for the epoch."""
        return self._get_paged(
            f"/epochs/{number}/stakes", List[AddressStakePool], pagination
        )

    def epochs_stakes_by_pool(
        self, number: int, pool_id: str, pagination: Optional[Pagination] = None
    ) -> List[AddressStake]:
        """Return the active stake distribution for the epoch, for one pool."""
        return self._get_paged(
            f"/epochs/{number}/stakes/{pool_id}", List[AddressStake], pagination
        )

    def epochs_blocks(
        self, number: int, pagination: Optional[Pagination] = None
    ) -> List[str]:
        """Return the hashes of blocks minted in the epoch."""
        return self._get_paged(f"/epochs/{number}/blocks", List[str], pagination)

    def epochs_blocks_by_pool(
        self, number: int, pool_id: str, pagination: Optional[Pagination] = None
    ) -> List[str]:
        return self._get_paged(
            f"/epochs/{number}/blocks/{pool_id}", List[str], pagination
        )
