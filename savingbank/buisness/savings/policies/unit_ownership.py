"""
Unit Ownership Policy

Authorization for deposit operations is a fresh lookup of the ownership unit's
holder at call time. No holder address is cached or carried between calls.
"""

from typing import TYPE_CHECKING
from savingbank.buisness.savings.errors import NotOwnerError

if TYPE_CHECKING:
    from savingbank.buisness.savings.ownership_registry import OwnershipRegistry


class UnitOwnershipPolicy:

    @classmethod
    def check(cls, registry: 'OwnershipRegistry', deposit_id: int, caller: str) -> str:
        """
        Returns:
            str: the current holder (equal to caller)

        Raises:
            NotOwnerError: caller does not hold the unit
            UnitNotFoundError: the unit does not exist (propagated from the registry)
        """
        holder = registry.owner_of(deposit_id)
        if holder != caller:
            raise NotOwnerError(
                f"{caller} does not hold the ownership unit for deposit {deposit_id}",
                deposit_id=deposit_id,
                caller=caller,
            )
        return holder
