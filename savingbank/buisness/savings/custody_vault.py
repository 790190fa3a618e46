"""
CustodyVault - pooled custody of deposited principal

Carries no policy. Its only check is that the caller is the bound ledger;
solvency, ownership and payout-split decisions all belong to DepositLedger.
"""

from savingbank.data.savings.singletons import VaultState
from savingbank.buisness.savings.asset_ledger import AssetLedger
from savingbank.buisness.savings.errors import (
    AlreadyBoundError,
    UnauthorizedCallerError,
    InsufficientBalanceError,
)
from savingbank.logger import get_logger

logger = get_logger("savingbank.vault")


class CustodyVault:

    def __init__(self, asset: AssetLedger):
        self.asset = asset

    @property
    def state(self) -> VaultState:
        # Re-read on every access; nothing is cached across operations
        return VaultState.get()

    @property
    def address(self) -> str:
        return self.state.custody_address

    def bind(self, caller_address: str) -> None:
        """
        Bind the sole authorized caller. One-time.

        Raises:
            AlreadyBoundError: if a caller is already bound
        """
        state = self.state
        if state.bound_caller is not None:
            raise AlreadyBoundError(f"Vault already bound to {state.bound_caller}")
        state.bound_caller = caller_address
        logger.info(f"Vault bound to {caller_address}")

    def _require_bound_caller(self, caller: str) -> VaultState:
        state = self.state
        if state.bound_caller is None or caller != state.bound_caller:
            raise UnauthorizedCallerError(f"{caller} is not the vault's bound caller", caller=caller)
        return state

    def deposit(self, caller: str, source: str, amount: int) -> None:
        """Pull `amount` from `source` (which has approved the bound caller) into custody"""
        state = self._require_bound_caller(caller)
        self.asset.transfer_from(caller, source, state.custody_address, amount)
        state.balance += amount

    def withdraw(self, caller: str, amount: int, to: str) -> None:
        """
        Pay `amount` out of custody to `to`.

        Raises:
            InsufficientBalanceError: amount exceeds the vault balance
        """
        state = self._require_bound_caller(caller)
        if amount > state.balance:
            raise InsufficientBalanceError(
                f"Vault holds {state.balance}, cannot pay {amount}",
                balance=state.balance,
                needed=amount,
            )
        state.balance -= amount
        self.asset.transfer(state.custody_address, to, amount)

    def get_balance(self) -> int:
        return self.state.balance
