"""
AccessControl - admin role, pause switch and penalty routing

Holds no state of its own; everything lives on the ProtocolConfig row and is
re-read for each check. The deposit ledger consults it for the pause switch
and the penalty receiver.
"""

from typing import Optional
from savingbank.data.savings.singletons import ProtocolConfig
from savingbank.buisness.savings.custody_vault import CustodyVault
from savingbank.buisness.savings.narrator import LedgerNarrator
from savingbank.buisness.savings.errors import (
    NotAdminError,
    EnforcedPauseError,
    ExpectedPauseError,
    InvalidAmountError,
)
from savingbank.logger import get_logger

logger = get_logger("savingbank.access")


class AccessControl:

    def __init__(self, vault: CustodyVault):
        self.vault = vault

    @property
    def config(self) -> ProtocolConfig:
        return ProtocolConfig.get()

    # ========== Checks ==========

    @property
    def admin(self) -> str:
        return self.config.admin

    @property
    def ledger_address(self) -> str:
        return self.config.ledger_address

    @property
    def paused(self) -> bool:
        return bool(self.config.paused)

    @property
    def penalty_receiver(self) -> Optional[str]:
        return self.config.penalty_receiver

    def is_admin(self, caller: str) -> bool:
        return caller == self.config.admin

    def require_admin(self, caller: str) -> None:
        if not self.is_admin(caller):
            raise NotAdminError(f"{caller} is not the admin", caller=caller)

    def require_not_paused(self) -> None:
        if self.paused:
            raise EnforcedPauseError("Operations are paused")

    # ========== Admin operations ==========

    def pause(self, caller: str) -> None:
        self.require_admin(caller)
        self.require_not_paused()
        self.config.paused = True
        LedgerNarrator.emit('Paused', account=caller)

    def unpause(self, caller: str) -> None:
        self.require_admin(caller)
        if not self.paused:
            raise ExpectedPauseError("Operations are not paused")
        self.config.paused = False
        LedgerNarrator.emit('Unpaused', account=caller)

    def set_penalty_receiver(self, caller: str, receiver: Optional[str]) -> None:
        """Route early-withdrawal penalties to `receiver`; None keeps them in the vault"""
        self.require_admin(caller)
        self.config.penalty_receiver = receiver or None
        LedgerNarrator.emit('PenaltyReceiverUpdated', receiver=self.config.penalty_receiver)

    def transfer_admin(self, caller: str, new_admin: str) -> None:
        self.require_admin(caller)
        if not new_admin:
            raise NotAdminError("New admin address must not be empty")
        previous = self.config.admin
        self.config.admin = new_admin
        LedgerNarrator.emit('AdminTransferred', previous_admin=previous, new_admin=new_admin)

    def deposit_to_vault(self, caller: str, amount: int) -> None:
        """
        Top up the vault from the admin's balance. The admin must have
        approved the ledger address for at least `amount`.
        """
        self.require_admin(caller)
        self.require_not_paused()
        if amount <= 0:
            raise InvalidAmountError("Vault deposit must be positive", amount=amount)
        self.vault.deposit(self.ledger_address, caller, amount)
        LedgerNarrator.emit('VaultDeposited', amount=amount)

    def withdraw_from_vault(self, caller: str, amount: int) -> None:
        """
        Raises:
            InsufficientBalanceError: amount exceeds the vault balance
        """
        self.require_admin(caller)
        self.require_not_paused()
        if amount <= 0:
            raise InvalidAmountError("Vault withdrawal must be positive", amount=amount)
        self.vault.withdraw(self.ledger_address, amount, caller)
        LedgerNarrator.emit('VaultWithdrawn', amount=amount)
        logger.info(f"Admin {caller} withdrew {amount} from the vault")
