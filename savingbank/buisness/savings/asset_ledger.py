"""
AssetLedger - the fungible asset the bank takes deposits in

Standard balance / allowance semantics: holders transfer directly, or approve
a spender who may later pull up to the approved amount with transfer_from.
"""

from savingbank import db
from savingbank.data.assets.asset_balance import AssetBalance, AssetAllowance
from savingbank.data.core.token_amount import MAX_TOKEN_AMOUNT
from savingbank.buisness.savings.errors import (
    InvalidAmountError,
    InsufficientFundsError,
    InsufficientAllowanceError,
)
from savingbank.buisness.savings.narrator import LedgerNarrator


class AssetLedger:

    def _account(self, address: str, create: bool = False):
        account = AssetBalance.query.filter_by(address=address).first()
        if account is None and create:
            account = AssetBalance(address=address, balance=0)
            db.session.add(account)
            db.session.flush()
        return account

    def _allowance_row(self, owner: str, spender: str, create: bool = False):
        row = AssetAllowance.query.filter_by(owner=owner, spender=spender).first()
        if row is None and create:
            row = AssetAllowance(owner=owner, spender=spender, amount=0)
            db.session.add(row)
            db.session.flush()
        return row

    # ========== Reads ==========

    def balance_of(self, address: str) -> int:
        account = self._account(address)
        return account.balance if account else 0

    def allowance(self, owner: str, spender: str) -> int:
        row = self._allowance_row(owner, spender)
        return row.amount if row else 0

    # ========== Mutations ==========

    @staticmethod
    def _credit(account: AssetBalance, amount: int) -> None:
        if account.balance + amount > MAX_TOKEN_AMOUNT:
            raise InvalidAmountError(
                f"Crediting {amount} would take {account.address} past the largest storable amount",
                address=account.address,
                amount=amount,
            )
        account.balance += amount

    def mint(self, to: str, amount: int) -> None:
        """Credit new units to an address (bootstrap faucet)"""
        if amount <= 0:
            raise InvalidAmountError("Mint amount must be positive", amount=amount)
        self._credit(self._account(to, create=True), amount)
        LedgerNarrator.emit('AssetTransfer', sender=None, recipient=to, amount=amount)

    def approve(self, owner: str, spender: str, amount: int) -> None:
        if amount < 0 or amount > MAX_TOKEN_AMOUNT:
            raise InvalidAmountError(f"Allowance must be between 0 and {MAX_TOKEN_AMOUNT}", amount=amount)
        row = self._allowance_row(owner, spender, create=True)
        row.amount = amount
        LedgerNarrator.emit('AssetApproval', owner=owner, spender=spender, amount=amount)

    def transfer(self, sender: str, recipient: str, amount: int) -> None:
        if amount < 0:
            raise InvalidAmountError("Transfer amount must not be negative", amount=amount)
        source = self._account(sender)
        available = source.balance if source else 0
        if available < amount:
            raise InsufficientFundsError(
                f"{sender} holds {available}, needs {amount}",
                sender=sender,
                balance=available,
                needed=amount,
            )
        if amount == 0:
            return
        source.balance -= amount
        self._credit(self._account(recipient, create=True), amount)
        LedgerNarrator.emit('AssetTransfer', sender=sender, recipient=recipient, amount=amount)

    def transfer_from(self, spender: str, owner: str, recipient: str, amount: int) -> None:
        """Pull `amount` from `owner` to `recipient` against the spender's allowance"""
        row = self._allowance_row(owner, spender)
        allowed = row.amount if row else 0
        if allowed < amount:
            raise InsufficientAllowanceError(
                f"{spender} may pull {allowed} from {owner}, needs {amount}",
                owner=owner,
                spender=spender,
                allowance=allowed,
                needed=amount,
            )
        self.transfer(owner, recipient, amount)
        if amount:
            row.amount -= amount
