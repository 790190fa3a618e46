"""
SavingBankContext - Domain Facade for the savings bank

Wires the components together from the Flask app configuration and owns the
transaction boundary: every mutating call either commits as a whole or is
rolled back as a whole.
"""

from typing import Any, Callable, Dict, List, Optional, Tuple
from flask import current_app
from savingbank import db
from savingbank.data.core.account import Account
from savingbank.data.savings.saving_plan import SavingPlan
from savingbank.buisness.savings.asset_ledger import AssetLedger
from savingbank.buisness.savings.custody_vault import CustodyVault
from savingbank.buisness.savings.ownership_registry import OwnershipRegistry
from savingbank.buisness.savings.access_control import AccessControl
from savingbank.buisness.savings.plan_catalog import PlanCatalog
from savingbank.buisness.savings.deposit_ledger import DepositLedger, WithdrawalResult
from savingbank.buisness.savings.clock import SystemClock
from savingbank.buisness.savings.errors import SavingBankError
from savingbank.logger import get_logger

logger = get_logger("savingbank.context")


class SavingBankContext:
    """
    Domain Facade for the deposit ledger and its collaborators.

    Holds no state between calls: the components read the singleton rows
    (protocol config, vault, registry) from the session each time they are
    used.

    Pattern: Domain Facade / Aggregate Controller
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None):
        self.clock = clock or SystemClock()
        self.asset = AssetLedger()
        self.vault = CustodyVault(self.asset)
        self.registry = OwnershipRegistry()
        self.access = AccessControl(self.vault)
        self.catalog = PlanCatalog(self.access)
        self.ledger = DepositLedger(self.access, self.catalog, self.vault, self.registry, self.clock)

    @classmethod
    def from_app(cls, app=None) -> 'SavingBankContext':
        """
        Factory method using the app's configured clock.

        Args:
            app: Flask app (defaults to current_app)

        Returns:
            SavingBankContext
        """
        app = app or current_app
        return cls(clock=app.config.get('SAVINGBANK_CLOCK'))

    @classmethod
    def load(cls) -> 'SavingBankContext':
        return cls.from_app()

    def _run(self, operation: str, func: Callable, *args, **kwargs):
        """Run one operation as a single transaction"""
        try:
            result = func(*args, **kwargs)
            db.session.commit()
            return result
        except SavingBankError as e:
            db.session.rollback()
            logger.warning(f"{operation} rejected: {e.code}: {e}")
            raise
        except Exception as e:
            db.session.rollback()
            logger.error(f"{operation} failed: {e}")
            raise

    # ========== Deposit Operations ==========

    def create_deposit(self, caller: str, plan_id: int, amount: int, term_days: int) -> int:
        return self._run('create_deposit', self.ledger.create_deposit, caller, plan_id, amount, term_days)

    def withdraw(self, caller: str, deposit_id: int) -> WithdrawalResult:
        return self._run('withdraw', self.ledger.withdraw, caller, deposit_id)

    def renew(self, caller: str, deposit_id: int, new_plan_id: int, new_term_days: int) -> int:
        return self._run('renew', self.ledger.renew, caller, deposit_id, new_plan_id, new_term_days)

    def get_deposit(self, deposit_id: int) -> Dict[str, Any]:
        return self.ledger.get_deposit(deposit_id)

    def calculate_interest(self, principal: int, plan_id: int, term_days: int) -> int:
        return self.ledger.calculate_interest(principal, plan_id, term_days)

    # ========== Plan Operations ==========

    def create_plan(self, caller: str, terms: Dict[str, Any]) -> SavingPlan:
        return self._run('create_plan', self.catalog.create_plan, caller, terms)

    def update_plan(self, caller: str, plan_id: int, terms: Dict[str, Any]) -> SavingPlan:
        return self._run('update_plan', self.catalog.update_plan, caller, plan_id, terms)

    def set_plan_active(self, caller: str, plan_id: int, active: bool) -> SavingPlan:
        return self._run('set_plan_active', self.catalog.set_plan_active, caller, plan_id, active)

    def get_plan(self, plan_id: int) -> SavingPlan:
        return self.catalog.get_plan(plan_id)

    def list_plans(self, active_only: bool = False) -> List[SavingPlan]:
        return self.catalog.list_plans(active_only=active_only)

    # ========== Admin Operations ==========

    def pause(self, caller: str) -> None:
        self._run('pause', self.access.pause, caller)

    def unpause(self, caller: str) -> None:
        self._run('unpause', self.access.unpause, caller)

    def set_penalty_receiver(self, caller: str, receiver: Optional[str]) -> None:
        self._run('set_penalty_receiver', self.access.set_penalty_receiver, caller, receiver)

    def transfer_admin(self, caller: str, new_admin: str) -> None:
        self._run('transfer_admin', self.access.transfer_admin, caller, new_admin)

    def deposit_to_vault(self, caller: str, amount: int) -> None:
        self._run('deposit_to_vault', self.access.deposit_to_vault, caller, amount)

    def withdraw_from_vault(self, caller: str, amount: int) -> None:
        self._run('withdraw_from_vault', self.access.withdraw_from_vault, caller, amount)

    def vault_balance(self) -> int:
        return self.vault.get_balance()

    def register_account(self, caller: str, address: str, api_key: Optional[str] = None) -> Tuple[Account, str]:
        """
        Admin-only: issue an API key for an address.

        Returns:
            tuple: (account, api_key) - the plain key is only returned here
        """
        def _register():
            self.access.require_admin(caller)
            return Account.register(address, api_key=api_key)

        return self._run('register_account', _register)

    def mint_asset_as_admin(self, caller: str, to: str, amount: int) -> None:
        def _mint():
            self.access.require_admin(caller)
            self.asset.mint(to, amount)

        self._run('mint_asset', _mint)

    # ========== Registry Passthroughs ==========

    def owner_of(self, unit_id: int) -> str:
        return self.registry.owner_of(unit_id)

    def transfer_unit(self, caller: str, sender: str, recipient: str, unit_id: int) -> None:
        self._run('transfer_unit', self.registry.transfer_from, caller, sender, recipient, unit_id)

    def approve_unit(self, caller: str, to: Optional[str], unit_id: int) -> None:
        self._run('approve_unit', self.registry.approve, caller, to, unit_id)

    def set_approval_for_all(self, caller: str, operator: str, approved: bool) -> None:
        self._run('set_approval_for_all', self.registry.set_approval_for_all, caller, operator, approved)

    # ========== Asset Passthroughs ==========

    def approve_asset(self, owner: str, spender: str, amount: int) -> None:
        self._run('approve_asset', self.asset.approve, owner, spender, amount)

    def asset_balance(self, address: str) -> int:
        return self.asset.balance_of(address)

    def mint_asset(self, to: str, amount: int) -> None:
        """Faucet for bootstrapping balances; not exposed to depositors"""
        self._run('mint_asset', self.asset.mint, to, amount)

    @property
    def ledger_address(self) -> str:
        return self.access.ledger_address

    def get_summary(self) -> Dict[str, Any]:
        access = self.access
        return {
            'admin': access.admin,
            'ledger_address': access.ledger_address,
            'vault_address': self.vault.address,
            'vault_balance': self.vault.get_balance(),
            'paused': access.paused,
            'penalty_receiver': access.penalty_receiver,
        }
