"""
DepositLedger - deposit lifecycle orchestrator

Owns the Deposit records and the id counter they share with ownership units.
Drives the custody vault and the ownership registry; consults the plan
catalog, the rate engine and access control.

Who may act on a deposit is never stored here. Every withdraw/renew asks the
registry for the unit's current holder at call time.

Nothing in this class commits. SavingBankContext wraps each call in a single
transaction, so any exception leaves no trace of the operation.
"""

from dataclasses import dataclass, asdict
from typing import Any, Callable, Dict, Optional
from savingbank import db
from savingbank.data.savings.deposit import Deposit
from savingbank.data.core.sequences import DepositIDManager
from savingbank.buisness.savings import rate_engine
from savingbank.buisness.savings.access_control import AccessControl
from savingbank.buisness.savings.plan_catalog import PlanCatalog
from savingbank.buisness.savings.custody_vault import CustodyVault
from savingbank.buisness.savings.ownership_registry import OwnershipRegistry
from savingbank.buisness.savings.state_machine import DepositStateMachine
from savingbank.buisness.savings.narrator import LedgerNarrator
from savingbank.buisness.savings.policies import DepositEligibilityPolicy, UnitOwnershipPolicy
from savingbank.buisness.savings.errors import (
    DepositNotFoundError,
    DepositNotMatureError,
)
from savingbank.logger import get_logger

logger = get_logger("savingbank.ledger")


@dataclass(frozen=True)
class WithdrawalResult:
    deposit_id: int
    caller: str
    payout: int
    interest: int
    penalty: int
    early: bool

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class DepositLedger:

    def __init__(
        self,
        access: AccessControl,
        catalog: PlanCatalog,
        vault: CustodyVault,
        registry: OwnershipRegistry,
        clock: Callable[[], int],
    ):
        self.access = access
        self.catalog = catalog
        self.vault = vault
        self.registry = registry
        self.clock = clock

    @property
    def address(self) -> str:
        """The identity this ledger presents to the vault and the registry"""
        return self.access.ledger_address

    def now(self) -> int:
        return int(self.clock())

    def _deposit(self, deposit_id: int) -> Deposit:
        deposit = db.session.get(Deposit, deposit_id) if deposit_id is not None else None
        if deposit is None:
            raise DepositNotFoundError(f"Deposit {deposit_id} not found", deposit_id=deposit_id)
        return deposit

    def _load_for_close(self, caller: str, deposit_id: int) -> Deposit:
        """Shared preconditions of withdraw and renew: exists, open, caller holds the unit"""
        deposit = self._deposit(deposit_id)
        DepositStateMachine.validate_transition(deposit.status, DepositStateMachine.CLOSED, deposit.id)
        UnitOwnershipPolicy.check(self.registry, deposit.id, caller)
        return deposit

    def _open(self, depositor: str, plan, amount: int, term_days: int, start_time: int,
              renewed_from_id: Optional[int] = None) -> Deposit:
        deposit = Deposit(
            id=DepositIDManager.next_id(),
            amount=amount,
            plan_id=plan.id,
            term_days=term_days,
            interest_rate_bps=plan.interest_rate_bps,
            penalty_rate_bps=plan.penalty_rate_bps,
            start_time=start_time,
            maturity_time=rate_engine.maturity_time(start_time, term_days),
            status=DepositStateMachine.ACTIVE,
            is_closed=False,
            depositor=depositor,
            renewed_from_id=renewed_from_id,
        )
        db.session.add(deposit)
        db.session.flush()
        self.registry.mint(self.address, depositor, deposit.id)
        return deposit

    # ========== Operations ==========

    def create_deposit(self, caller: str, plan_id: int, amount: int, term_days: int) -> int:
        """
        Open a deposit. The caller must have approved the ledger address for
        at least `amount` on the asset ledger.

        Returns:
            int: The new deposit id, which is also the ownership unit id

        Raises:
            EnforcedPauseError, PlanNotFoundError, PlanNotActiveError,
            InvalidAmountError, InvalidTermError, InsufficientAllowanceError,
            InsufficientFundsError
        """
        self.access.require_not_paused()
        plan = self.catalog.get_plan(plan_id)
        DepositEligibilityPolicy.check(plan, amount, term_days)

        # Funds move before any record exists
        self.vault.deposit(self.address, caller, amount)

        deposit = self._open(caller, plan, amount, term_days, self.now())
        LedgerNarrator.emit(
            'DepositCreated',
            id=deposit.id,
            depositor=caller,
            amount=amount,
            plan_id=plan.id,
        )
        return deposit.id

    def withdraw(self, caller: str, deposit_id: int) -> WithdrawalResult:
        """
        Close a deposit and pay out. At or after maturity the holder gets
        principal plus interest; before it, principal minus the penalty.

        Raises:
            EnforcedPauseError, DepositNotFoundError, DepositClosedError,
            NotOwnerError, InsufficientBalanceError
        """
        self.access.require_not_paused()
        deposit = self._load_for_close(caller, deposit_id)
        now = self.now()

        if deposit.is_mature(now):
            interest = rate_engine.interest(deposit.amount, deposit.interest_rate_bps, deposit.term_days)
            penalty = 0
            payout = deposit.amount + interest
            early = False
        else:
            interest = 0
            penalty = rate_engine.penalty(deposit.amount, deposit.penalty_rate_bps)
            payout = deposit.amount - penalty
            early = True

        # Close and burn before any value leaves the vault
        DepositStateMachine.close(deposit, now, DepositStateMachine.WITHDRAWN)
        self.registry.burn(self.address, deposit.id)

        self.vault.withdraw(self.address, payout, caller)
        receiver = self.access.penalty_receiver
        if penalty > 0 and receiver:
            self.vault.withdraw(self.address, penalty, receiver)

        result = WithdrawalResult(
            deposit_id=deposit.id,
            caller=caller,
            payout=payout,
            interest=interest,
            penalty=penalty,
            early=early,
        )
        LedgerNarrator.emit(
            'Withdrawn',
            id=deposit.id,
            caller=caller,
            payout=payout,
            interest=interest,
            penalty=penalty,
            early=early,
        )
        return result

    def renew(self, caller: str, deposit_id: int, new_plan_id: int, new_term_days: int) -> int:
        """
        Roll a matured deposit into a new one of principal plus interest.
        No funds move; the accrued interest stays in the vault as part of the
        new principal.

        Returns:
            int: The new deposit id

        Raises:
            EnforcedPauseError, DepositNotFoundError, DepositClosedError,
            NotOwnerError, DepositNotMatureError, PlanNotFoundError,
            PlanNotActiveError, InvalidAmountError, InvalidTermError
        """
        self.access.require_not_paused()
        old = self._load_for_close(caller, deposit_id)
        now = self.now()

        if not old.is_mature(now):
            raise DepositNotMatureError(
                f"Deposit {old.id} matures at {old.maturity_time}",
                deposit_id=old.id,
                maturity_time=old.maturity_time,
            )

        interest = rate_engine.interest(old.amount, old.interest_rate_bps, old.term_days)
        new_amount = old.amount + interest

        plan = self.catalog.get_plan(new_plan_id)
        DepositEligibilityPolicy.check(plan, new_amount, new_term_days)

        DepositStateMachine.close(old, now, DepositStateMachine.RENEWED)
        self.registry.burn(self.address, old.id)

        new = self._open(caller, plan, new_amount, new_term_days, now, renewed_from_id=old.id)
        old.renewed_into_id = new.id

        LedgerNarrator.emit('Renewed', old_id=old.id, new_id=new.id, new_amount=new_amount)
        LedgerNarrator.emit(
            'DepositCreated',
            id=new.id,
            depositor=caller,
            amount=new_amount,
            plan_id=plan.id,
        )
        return new.id

    # ========== Reads ==========

    def get_deposit(self, deposit_id: int) -> Dict[str, Any]:
        """
        Deposit fields plus `owner` (current unit holder, None once the unit
        is burned) and `state`.
        """
        deposit = self._deposit(deposit_id)
        view = deposit.to_dict(skip_fields=['created_at', 'updated_at'])
        view['owner'] = self.registry.owner_of(deposit.id) if self.registry.exists(deposit.id) else None
        view['state'] = deposit.status
        return view

    def calculate_interest(self, principal: int, plan_id: int, term_days: int) -> int:
        """Preview the interest a plan would pay on `principal` for `term_days`"""
        plan = self.catalog.get_plan(plan_id)
        return rate_engine.interest_for_plan(principal, plan, term_days)
