"""
Deposit Eligibility Policy

Checks an amount and term against a plan. Shared by create_deposit and renew,
so a renewal is validated exactly like a fresh deposit of the compounded amount.
"""

from typing import TYPE_CHECKING
from savingbank.buisness.savings.errors import (
    PlanNotActiveError,
    InvalidAmountError,
    InvalidTermError,
)
from savingbank.data.core.token_amount import MAX_TOKEN_AMOUNT

if TYPE_CHECKING:
    from savingbank.data.savings.saving_plan import SavingPlan


class DepositEligibilityPolicy:

    @classmethod
    def check(cls, plan: 'SavingPlan', amount: int, term_days: int) -> None:
        """
        Raises (in this order):
            PlanNotActiveError: plan is deactivated
            InvalidAmountError: amount below min_amount, above a non-zero max_amount,
                or above MAX_TOKEN_AMOUNT
            InvalidTermError: term_days outside [min_term_days, max_term_days]
        """
        if not plan.is_active:
            raise PlanNotActiveError(f"Plan {plan.id} is not active", plan_id=plan.id)

        cls.check_amount(plan, amount)
        cls.check_term(plan, term_days)

    @staticmethod
    def check_amount(plan: 'SavingPlan', amount: int) -> None:
        if amount <= 0 or amount < plan.min_amount:
            raise InvalidAmountError(
                f"Amount {amount} is below the plan minimum {plan.min_amount}",
                amount=amount,
                plan_id=plan.id,
            )
        if plan.has_max_amount and amount > plan.max_amount:
            raise InvalidAmountError(
                f"Amount {amount} exceeds the plan maximum {plan.max_amount}",
                amount=amount,
                plan_id=plan.id,
            )
        if amount > MAX_TOKEN_AMOUNT:
            raise InvalidAmountError(
                f"Amount {amount} exceeds the largest storable amount",
                amount=amount,
                plan_id=plan.id,
            )

    @staticmethod
    def check_term(plan: 'SavingPlan', term_days: int) -> None:
        if term_days < plan.min_term_days or term_days > plan.max_term_days:
            raise InvalidTermError(
                f"Term of {term_days} days is outside [{plan.min_term_days}, {plan.max_term_days}]",
                term_days=term_days,
                plan_id=plan.id,
            )
