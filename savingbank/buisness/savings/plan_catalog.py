"""
PlanCatalog - admin-managed saving plans

Plans are never deleted. Deactivating a plan only stops new deposits and
renewals into it; existing deposits keep the rates they were opened with.
"""

from typing import Any, Dict, List
from savingbank import db
from savingbank.data.savings.saving_plan import SavingPlan
from savingbank.data.core.sequences import PlanIDManager
from savingbank.buisness.savings.access_control import AccessControl
from savingbank.buisness.savings.narrator import LedgerNarrator
from savingbank.buisness.savings.policies import PlanTermsPolicy
from savingbank.buisness.savings.errors import PlanNotFoundError


class PlanCatalog:

    def __init__(self, access: AccessControl):
        self.access = access

    def _require_admin_operation(self, caller: str) -> None:
        self.access.require_admin(caller)
        self.access.require_not_paused()

    def create_plan(self, caller: str, terms: Dict[str, Any]) -> SavingPlan:
        """
        Args:
            caller: Must be the admin
            terms: name, min_amount, max_amount, min_term_days, max_term_days,
                interest_rate_bps, penalty_rate_bps

        Returns:
            SavingPlan: The new, active plan
        """
        self._require_admin_operation(caller)
        terms = PlanTermsPolicy.check(terms)

        plan = SavingPlan(id=PlanIDManager.next_id(), is_active=True, **terms)
        db.session.add(plan)
        db.session.flush()

        LedgerNarrator.emit('PlanCreated', id=plan.id, name=plan.name)
        return plan

    def update_plan(self, caller: str, plan_id: int, terms: Dict[str, Any]) -> SavingPlan:
        """Overwrite every term of an existing plan. id and is_active are untouched."""
        self._require_admin_operation(caller)
        plan = self.get_plan(plan_id)
        terms = PlanTermsPolicy.check(terms)

        for field in SavingPlan.TERM_FIELDS:
            setattr(plan, field, terms[field])

        LedgerNarrator.emit('PlanUpdated', id=plan.id)
        return plan

    def set_plan_active(self, caller: str, plan_id: int, active: bool) -> SavingPlan:
        self._require_admin_operation(caller)
        plan = self.get_plan(plan_id)
        plan.is_active = bool(active)

        LedgerNarrator.emit('PlanActiveChanged', id=plan.id, active=plan.is_active)
        return plan

    def get_plan(self, plan_id: int) -> SavingPlan:
        """
        Raises:
            PlanNotFoundError: if no plan has this id
        """
        plan = db.session.get(SavingPlan, plan_id) if plan_id is not None else None
        if plan is None:
            raise PlanNotFoundError(f"Plan {plan_id} not found", plan_id=plan_id)
        return plan

    def list_plans(self, active_only: bool = False) -> List[SavingPlan]:
        query = SavingPlan.query
        if active_only:
            query = query.filter_by(is_active=True)
        return query.order_by(SavingPlan.id).all()
