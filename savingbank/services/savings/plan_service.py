"""
Plan Service
Formatting and request parsing for saving plan views.
"""

from typing import Any, Dict, List
from savingbank.data.savings.saving_plan import SavingPlan


class PlanService:

    @staticmethod
    def serialize(plan: SavingPlan) -> Dict[str, Any]:
        return plan.to_dict()

    @staticmethod
    def serialize_many(plans: List[SavingPlan]) -> List[Dict[str, Any]]:
        return [plan.to_dict() for plan in plans]

    @staticmethod
    def extract_terms(payload: Dict[str, Any]) -> Dict[str, Any]:
        """Keep only the editable plan terms from a request body"""
        return {field: payload[field] for field in SavingPlan.TERM_FIELDS if field in payload}
