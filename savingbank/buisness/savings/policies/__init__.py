"""
Policy classes for savings bank business rules

Policies are composable validation rules that enforce business invariants.
They raise domain exceptions when violations are detected and never mutate.
"""

from savingbank.buisness.savings.policies.plan_terms import PlanTermsPolicy
from savingbank.buisness.savings.policies.deposit_eligibility import DepositEligibilityPolicy
from savingbank.buisness.savings.policies.unit_ownership import UnitOwnershipPolicy

__all__ = [
    'PlanTermsPolicy',
    'DepositEligibilityPolicy',
    'UnitOwnershipPolicy',
]
