"""
Read services for the savings bank
Query helpers used by the API; no mutations
"""

from savingbank.services.savings.deposit_service import DepositService
from savingbank.services.savings.plan_service import PlanService
from savingbank.services.savings.event_service import EventService

__all__ = [
    'DepositService',
    'PlanService',
    'EventService',
]
