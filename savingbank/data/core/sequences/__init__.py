"""
Sequence ID Managers
Counters for entities whose ids must never be reused
"""

from savingbank.data.core.sequences.deposit_id_manager import DepositIDManager
from savingbank.data.core.sequences.plan_id_manager import PlanIDManager

__all__ = [
    'DepositIDManager',
    'PlanIDManager',
]
