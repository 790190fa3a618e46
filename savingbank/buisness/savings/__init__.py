"""
Savings bank business layer

Fixed-term deposits with ownership carried by transferable units.
"""

from savingbank.buisness.savings.context import SavingBankContext
from savingbank.buisness.savings.deposit_ledger import DepositLedger, WithdrawalResult
from savingbank.buisness.savings.clock import SystemClock, ManualClock

__all__ = [
    'SavingBankContext',
    'DepositLedger',
    'WithdrawalResult',
    'SystemClock',
    'ManualClock',
]
