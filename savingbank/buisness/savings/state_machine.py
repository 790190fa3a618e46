"""
State machine for the deposit lifecycle

Encodes valid transitions. Keeps "what is allowed" separate from
"how persistence occurs" (DepositLedger).
"""

from typing import Dict, Set
from savingbank.buisness.savings.errors import DepositClosedError, DepositTransitionError


class DepositStateMachine:
    """
    Deposit status transitions.

    Active is the initial state. A deposit is closed exactly once, either by a
    withdrawal or by a renewal, and never reopens.
    """

    ACTIVE = 'Active'
    CLOSED = 'Closed'

    # Close reasons
    WITHDRAWN = 'Withdrawn'
    RENEWED = 'Renewed'
    CLOSE_REASONS = {WITHDRAWN, RENEWED}

    TERMINAL_STATES = {CLOSED}

    TRANSITIONS: Dict[str, Set[str]] = {
        ACTIVE: {CLOSED},
        # CLOSED is terminal
    }

    @classmethod
    def can_transition(cls, from_status: str, to_status: str) -> bool:
        if from_status in cls.TERMINAL_STATES:
            return False
        return to_status in cls.TRANSITIONS.get(from_status, set())

    @classmethod
    def validate_transition(cls, from_status: str, to_status: str, deposit_id: int = None) -> None:
        """
        Raises:
            DepositClosedError: if the deposit is already in a terminal state
            DepositTransitionError: for any other disallowed transition
        """
        if from_status in cls.TERMINAL_STATES:
            raise DepositClosedError(f"Deposit {deposit_id} is already closed", deposit_id=deposit_id)
        if not cls.can_transition(from_status, to_status):
            raise DepositTransitionError(
                f"Invalid deposit status transition: {from_status} → {to_status}",
                deposit_id=deposit_id,
            )

    @classmethod
    def close(cls, deposit, now: int, reason: str) -> None:
        """Apply Active → Closed to a deposit record"""
        if reason not in cls.CLOSE_REASONS:
            raise DepositTransitionError(f"Unknown close reason: {reason}", deposit_id=deposit.id)
        cls.validate_transition(deposit.status, cls.CLOSED, deposit.id)
        deposit.status = cls.CLOSED
        deposit.is_closed = True
        deposit.closed_at = now
        deposit.close_reason = reason
