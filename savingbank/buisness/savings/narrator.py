"""
LedgerNarrator - event emission for savings bank operations

Every observable event is written as a LedgerEvent row in the current
transaction and mirrored to the log as a one-line narrative.
"""

from savingbank.data.core.ledger_event import LedgerEvent
from savingbank.logger import get_logger

logger = get_logger("savingbank.events")


class LedgerNarrator:
    """
    Composes and records events. Methods flush but never commit: the event
    only survives if the surrounding operation does.
    """

    @staticmethod
    def emit(name: str, /, **payload) -> LedgerEvent:
        event = LedgerEvent.add_event(name, **payload)
        logger.info(LedgerNarrator.describe(name, payload), extra={'event': name, 'event_id': event.id})
        return event

    @staticmethod
    def describe(name: str, payload: dict) -> str:
        """One-line narrative for an event"""
        if name == 'DepositCreated':
            return (f"Deposit {payload['id']} created for {payload['depositor']}: "
                    f"{payload['amount']} under plan {payload['plan_id']}")
        if name == 'Withdrawn':
            kind = "Early withdrawal" if payload['early'] else "Matured withdrawal"
            return (f"{kind} of deposit {payload['id']} by {payload['caller']}: payout {payload['payout']}, "
                    f"interest {payload['interest']}, penalty {payload['penalty']}")
        if name == 'Renewed':
            return f"Deposit {payload['old_id']} renewed into {payload['new_id']} with {payload['new_amount']}"
        args = ", ".join(f"{key}={value}" for key, value in payload.items())
        return f"{name}({args})"
