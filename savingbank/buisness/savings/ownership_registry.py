"""
OwnershipRegistry - non-fungible ownership units

Mint and burn belong to one bound minter (the deposit ledger), which supplies
the ids. Holders transfer and approve freely; the ledger is never notified and
discovers the current holder when it next needs it.
"""

from typing import List, Optional
from savingbank import db
from savingbank.data.savings.ownership_unit import OwnershipUnit, RetiredUnit, OperatorApproval
from savingbank.data.savings.singletons import RegistryState
from savingbank.buisness.savings.narrator import LedgerNarrator
from savingbank.buisness.savings.errors import (
    AlreadyBoundError,
    UnauthorizedCallerError,
    UnitNotFoundError,
    UnitAlreadyExistsError,
    NotApprovedOrOwnerError,
    IncorrectOwnerError,
)
from savingbank.logger import get_logger

logger = get_logger("savingbank.registry")


class OwnershipRegistry:

    @property
    def state(self) -> RegistryState:
        return RegistryState.get()

    def bind_minter(self, minter: str) -> None:
        state = self.state
        if state.minter is not None:
            raise AlreadyBoundError(f"Registry minter already bound to {state.minter}")
        state.minter = minter
        logger.info(f"Registry minter bound to {minter}")

    def _require_minter(self, caller: str) -> None:
        minter = self.state.minter
        if minter is None or caller != minter:
            raise UnauthorizedCallerError(f"{caller} is not the registry minter", caller=caller)

    def _unit(self, unit_id: int) -> OwnershipUnit:
        unit = db.session.get(OwnershipUnit, unit_id)
        if unit is None:
            raise UnitNotFoundError(f"Ownership unit {unit_id} does not exist", unit_id=unit_id)
        return unit

    # ========== Minter operations ==========

    def mint(self, caller: str, to: str, unit_id: int) -> None:
        """
        Raises:
            UnauthorizedCallerError: caller is not the minter
            UnitAlreadyExistsError: id is live or was burned before
        """
        self._require_minter(caller)
        if not to:
            raise NotApprovedOrOwnerError("Cannot mint to an empty address")
        if db.session.get(OwnershipUnit, unit_id) is not None or db.session.get(RetiredUnit, unit_id) is not None:
            raise UnitAlreadyExistsError(f"Ownership unit {unit_id} already exists or was retired", unit_id=unit_id)
        db.session.add(OwnershipUnit(id=unit_id, holder=to))
        db.session.flush()
        LedgerNarrator.emit('Transfer', sender=None, recipient=to, unit_id=unit_id)

    def burn(self, caller: str, unit_id: int) -> None:
        """Remove the unit permanently and retire its id"""
        self._require_minter(caller)
        unit = self._unit(unit_id)
        holder = unit.holder
        db.session.delete(unit)
        db.session.add(RetiredUnit(id=unit_id, last_holder=holder))
        db.session.flush()
        LedgerNarrator.emit('Transfer', sender=holder, recipient=None, unit_id=unit_id)

    # ========== Reads ==========

    def owner_of(self, unit_id: int) -> str:
        """
        Raises:
            UnitNotFoundError: never minted or already burned
        """
        return self._unit(unit_id).holder

    def exists(self, unit_id: int) -> bool:
        return db.session.get(OwnershipUnit, unit_id) is not None

    def is_retired(self, unit_id: int) -> bool:
        return db.session.get(RetiredUnit, unit_id) is not None

    def balance_of(self, holder: str) -> int:
        return OwnershipUnit.query.filter_by(holder=holder).count()

    def units_of(self, holder: str) -> List[int]:
        rows = OwnershipUnit.query.filter_by(holder=holder).order_by(OwnershipUnit.id).all()
        return [row.id for row in rows]

    def get_approved(self, unit_id: int) -> Optional[str]:
        return self._unit(unit_id).approved

    def is_approved_for_all(self, holder: str, operator: str) -> bool:
        return OperatorApproval.query.filter_by(holder=holder, operator=operator).first() is not None

    # ========== Holder operations ==========

    def approve(self, caller: str, to: Optional[str], unit_id: int) -> None:
        """Approve `to` (or clear with None) to transfer one unit"""
        unit = self._unit(unit_id)
        if caller != unit.holder and not self.is_approved_for_all(unit.holder, caller):
            raise NotApprovedOrOwnerError(f"{caller} may not approve unit {unit_id}", unit_id=unit_id)
        unit.approved = to
        LedgerNarrator.emit('Approval', holder=unit.holder, approved=to, unit_id=unit_id)

    def set_approval_for_all(self, caller: str, operator: str, approved: bool) -> None:
        if operator == caller:
            raise NotApprovedOrOwnerError("Cannot set operator approval for oneself")
        row = OperatorApproval.query.filter_by(holder=caller, operator=operator).first()
        if approved and row is None:
            db.session.add(OperatorApproval(holder=caller, operator=operator))
        elif not approved and row is not None:
            db.session.delete(row)
        db.session.flush()
        LedgerNarrator.emit('ApprovalForAll', holder=caller, operator=operator, approved=bool(approved))

    def transfer_from(self, caller: str, sender: str, recipient: str, unit_id: int) -> None:
        """
        Move a unit. The caller must be the holder, the unit's approved
        address, or an operator of the holder.

        Raises:
            UnitNotFoundError, IncorrectOwnerError, NotApprovedOrOwnerError
        """
        unit = self._unit(unit_id)
        if unit.holder != sender:
            raise IncorrectOwnerError(f"Unit {unit_id} is not held by {sender}", unit_id=unit_id)
        if not recipient:
            raise NotApprovedOrOwnerError("Cannot transfer to an empty address")
        authorized = (
            caller == unit.holder
            or caller == unit.approved
            or self.is_approved_for_all(unit.holder, caller)
        )
        if not authorized:
            raise NotApprovedOrOwnerError(f"{caller} may not transfer unit {unit_id}", unit_id=unit_id)

        unit.holder = recipient
        unit.approved = None
        LedgerNarrator.emit('Transfer', sender=sender, recipient=recipient, unit_id=unit_id)
