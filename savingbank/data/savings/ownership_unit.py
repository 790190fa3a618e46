from savingbank import db
from savingbank.data.core.timestamped_base import TimestampedBase


class OwnershipUnit(TimestampedBase):
    """Live non-fungible unit; the row is deleted when the unit is burned"""
    __tablename__ = 'ownership_units'

    id = db.Column(db.Integer, primary_key=True, autoincrement=False)
    holder = db.Column(db.String(128), nullable=False, index=True)
    approved = db.Column(db.String(128), nullable=True)

    def __repr__(self):
        return f'<OwnershipUnit {self.id}: {self.holder}>'


class RetiredUnit(db.Model):
    """Ids that have been burned and may never be minted again"""
    __tablename__ = 'retired_units'

    id = db.Column(db.Integer, primary_key=True, autoincrement=False)
    last_holder = db.Column(db.String(128), nullable=False)


class OperatorApproval(TimestampedBase):
    """Blanket approval from a holder to an operator over all of its units"""
    __tablename__ = 'operator_approvals'
    __table_args__ = (
        db.UniqueConstraint('holder', 'operator', name='uq_operator_approval_holder_operator'),
    )

    id = db.Column(db.Integer, primary_key=True)
    holder = db.Column(db.String(128), nullable=False)
    operator = db.Column(db.String(128), nullable=False)
