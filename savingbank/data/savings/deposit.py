from savingbank import db
from savingbank.data.core.token_amount import TokenAmount
from savingbank.data.core.timestamped_base import TimestampedBase


class Deposit(TimestampedBase):
    """
    A fixed-term deposit.

    The owner is deliberately not stored: it is whoever holds the ownership unit
    with the same id. `depositor` records who opened the deposit, for audit only.
    """
    __tablename__ = 'deposits'

    id = db.Column(db.Integer, primary_key=True, autoincrement=False)
    amount = db.Column(TokenAmount, nullable=False)
    plan_id = db.Column(db.Integer, db.ForeignKey('saving_plans.id'), nullable=False)
    term_days = db.Column(db.Integer, nullable=False)

    # Snapshot of the plan's rates at creation; later plan edits do not reach here
    interest_rate_bps = db.Column(db.Integer, nullable=False)
    penalty_rate_bps = db.Column(db.Integer, nullable=False)

    # Unix seconds from the injected clock
    start_time = db.Column(db.BigInteger, nullable=False)
    maturity_time = db.Column(db.BigInteger, nullable=False)

    status = db.Column(db.String(20), nullable=False, default='Active')
    is_closed = db.Column(db.Boolean, nullable=False, default=False)
    closed_at = db.Column(db.BigInteger, nullable=True)
    close_reason = db.Column(db.String(20), nullable=True)

    depositor = db.Column(db.String(128), nullable=False)
    renewed_from_id = db.Column(db.Integer, db.ForeignKey('deposits.id'), nullable=True)
    renewed_into_id = db.Column(db.Integer, db.ForeignKey('deposits.id'), nullable=True)

    # Relationships (no backrefs)
    plan = db.relationship('SavingPlan')

    def __repr__(self):
        return f'<Deposit {self.id}: {self.amount} ({self.status})>'

    def is_mature(self, now):
        """The maturity instant itself counts as matured"""
        return now >= self.maturity_time
