from savingbank import db
from savingbank.data.core.token_amount import TokenAmount
from savingbank.data.core.timestamped_base import TimestampedBase


class SavingPlan(TimestampedBase):
    __tablename__ = 'saving_plans'

    # Editable terms (everything update_plan overwrites)
    TERM_FIELDS = (
        'name',
        'min_amount',
        'max_amount',
        'min_term_days',
        'max_term_days',
        'interest_rate_bps',
        'penalty_rate_bps',
    )

    id = db.Column(db.Integer, primary_key=True, autoincrement=False)
    name = db.Column(db.String(255), nullable=False)
    min_amount = db.Column(TokenAmount, nullable=False, default=0)
    max_amount = db.Column(TokenAmount, nullable=False, default=0)  # 0 = unbounded
    min_term_days = db.Column(db.Integer, nullable=False)
    max_term_days = db.Column(db.Integer, nullable=False)
    interest_rate_bps = db.Column(db.Integer, nullable=False)
    penalty_rate_bps = db.Column(db.Integer, nullable=False)
    is_active = db.Column(db.Boolean, nullable=False, default=True)

    def __repr__(self):
        return f'<SavingPlan {self.id}: {self.name}>'

    @property
    def has_max_amount(self):
        return self.max_amount > 0
