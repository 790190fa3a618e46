from savingbank import db
from savingbank.data.core.token_amount import TokenAmount
from savingbank.data.core.timestamped_base import TimestampedBase


class AssetBalance(TimestampedBase):
    """Balance of the fungible asset held by one address"""
    __tablename__ = 'asset_balances'

    id = db.Column(db.Integer, primary_key=True)
    address = db.Column(db.String(128), unique=True, nullable=False)
    balance = db.Column(TokenAmount, nullable=False, default=0)

    def __repr__(self):
        return f'<AssetBalance {self.address}: {self.balance}>'


class AssetAllowance(TimestampedBase):
    """Amount a spender may pull from an owner's balance"""
    __tablename__ = 'asset_allowances'
    __table_args__ = (
        db.UniqueConstraint('owner', 'spender', name='uq_asset_allowance_owner_spender'),
    )

    id = db.Column(db.Integer, primary_key=True)
    owner = db.Column(db.String(128), nullable=False)
    spender = db.Column(db.String(128), nullable=False)
    amount = db.Column(TokenAmount, nullable=False, default=0)

    def __repr__(self):
        return f'<AssetAllowance {self.owner} -> {self.spender}: {self.amount}>'
