"""
Single-row state tables for the savings bank components.

Each table holds exactly one row with id=1, created by build_database().
"""

from savingbank import db
from savingbank.data.core.token_amount import TokenAmount
from savingbank.data.core.timestamped_base import TimestampedBase


class SingletonRowMixin:
    SINGLETON_ID = 1

    @classmethod
    def get(cls):
        return db.session.get(cls, cls.SINGLETON_ID)


class ProtocolConfig(SingletonRowMixin, TimestampedBase):
    """Admin role, pause switch and penalty routing"""
    __tablename__ = 'protocol_config'

    id = db.Column(db.Integer, primary_key=True, autoincrement=False)
    admin = db.Column(db.String(128), nullable=False)
    ledger_address = db.Column(db.String(128), nullable=False)
    paused = db.Column(db.Boolean, nullable=False, default=False)
    penalty_receiver = db.Column(db.String(128), nullable=True)  # None = penalty stays in vault


class VaultState(SingletonRowMixin, TimestampedBase):
    """Pooled custody: one aggregate balance, one bound caller"""
    __tablename__ = 'vault_state'

    id = db.Column(db.Integer, primary_key=True, autoincrement=False)
    custody_address = db.Column(db.String(128), nullable=False)
    bound_caller = db.Column(db.String(128), nullable=True)
    balance = db.Column(TokenAmount, nullable=False, default=0)


class RegistryState(SingletonRowMixin, TimestampedBase):
    """Ownership registry metadata and its bound minter"""
    __tablename__ = 'registry_state'

    id = db.Column(db.Integer, primary_key=True, autoincrement=False)
    name = db.Column(db.String(255), nullable=False)
    symbol = db.Column(db.String(32), nullable=False)
    minter = db.Column(db.String(128), nullable=True)
