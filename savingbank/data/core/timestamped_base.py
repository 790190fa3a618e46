from savingbank import db
from datetime import datetime
from sqlalchemy.orm import declared_attr
from savingbank.buisness.core.data_insertion_mixin import DataInsertionMixin


class TimestampedBase(db.Model, DataInsertionMixin):
    """Abstract base class for persisted entities with an audit timestamp trail"""

    __abstract__ = True

    @declared_attr
    def __tablename__(cls):
        return cls.__name__.lower() + 's'

    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
