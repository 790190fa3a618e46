from savingbank import db
from datetime import datetime
from savingbank.buisness.core.data_insertion_mixin import DataInsertionMixin


class LedgerEvent(DataInsertionMixin, db.Model):
    """
    Observable event emitted by a savings bank operation.

    Rows are written inside the operation's transaction, so a rolled-back
    operation leaves no event behind.
    """
    __tablename__ = 'ledger_events'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(64), nullable=False, index=True)
    payload = db.Column(db.JSON, nullable=False, default=dict)
    timestamp = db.Column(db.DateTime, default=datetime.utcnow)

    def __repr__(self):
        return f'<LedgerEvent {self.name}: {self.payload}>'

    @classmethod
    def add_event(cls, name, /, **payload):
        """
        Create a new event row without committing

        Args:
            name (str): Event name, e.g. "DepositCreated"
            **payload: Event arguments

        Returns:
            LedgerEvent: The flushed event
        """
        event = cls(name=name, payload=payload)
        db.session.add(event)
        db.session.flush()
        return event
