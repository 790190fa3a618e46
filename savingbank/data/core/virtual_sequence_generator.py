"""
Counter tables that hand out monotonically increasing ids inside the caller's
transaction.
"""

from sqlalchemy import text
from savingbank import db


class VirtualSequenceGenerator:
    """
    One single-row table per id space.

    The increment runs through the ORM session, so an id taken by an
    operation that later rolls back goes back to the counter with it and the
    visible id sequence has no gaps. Concurrent operations are serialized by
    the write lock the UPDATE takes, held until their transaction ends.
    """

    table_name = None

    @classmethod
    def _table(cls):
        if not cls.table_name:
            raise NotImplementedError(f"{cls.__name__} must set table_name")
        return cls.table_name

    @classmethod
    def next_id(cls):
        table = cls._table()
        db.session.execute(text(f"UPDATE {table} SET current_value = current_value + 1"))
        return db.session.execute(text(f"SELECT current_value FROM {table}")).scalar()

    @classmethod
    def current_value(cls):
        """Last id handed out, 0 before the first."""
        return db.session.execute(text(f"SELECT current_value FROM {cls._table()}")).scalar()

    @classmethod
    def ensure_table(cls):
        table = cls._table()
        try:
            db.session.execute(text(
                f"CREATE TABLE IF NOT EXISTS {table} "
                f"(id INTEGER PRIMARY KEY, current_value INTEGER NOT NULL DEFAULT 0)"
            ))
            if not db.session.execute(text(f"SELECT COUNT(*) FROM {table}")).scalar():
                db.session.execute(text(f"INSERT INTO {table} (current_value) VALUES (0)"))
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
