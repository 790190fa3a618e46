"""
Row <-> dict helpers shared by every savings model.

Build uses find_or_create_from_dict to seed the singleton rows; the read
services use to_dict to shape JSON views.
"""

from datetime import datetime
from sqlalchemy import inspect
from savingbank import db
from savingbank.logger import get_logger

logger = get_logger("savingbank.domain.core.data_insertion")

AUDIT_FIELDS = ('created_at', 'updated_at')


class DataInsertionMixin:
    """
    Adds from_dict / to_dict / find_or_create_from_dict to a model.

    Amounts are plain Python ints and pass through unchanged; datetimes are
    rendered as ISO-8601 strings.
    """

    @classmethod
    def _column_keys(cls):
        return [column.key for column in inspect(cls).columns]

    @classmethod
    def from_dict(cls, data_dict, skip_fields=None):
        """Build an unsaved instance from the keys that name real columns."""
        skip = set(skip_fields or ())
        keys = set(cls._column_keys()) - skip
        values = {
            key: value for key, value in data_dict.items()
            if key in keys and not (key in AUDIT_FIELDS and value is None)
        }
        return cls(**values)

    def to_dict(self, include_audit_fields=True, skip_fields=None):
        skip = set(skip_fields or ())
        if not include_audit_fields:
            skip.update(AUDIT_FIELDS)

        view = {}
        for key in self._column_keys():
            if key in skip:
                continue
            value = getattr(self, key)
            view[key] = value.isoformat() if isinstance(value, datetime) else value
        return view

    @classmethod
    def find_or_create_from_dict(cls, data_dict, lookup_fields, skip_fields=None, commit=True):
        """
        Return (instance, created).

        The lookup uses only the lookup_fields present in data_dict. With
        commit=False the new row is flushed so the caller can commit several
        rows together.
        """
        lookup = {field: data_dict[field] for field in lookup_fields if field in data_dict}
        existing = cls.query.filter_by(**lookup).first()
        if existing is not None:
            return existing, False

        instance = cls.from_dict(data_dict, skip_fields)
        db.session.add(instance)
        try:
            if commit:
                db.session.commit()
            else:
                db.session.flush()
        except Exception as e:
            db.session.rollback()
            logger.error(f"Could not create {cls.__name__} row: {e}")
            raise
        logger.info(f"Created {cls.__name__} row {lookup}")
        return instance, True
