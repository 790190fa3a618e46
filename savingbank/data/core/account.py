from savingbank import db
from flask_login import UserMixin
from datetime import datetime
import hashlib
import secrets
from savingbank.buisness.core.data_insertion_mixin import DataInsertionMixin


class Account(UserMixin, DataInsertionMixin, db.Model):
    """
    API credential bound to an on-ledger address.

    An account only tells the API *who* is calling. What the caller may do is
    decided elsewhere: admin rights by ProtocolConfig.admin, deposit rights by
    the current holder of the ownership unit.
    """
    __tablename__ = 'accounts'

    id = db.Column(db.Integer, primary_key=True)
    address = db.Column(db.String(128), unique=True, nullable=False)
    api_key_digest = db.Column(db.String(64), unique=True, nullable=False)
    is_active = db.Column(db.Boolean, default=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    @staticmethod
    def digest_api_key(api_key):
        return hashlib.sha256(api_key.encode('utf-8')).hexdigest()

    @staticmethod
    def generate_api_key():
        return secrets.token_urlsafe(32)

    def set_api_key(self, api_key):
        self.api_key_digest = self.digest_api_key(api_key)

    @classmethod
    def find_by_api_key(cls, api_key):
        if not api_key:
            return None
        return cls.query.filter_by(api_key_digest=cls.digest_api_key(api_key), is_active=True).first()

    @classmethod
    def register(cls, address, api_key=None):
        """
        Create an account for an address (flushes, does not commit)

        Returns:
            tuple: (account, api_key) - the plain key is only available here
        """
        api_key = api_key or cls.generate_api_key()
        account = cls(address=address)
        account.set_api_key(api_key)
        db.session.add(account)
        db.session.flush()
        return account, api_key

    def __repr__(self):
        return f'<Account {self.address}>'
