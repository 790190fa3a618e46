"""
Column type for asset amounts in the asset's smallest unit
"""

from decimal import Decimal
from sqlalchemy.types import Numeric, String, TypeDecorator

# Largest amount the bank accepts: an unsigned 256-bit value
MAX_TOKEN_AMOUNT = 2 ** 256 - 1
AMOUNT_DIGITS = len(str(MAX_TOKEN_AMOUNT))


class TokenAmount(TypeDecorator):
    """
    Integer amount up to MAX_TOKEN_AMOUNT, read back as a Python int.

    Backends with a native decimal store NUMERIC(78, 0). SQLite binds
    NUMERIC through float, so there the value is kept as its decimal text.
    Amount columns are never compared or summed in SQL.
    """

    impl = Numeric(AMOUNT_DIGITS, 0)
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.supports_native_decimal:
            return dialect.type_descriptor(Numeric(AMOUNT_DIGITS, 0))
        return dialect.type_descriptor(String(AMOUNT_DIGITS))

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        value = int(value)
        if dialect.supports_native_decimal:
            return Decimal(value)
        return str(value)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return int(value)
