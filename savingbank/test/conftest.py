"""
Pytest configuration and fixtures for the savings bank
"""
import os
import tempfile

# Keep test runs from writing into the project's logs/ directory
os.environ.setdefault("SAVINGBANK_LOG_DIR", tempfile.mkdtemp(prefix="savingbank-logs-"))
os.environ.setdefault("SAVINGBANK_CONSOLE_LOG_LEVEL", "WARNING")

import pytest
from flask import g
from savingbank import create_app
from savingbank import db as _db
from savingbank.build import build_database
from savingbank.data.core.account import Account
from savingbank.buisness.savings import SavingBankContext, ManualClock

UNIT = 10 ** 6

ADMIN = 'admin'
ALICE = 'alice'
BOB = 'bob'
TREASURY = 'treasury'

ADMIN_API_KEY = 'test-admin-key'
ALICE_API_KEY = 'test-alice-key'
BOB_API_KEY = 'test-bob-key'

STANDARD_PLAN = {
    'name': 'Fixed 30-365 days',
    'min_amount': 100 * UNIT,
    'max_amount': 0,
    'min_term_days': 30,
    'max_term_days': 365,
    'interest_rate_bps': 800,
    'penalty_rate_bps': 500,
}


@pytest.fixture(scope='function')
def clock():
    return ManualClock()


@pytest.fixture(scope='function')
def app(clock):
    """Create Flask application on a fresh in-memory database"""
    app = create_app({
        'SECRET_KEY': 'test-secret-key',
        'SQLALCHEMY_DATABASE_URI': 'sqlite://',
        'TESTING': True,
        'RATELIMIT_ENABLED': False,
        'SAVINGBANK_ADMIN_ADDRESS': ADMIN,
        'SAVINGBANK_ADMIN_API_KEY': ADMIN_API_KEY,
        'SAVINGBANK_CLOCK': clock,
    })
    build_database(app)

    with app.app_context():
        yield app
        _db.session.remove()


@pytest.fixture(scope='function')
def ctx(app):
    return SavingBankContext.from_app(app)


@pytest.fixture(scope='function')
def plan(ctx):
    return ctx.create_plan(ADMIN, dict(STANDARD_PLAN))


@pytest.fixture(scope='function')
def funded(ctx):
    """
    Alice and Bob each hold 100,000 units and have approved the ledger.
    The admin holds 1,000,000 units and has approved the ledger too, but
    has not topped up the vault.
    """
    for address, amount in ((ALICE, 100_000 * UNIT), (BOB, 100_000 * UNIT), (ADMIN, 1_000_000 * UNIT)):
        ctx.mint_asset(address, amount)
        ctx.approve_asset(address, ctx.ledger_address, amount)
    return ctx


@pytest.fixture(scope='function')
def liquid(funded):
    """funded, plus 50,000 units of admin liquidity in the vault to cover interest"""
    funded.deposit_to_vault(ADMIN, 50_000 * UNIT)
    return funded


@pytest.fixture(scope='function')
def accounts(app):
    Account.register(ALICE, api_key=ALICE_API_KEY)
    Account.register(BOB, api_key=BOB_API_KEY)
    _db.session.commit()


@pytest.fixture(scope='function')
def client(app):
    """
    Create Flask test client.

    Requests run inside the app context the app fixture pushed, so flask.g
    outlives each request. The caller Flask-Login resolved for one request is
    dropped before the next so every request authenticates from its own
    X-Api-Key header.
    """
    @app.before_request
    def forget_previous_caller():
        g.pop('_login_user', None)

    return app.test_client()


def auth_headers(api_key):
    return {'X-Api-Key': api_key}
