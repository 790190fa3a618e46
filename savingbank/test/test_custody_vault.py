"""
Custody vault: bound caller only, aggregate balance, no policy
"""
import pytest
from conftest import ALICE, UNIT
from savingbank.buisness.savings.errors import (
    AlreadyBoundError,
    InsufficientAllowanceError,
    InsufficientBalanceError,
    UnauthorizedCallerError,
)


def test_bound_to_ledger_at_build(funded):
    vault = funded.vault
    assert vault.state.bound_caller == funded.ledger_address
    with pytest.raises(AlreadyBoundError):
        vault.bind(ALICE)


def test_deposit_pulls_from_source(funded):
    vault, asset = funded.vault, funded.asset
    vault.deposit(funded.ledger_address, ALICE, 250 * UNIT)

    assert vault.get_balance() == 250 * UNIT
    assert asset.balance_of(vault.address) == 250 * UNIT
    assert asset.balance_of(ALICE) == 99_750 * UNIT
    assert asset.allowance(ALICE, funded.ledger_address) == 99_750 * UNIT


def test_deposit_needs_allowance(ctx):
    ctx.mint_asset(ALICE, 10 * UNIT)
    with pytest.raises(InsufficientAllowanceError):
        ctx.vault.deposit(ctx.ledger_address, ALICE, 10 * UNIT)


def test_only_bound_caller(funded):
    with pytest.raises(UnauthorizedCallerError):
        funded.vault.deposit(ALICE, ALICE, UNIT)
    with pytest.raises(UnauthorizedCallerError):
        funded.vault.withdraw(ALICE, UNIT, ALICE)


def test_withdraw_pays_out(funded):
    vault = funded.vault
    vault.deposit(funded.ledger_address, ALICE, 100 * UNIT)
    vault.withdraw(funded.ledger_address, 40 * UNIT, 'someone')

    assert vault.get_balance() == 60 * UNIT
    assert funded.asset_balance('someone') == 40 * UNIT


def test_withdraw_beyond_balance(funded):
    vault = funded.vault
    vault.deposit(funded.ledger_address, ALICE, 100 * UNIT)
    with pytest.raises(InsufficientBalanceError):
        vault.withdraw(funded.ledger_address, 100 * UNIT + 1, ALICE)
    assert vault.get_balance() == 100 * UNIT
