"""
Admin role, pause switch, penalty receiver and admin vault operations
"""
import pytest
from conftest import ADMIN, ALICE, BOB, TREASURY, UNIT
from savingbank.data.core.ledger_event import LedgerEvent
from savingbank.buisness.savings.errors import (
    EnforcedPauseError,
    ExpectedPauseError,
    InsufficientBalanceError,
    InvalidAmountError,
    NotAdminError,
)


def _event_payloads(name):
    return [event.payload for event in LedgerEvent.query.filter_by(name=name).order_by(LedgerEvent.id).all()]


def test_pause_and_unpause(ctx):
    ctx.pause(ADMIN)
    assert ctx.access.paused is True
    ctx.unpause(ADMIN)
    assert ctx.access.paused is False

    assert _event_payloads('Paused') == [{'account': ADMIN}]
    assert _event_payloads('Unpaused') == [{'account': ADMIN}]


def test_pause_twice(ctx):
    ctx.pause(ADMIN)
    with pytest.raises(EnforcedPauseError):
        ctx.pause(ADMIN)


def test_unpause_when_running(ctx):
    with pytest.raises(ExpectedPauseError):
        ctx.unpause(ADMIN)


@pytest.mark.parametrize('operation', ['pause', 'unpause'])
def test_pause_requires_admin(ctx, operation):
    with pytest.raises(NotAdminError):
        getattr(ctx, operation)(ALICE)


def test_set_penalty_receiver(ctx):
    ctx.set_penalty_receiver(ADMIN, TREASURY)
    assert ctx.access.penalty_receiver == TREASURY

    ctx.set_penalty_receiver(ADMIN, None)
    assert ctx.access.penalty_receiver is None

    assert _event_payloads('PenaltyReceiverUpdated') == [{'receiver': TREASURY}, {'receiver': None}]

    with pytest.raises(NotAdminError):
        ctx.set_penalty_receiver(ALICE, ALICE)


def test_deposit_to_vault(funded):
    funded.deposit_to_vault(ADMIN, 5_000 * UNIT)

    assert funded.vault_balance() == 5_000 * UNIT
    assert funded.asset_balance(ADMIN) == 995_000 * UNIT
    assert _event_payloads('VaultDeposited') == [{'amount': 5_000 * UNIT}]


def test_withdraw_from_vault(funded):
    funded.deposit_to_vault(ADMIN, 5_000 * UNIT)
    funded.withdraw_from_vault(ADMIN, 2_000 * UNIT)

    assert funded.vault_balance() == 3_000 * UNIT
    assert funded.asset_balance(ADMIN) == 997_000 * UNIT
    assert _event_payloads('VaultWithdrawn') == [{'amount': 2_000 * UNIT}]


def test_withdraw_from_vault_beyond_balance(funded):
    funded.deposit_to_vault(ADMIN, 5_000 * UNIT)
    with pytest.raises(InsufficientBalanceError):
        funded.withdraw_from_vault(ADMIN, 5_000 * UNIT + 1)
    assert funded.vault_balance() == 5_000 * UNIT
    assert _event_payloads('VaultWithdrawn') == []


@pytest.mark.parametrize('operation', ['deposit_to_vault', 'withdraw_from_vault'])
def test_vault_operations_reject_zero(funded, operation):
    with pytest.raises(InvalidAmountError):
        getattr(funded, operation)(ADMIN, 0)


@pytest.mark.parametrize('operation', ['deposit_to_vault', 'withdraw_from_vault'])
def test_vault_operations_require_admin(funded, operation):
    with pytest.raises(NotAdminError):
        getattr(funded, operation)(ALICE, UNIT)


@pytest.mark.parametrize('operation', ['deposit_to_vault', 'withdraw_from_vault'])
def test_vault_operations_blocked_while_paused(funded, operation):
    funded.pause(ADMIN)
    with pytest.raises(EnforcedPauseError):
        getattr(funded, operation)(ADMIN, UNIT)


def test_transfer_admin(ctx):
    ctx.transfer_admin(ADMIN, BOB)
    assert ctx.access.admin == BOB

    with pytest.raises(NotAdminError):
        ctx.pause(ADMIN)
    ctx.pause(BOB)


def test_admin_can_drain_liquidity_but_not_deposits_beyond_balance(funded, plan):
    funded.create_deposit(ALICE, plan.id, 1_000 * UNIT, 30)
    # The vault is pooled: the admin path is bounded only by the aggregate balance
    funded.withdraw_from_vault(ADMIN, 1_000 * UNIT)
    assert funded.vault_balance() == 0


def test_summary(funded):
    funded.deposit_to_vault(ADMIN, 10 * UNIT)
    summary = funded.get_summary()
    assert summary['admin'] == ADMIN
    assert summary['vault_balance'] == 10 * UNIT
    assert summary['paused'] is False
    assert summary['penalty_receiver'] is None
