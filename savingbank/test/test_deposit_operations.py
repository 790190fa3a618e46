"""
Opening deposits: validation order, fund movement, id allocation, rollback
"""
import pytest
from conftest import ADMIN, ALICE, BOB, STANDARD_PLAN, UNIT
from savingbank.data.core.ledger_event import LedgerEvent
from savingbank.data.core.sequences import DepositIDManager
from savingbank.data.savings.deposit import Deposit
from savingbank.buisness.savings.errors import (
    DepositNotFoundError,
    EnforcedPauseError,
    InsufficientAllowanceError,
    InsufficientFundsError,
    InvalidAmountError,
    InvalidTermError,
    PlanNotActiveError,
    PlanNotFoundError,
)


def test_create_deposit(funded, plan, clock):
    deposit_id = funded.create_deposit(ALICE, plan.id, 10_000 * UNIT, 90)

    assert deposit_id == 1
    view = funded.get_deposit(deposit_id)
    assert view['amount'] == 10_000 * UNIT
    assert view['plan_id'] == plan.id
    assert view['term_days'] == 90
    assert view['start_time'] == clock.now
    assert view['maturity_time'] == clock.now + 90 * 86_400
    assert view['is_closed'] is False
    assert view['state'] == 'Active'
    assert view['owner'] == ALICE
    assert view['depositor'] == ALICE

    assert funded.owner_of(deposit_id) == ALICE
    assert funded.vault_balance() == 10_000 * UNIT
    assert funded.asset_balance(ALICE) == 90_000 * UNIT

    event = LedgerEvent.query.filter_by(name='DepositCreated').one()
    assert event.payload == {'id': 1, 'depositor': ALICE, 'amount': 10_000 * UNIT, 'plan_id': plan.id}


def test_ids_are_sequential_across_depositors(funded, plan):
    assert funded.create_deposit(ALICE, plan.id, 100 * UNIT, 30) == 1
    assert funded.create_deposit(BOB, plan.id, 100 * UNIT, 30) == 2
    assert funded.create_deposit(ALICE, plan.id, 100 * UNIT, 30) == 3
    assert funded.registry.units_of(ALICE) == [1, 3]


def test_amount_below_minimum(funded, plan):
    with pytest.raises(InvalidAmountError):
        funded.create_deposit(ALICE, plan.id, 10 * UNIT, 90)
    assert Deposit.query.count() == 0
    assert funded.vault_balance() == 0


def test_amount_above_maximum(funded):
    capped = funded.create_plan(ADMIN, dict(STANDARD_PLAN, max_amount=1_000 * UNIT))
    assert funded.create_deposit(ALICE, capped.id, 1_000 * UNIT, 30) == 1
    with pytest.raises(InvalidAmountError):
        funded.create_deposit(ALICE, capped.id, 1_000 * UNIT + 1, 30)


def test_zero_amount_rejected_even_without_minimum(funded):
    open_plan = funded.create_plan(ADMIN, dict(STANDARD_PLAN, min_amount=0))
    with pytest.raises(InvalidAmountError):
        funded.create_deposit(ALICE, open_plan.id, 0, 30)


@pytest.mark.parametrize('term_days', [29, 366, 0])
def test_term_outside_plan(funded, plan, term_days):
    with pytest.raises(InvalidTermError):
        funded.create_deposit(ALICE, plan.id, 100 * UNIT, term_days)


@pytest.mark.parametrize('term_days', [30, 365])
def test_term_boundaries_accepted(funded, plan, term_days):
    assert funded.create_deposit(ALICE, plan.id, 100 * UNIT, term_days) == 1


def test_unknown_plan(funded):
    with pytest.raises(PlanNotFoundError):
        funded.create_deposit(ALICE, 7, 100 * UNIT, 30)


def test_inactive_plan(funded, plan):
    funded.set_plan_active(ADMIN, plan.id, False)
    with pytest.raises(PlanNotActiveError):
        funded.create_deposit(ALICE, plan.id, 100 * UNIT, 30)


def test_inactive_plan_is_checked_before_amount(funded, plan):
    funded.set_plan_active(ADMIN, plan.id, False)
    with pytest.raises(PlanNotActiveError):
        funded.create_deposit(ALICE, plan.id, 1, 1)


def test_paused(funded, plan):
    funded.pause(ADMIN)
    with pytest.raises(EnforcedPauseError):
        funded.create_deposit(ALICE, plan.id, 100 * UNIT, 30)

    funded.unpause(ADMIN)
    assert funded.create_deposit(ALICE, plan.id, 100 * UNIT, 30) == 1


def test_missing_allowance_rolls_back(ctx, plan):
    ctx.mint_asset(ALICE, 1_000 * UNIT)
    with pytest.raises(InsufficientAllowanceError):
        ctx.create_deposit(ALICE, plan.id, 100 * UNIT, 30)

    assert Deposit.query.count() == 0
    assert DepositIDManager.current_value() == 0
    assert LedgerEvent.query.filter_by(name='DepositCreated').count() == 0


def test_insufficient_funds(ctx, plan):
    ctx.mint_asset(ALICE, 50 * UNIT)
    ctx.approve_asset(ALICE, ctx.ledger_address, 1_000 * UNIT)
    with pytest.raises(InsufficientFundsError):
        ctx.create_deposit(ALICE, plan.id, 100 * UNIT, 30)
    assert ctx.asset_balance(ALICE) == 50 * UNIT


def test_rates_are_snapshotted(funded, plan, clock):
    deposit_id = funded.create_deposit(ALICE, plan.id, 10_000 * UNIT, 90)
    funded.update_plan(ADMIN, plan.id, dict(STANDARD_PLAN, interest_rate_bps=5_000, penalty_rate_bps=9_000))

    view = funded.get_deposit(deposit_id)
    assert view['interest_rate_bps'] == 800
    assert view['penalty_rate_bps'] == 500

    funded.deposit_to_vault(ADMIN, 10_000 * UNIT)
    clock.advance_days(90)
    result = funded.withdraw(ALICE, deposit_id)
    assert result.interest == 197_260_273


def test_get_unknown_deposit(ctx):
    with pytest.raises(DepositNotFoundError):
        ctx.get_deposit(1)


def test_calculate_interest_preview(ctx, plan):
    assert ctx.calculate_interest(10_000 * UNIT, plan.id, 90) == 197_260_273
    assert ctx.calculate_interest(10_000 * UNIT, plan.id, 0) == 0
    with pytest.raises(InvalidAmountError):
        ctx.calculate_interest(0, plan.id, 90)
    with pytest.raises(PlanNotFoundError):
        ctx.calculate_interest(10_000 * UNIT, 99, 90)
