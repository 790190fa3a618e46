"""
Amounts past 64 bits: 18-decimal assets and the 256-bit upper bound
"""
import pytest
from conftest import ADMIN, ALICE, BOB, STANDARD_PLAN
from savingbank import db
from savingbank.data.core.token_amount import MAX_TOKEN_AMOUNT
from savingbank.buisness.savings.policies import DepositEligibilityPolicy
from savingbank.buisness.savings.errors import InvalidAmountError, InvalidPlanError

WEI = 10 ** 18
PRINCIPAL = 10_000 * WEI
INTEREST_90_DAYS = 197_260_273_972_602_739_726


@pytest.fixture
def wei_plan(ctx):
    return ctx.create_plan(ADMIN, dict(STANDARD_PLAN, name='18 decimals', min_amount=WEI))


@pytest.fixture
def wei_funded(ctx):
    for address, amount in ((ALICE, PRINCIPAL), (ADMIN, 1_000 * WEI)):
        ctx.mint_asset(address, amount)
        ctx.approve_asset(address, ctx.ledger_address, amount)
    ctx.deposit_to_vault(ADMIN, 1_000 * WEI)
    return ctx


def test_balances_survive_reload(ctx):
    ctx.mint_asset(BOB, 2 ** 255)
    db.session.expire_all()
    assert ctx.asset_balance(BOB) == 2 ** 255


def test_deposit_and_renew_with_18_decimals(wei_funded, wei_plan, clock):
    deposit_id = wei_funded.create_deposit(ALICE, wei_plan.id, PRINCIPAL, 90)
    assert wei_funded.vault_balance() == 1_000 * WEI + PRINCIPAL

    clock.advance_days(90)
    new_id = wei_funded.renew(ALICE, deposit_id, wei_plan.id, 90)

    db.session.expire_all()
    assert wei_funded.get_deposit(new_id)['amount'] == PRINCIPAL + INTEREST_90_DAYS
    assert wei_funded.get_deposit(deposit_id)['amount'] == PRINCIPAL


def test_withdraw_with_18_decimals(wei_funded, wei_plan, clock):
    deposit_id = wei_funded.create_deposit(ALICE, wei_plan.id, PRINCIPAL, 90)
    clock.advance_days(90)

    result = wei_funded.withdraw(ALICE, deposit_id)

    assert result.payout == PRINCIPAL + INTEREST_90_DAYS
    assert wei_funded.asset_balance(ALICE) == PRINCIPAL + INTEREST_90_DAYS


def test_mint_past_upper_bound(ctx):
    ctx.mint_asset(BOB, MAX_TOKEN_AMOUNT)
    with pytest.raises(InvalidAmountError):
        ctx.mint_asset(BOB, 1)
    assert ctx.asset_balance(BOB) == MAX_TOKEN_AMOUNT


def test_approve_past_upper_bound(ctx):
    with pytest.raises(InvalidAmountError):
        ctx.approve_asset(ALICE, ctx.ledger_address, MAX_TOKEN_AMOUNT + 1)


def test_plan_amounts_past_upper_bound(ctx):
    with pytest.raises(InvalidPlanError):
        ctx.create_plan(ADMIN, dict(STANDARD_PLAN, min_amount=MAX_TOKEN_AMOUNT + 1))
    assert ctx.list_plans() == []


def test_deposit_amount_past_upper_bound(plan):
    with pytest.raises(InvalidAmountError):
        DepositEligibilityPolicy.check(plan, MAX_TOKEN_AMOUNT + 1, 90)
