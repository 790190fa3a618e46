"""
Interest and penalty arithmetic
"""
import pytest
from savingbank.buisness.savings import rate_engine
from savingbank.buisness.savings.errors import InvalidAmountError

UNIT = 10 ** 6


def test_interest_reference_values():
    # 10,000 units at 8% for 90 days
    assert rate_engine.interest(10_000 * UNIT, 800, 90) == 197_260_273
    # One full year at 5% is exactly 5%
    assert rate_engine.interest(1_000 * UNIT, 500, 365) == 50 * UNIT


def test_interest_truncates_toward_zero():
    # 1 * 1 * 1 / 3,650,000 rounds down to nothing
    assert rate_engine.interest(1, 1, 1) == 0
    assert rate_engine.interest(3_650_000, 1, 1) == 1
    assert rate_engine.interest(3_649_999, 1, 1) == 0


def test_interest_zero_days_is_zero():
    assert rate_engine.interest(10_000 * UNIT, 800, 0) == 0


@pytest.mark.parametrize('principal', [0, -1])
def test_interest_rejects_non_positive_principal(principal):
    with pytest.raises(InvalidAmountError):
        rate_engine.interest(principal, 800, 90)


def test_interest_does_not_overflow_64_bits():
    principal = 2 ** 63
    assert rate_engine.interest(principal, 10_000, 365) == principal


def test_penalty():
    assert rate_engine.penalty(10_000 * UNIT, 500) == 500 * UNIT
    assert rate_engine.penalty(10_000 * UNIT, 0) == 0
    assert rate_engine.penalty(10_000 * UNIT, 10_000) == 10_000 * UNIT
    assert rate_engine.penalty(199, 50) == 0


def test_plan_forms_use_plan_rates():
    class Plan:
        interest_rate_bps = 800
        penalty_rate_bps = 500

    assert rate_engine.interest_for_plan(10_000 * UNIT, Plan, 90) == 197_260_273
    assert rate_engine.penalty_for_plan(10_000 * UNIT, Plan) == 500 * UNIT


def test_maturity_time():
    assert rate_engine.maturity_time(1_700_000_000, 90) == 1_700_000_000 + 90 * 86_400
