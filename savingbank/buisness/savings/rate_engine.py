"""
Rate engine - interest and penalty arithmetic

Pure functions over integers. Every division truncates toward zero so the
bank can under-pay by at most one unit and never over-pays. Python integers
are arbitrary precision, so principal * rate * days cannot overflow.
"""

from savingbank.buisness.savings.errors import InvalidAmountError

BASIS_POINTS = 10_000
DAYS_PER_YEAR = 365
SECONDS_PER_DAY = 86_400


def interest(principal: int, rate_bps: int, term_days: int) -> int:
    """
    Simple interest for a term.

    floor(principal * rate_bps * term_days / (10000 * 365))

    Raises:
        InvalidAmountError: if principal is not positive
    """
    if principal <= 0:
        raise InvalidAmountError("Principal must be positive", principal=principal)
    if term_days <= 0:
        return 0
    return (principal * rate_bps * term_days) // (BASIS_POINTS * DAYS_PER_YEAR)


def penalty(principal: int, rate_bps: int) -> int:
    """floor(principal * rate_bps / 10000)"""
    return (principal * rate_bps) // BASIS_POINTS


def interest_for_plan(principal: int, plan, term_days: int) -> int:
    return interest(principal, plan.interest_rate_bps, term_days)


def penalty_for_plan(principal: int, plan) -> int:
    return penalty(principal, plan.penalty_rate_bps)


def maturity_time(start_time: int, term_days: int) -> int:
    return start_time + term_days * SECONDS_PER_DAY
