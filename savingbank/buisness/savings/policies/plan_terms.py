"""
Plan Terms Policy

Validates the terms a plan is created or updated with.
"""

from typing import Any, Dict
from savingbank.buisness.savings.errors import InvalidPlanError
from savingbank.buisness.savings.rate_engine import BASIS_POINTS
from savingbank.data.core.token_amount import MAX_TOKEN_AMOUNT


class PlanTermsPolicy:
    """
    Enforces the SavingPlan invariants:

    - min_term_days >= 1
    - max_term_days > min_term_days
    - interest_rate_bps > 0
    - 0 <= penalty_rate_bps <= 10000
    - amounts are within [0, MAX_TOKEN_AMOUNT]; a non-zero max_amount is not below min_amount
    """

    REQUIRED_FIELDS = (
        'name',
        'min_amount',
        'max_amount',
        'min_term_days',
        'max_term_days',
        'interest_rate_bps',
        'penalty_rate_bps',
    )

    INTEGER_FIELDS = REQUIRED_FIELDS[1:]

    @classmethod
    def normalize(cls, terms: Dict[str, Any]) -> Dict[str, Any]:
        """
        Return the plan terms restricted to the known fields, with integer
        fields coerced.

        Raises:
            InvalidPlanError: if a field is missing or not an integer
        """
        missing = [field for field in cls.REQUIRED_FIELDS if field not in terms or terms[field] is None]
        if missing:
            raise InvalidPlanError(f"Missing plan fields: {', '.join(missing)}", fields=missing)

        normalized = {'name': str(terms['name']).strip()}
        for field in cls.INTEGER_FIELDS:
            value = terms[field]
            if isinstance(value, bool):
                raise InvalidPlanError(f"{field} must be an integer", field=field)
            try:
                normalized[field] = int(value)
            except (TypeError, ValueError):
                raise InvalidPlanError(f"{field} must be an integer", field=field)
            if normalized[field] != value and not isinstance(value, str):
                # fractional values such as 12.5
                raise InvalidPlanError(f"{field} must be an integer", field=field)
        return normalized

    @classmethod
    def check(cls, terms: Dict[str, Any]) -> Dict[str, Any]:
        """
        Validate plan terms.

        Returns:
            dict: The normalized terms

        Raises:
            InvalidPlanError: if any invariant is violated
        """
        terms = cls.normalize(terms)

        if not terms['name']:
            raise InvalidPlanError("Plan name must not be empty")
        if terms['min_term_days'] < 1:
            raise InvalidPlanError("min_term_days must be at least 1")
        if terms['max_term_days'] <= terms['min_term_days']:
            raise InvalidPlanError("max_term_days must be greater than min_term_days")
        if terms['interest_rate_bps'] <= 0:
            raise InvalidPlanError("interest_rate_bps must be positive")
        if terms['penalty_rate_bps'] < 0 or terms['penalty_rate_bps'] > BASIS_POINTS:
            raise InvalidPlanError(f"penalty_rate_bps must be between 0 and {BASIS_POINTS}")
        if terms['min_amount'] < 0 or terms['max_amount'] < 0:
            raise InvalidPlanError("Plan amounts must not be negative")
        if max(terms['min_amount'], terms['max_amount']) > MAX_TOKEN_AMOUNT:
            raise InvalidPlanError(f"Plan amounts must not exceed {MAX_TOKEN_AMOUNT}")
        if terms['max_amount'] and terms['max_amount'] < terms['min_amount']:
            raise InvalidPlanError("max_amount must be 0 (unbounded) or at least min_amount")

        return terms
