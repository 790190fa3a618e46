"""
Plan catalog: admin-managed plans and their invariants
"""
import pytest
from conftest import ADMIN, ALICE, STANDARD_PLAN, UNIT
from savingbank.data.core.ledger_event import LedgerEvent
from savingbank.buisness.savings.errors import (
    InvalidPlanError,
    NotAdminError,
    PlanNotFoundError,
    EnforcedPauseError,
)


def _terms(**changes):
    terms = dict(STANDARD_PLAN)
    terms.update(changes)
    return terms


def test_create_plan_assigns_sequential_ids(ctx):
    first = ctx.create_plan(ADMIN, _terms(name='A'))
    second = ctx.create_plan(ADMIN, _terms(name='B'))

    assert first.id == 1
    assert second.id == 2
    assert first.is_active is True
    assert [plan.name for plan in ctx.list_plans()] == ['A', 'B']

    created = LedgerEvent.query.filter_by(name='PlanCreated').order_by(LedgerEvent.id).all()
    assert [event.payload for event in created] == [{'id': 1, 'name': 'A'}, {'id': 2, 'name': 'B'}]


def test_create_plan_requires_admin(ctx):
    with pytest.raises(NotAdminError):
        ctx.create_plan(ALICE, _terms())
    assert ctx.list_plans() == []


@pytest.mark.parametrize('changes', [
    {'min_term_days': 0},
    {'max_term_days': 30},
    {'max_term_days': 10},
    {'interest_rate_bps': 0},
    {'penalty_rate_bps': 10_001},
    {'penalty_rate_bps': -1},
    {'name': '   '},
    {'min_amount': -1},
    {'max_amount': 50 * UNIT},
    {'interest_rate_bps': 12.5},
    {'interest_rate_bps': True},
    {'min_term_days': 'thirty'},
])
def test_create_plan_rejects_invalid_terms(ctx, changes):
    with pytest.raises(InvalidPlanError):
        ctx.create_plan(ADMIN, _terms(**changes))


def test_create_plan_rejects_missing_fields(ctx):
    terms = _terms()
    del terms['penalty_rate_bps']
    with pytest.raises(InvalidPlanError):
        ctx.create_plan(ADMIN, terms)


def test_boundary_terms_are_accepted(ctx):
    plan = ctx.create_plan(ADMIN, _terms(min_term_days=1, max_term_days=2, penalty_rate_bps=10_000, min_amount=0))
    assert plan.min_term_days == 1
    assert plan.penalty_rate_bps == 10_000


def test_update_plan_overwrites_terms(ctx, plan):
    updated = ctx.update_plan(ADMIN, plan.id, _terms(name='Renamed', interest_rate_bps=1_200))

    assert updated.id == plan.id
    assert updated.name == 'Renamed'
    assert updated.interest_rate_bps == 1_200
    assert updated.is_active is True
    assert LedgerEvent.query.filter_by(name='PlanUpdated').one().payload == {'id': plan.id}


def test_update_unknown_plan(ctx):
    with pytest.raises(PlanNotFoundError):
        ctx.update_plan(ADMIN, 99, _terms())


def test_update_plan_revalidates(ctx, plan):
    with pytest.raises(InvalidPlanError):
        ctx.update_plan(ADMIN, plan.id, _terms(interest_rate_bps=0))
    assert ctx.get_plan(plan.id).interest_rate_bps == STANDARD_PLAN['interest_rate_bps']


def test_set_plan_active(ctx, plan):
    ctx.set_plan_active(ADMIN, plan.id, False)
    assert ctx.get_plan(plan.id).is_active is False
    assert ctx.list_plans(active_only=True) == []

    ctx.set_plan_active(ADMIN, plan.id, True)
    assert ctx.get_plan(plan.id).is_active is True

    events = LedgerEvent.query.filter_by(name='PlanActiveChanged').order_by(LedgerEvent.id).all()
    assert [event.payload['active'] for event in events] == [False, True]


def test_set_plan_active_requires_admin(ctx, plan):
    with pytest.raises(NotAdminError):
        ctx.set_plan_active(ALICE, plan.id, False)


def test_get_unknown_plan(ctx):
    with pytest.raises(PlanNotFoundError):
        ctx.get_plan(1)


def test_plan_changes_blocked_while_paused(ctx, plan):
    ctx.pause(ADMIN)
    with pytest.raises(EnforcedPauseError):
        ctx.create_plan(ADMIN, _terms(name='Other'))
    with pytest.raises(EnforcedPauseError):
        ctx.set_plan_active(ADMIN, plan.id, False)
