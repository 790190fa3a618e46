"""
Saving plan routes
Browsing is open to any caller; changes go through the admin checks in PlanCatalog.
"""

from flask import jsonify
from flask_login import current_user, login_required
from savingbank.presentation.routes.api import api_bp
from savingbank.presentation.routes.api.request_parsing import (
    json_body,
    loggable,
    query_flag,
    query_int,
    require_bool,
)
from savingbank.buisness.savings.context import SavingBankContext
from savingbank.services.savings.plan_service import PlanService
from savingbank.logger import get_logger

logger = get_logger("savingbank.routes.api.plans")


@api_bp.get('/plans')
def plans_list():
    ctx = SavingBankContext.load()
    plans = ctx.list_plans(active_only=query_flag('active_only'))
    return jsonify({'items': PlanService.serialize_many(plans)})


@api_bp.get('/plans/<int:plan_id>')
def plans_detail(plan_id):
    ctx = SavingBankContext.load()
    return jsonify(PlanService.serialize(ctx.get_plan(plan_id)))


@api_bp.get('/plans/<int:plan_id>/interest')
def plans_interest(plan_id):
    """Preview: interest the plan would pay on ?principal= for ?term_days="""
    principal = query_int('principal')
    term_days = query_int('term_days')
    ctx = SavingBankContext.load()
    interest = ctx.calculate_interest(principal, plan_id, term_days)
    return jsonify({
        'plan_id': plan_id,
        'principal': principal,
        'term_days': term_days,
        'interest': interest,
    })


@api_bp.post('/plans')
@login_required
def plans_create():
    payload = json_body()
    logger.info(f"Create plan requested by {current_user.address}: {loggable(payload)}")

    ctx = SavingBankContext.load()
    plan = ctx.create_plan(current_user.address, PlanService.extract_terms(payload))
    return jsonify(PlanService.serialize(plan)), 201


@api_bp.put('/plans/<int:plan_id>')
@login_required
def plans_update(plan_id):
    payload = json_body()
    logger.info(f"Update plan {plan_id} requested by {current_user.address}: {loggable(payload)}")

    ctx = SavingBankContext.load()
    plan = ctx.update_plan(current_user.address, plan_id, PlanService.extract_terms(payload))
    return jsonify(PlanService.serialize(plan))


@api_bp.post('/plans/<int:plan_id>/active')
@login_required
def plans_set_active(plan_id):
    active = require_bool(json_body(), 'active')

    ctx = SavingBankContext.load()
    plan = ctx.set_plan_active(current_user.address, plan_id, active)
    return jsonify(PlanService.serialize(plan))
