"""
Deposit routes
The authenticated account's address is the caller for every operation.
"""

from flask import jsonify
from flask_login import current_user, login_required
from savingbank import limiter
from savingbank.presentation.routes.api import api_bp
from savingbank.presentation.routes.api.request_parsing import (
    json_body,
    loggable,
    query_flag,
    query_int,
    require_int,
)
from savingbank.buisness.savings.context import SavingBankContext
from savingbank.services.savings.deposit_service import DepositService
from savingbank.logger import get_logger

logger = get_logger("savingbank.routes.api.deposits")


@api_bp.post('/deposits')
@login_required
@limiter.limit("30 per minute")
def deposits_create():
    payload = json_body()
    logger.info(f"Deposit requested by {current_user.address}: {loggable(payload)}")

    plan_id = require_int(payload, 'plan_id')
    amount = require_int(payload, 'amount')
    term_days = require_int(payload, 'term_days')

    ctx = SavingBankContext.load()
    deposit_id = ctx.create_deposit(current_user.address, plan_id, amount, term_days)
    return jsonify(ctx.get_deposit(deposit_id)), 201


@api_bp.get('/deposits')
@login_required
def deposits_list():
    page = DepositService.get_holder_page(
        current_user.address,
        page=query_int('page', 1),
        per_page=query_int('per_page', DepositService.DEFAULT_PER_PAGE),
        include_closed=query_flag('include_closed'),
    )
    return jsonify(page)


@api_bp.get('/deposits/<int:deposit_id>')
@login_required
def deposits_detail(deposit_id):
    ctx = SavingBankContext.load()
    return jsonify(ctx.get_deposit(deposit_id))


@api_bp.post('/deposits/<int:deposit_id>/withdraw')
@login_required
@limiter.limit("30 per minute")
def deposits_withdraw(deposit_id):
    logger.info(f"Withdraw of deposit {deposit_id} requested by {current_user.address}")

    ctx = SavingBankContext.load()
    result = ctx.withdraw(current_user.address, deposit_id)
    return jsonify(result.to_dict())


@api_bp.post('/deposits/<int:deposit_id>/renew')
@login_required
@limiter.limit("30 per minute")
def deposits_renew(deposit_id):
    payload = json_body()
    logger.info(f"Renew of deposit {deposit_id} requested by {current_user.address}: {loggable(payload)}")

    plan_id = require_int(payload, 'plan_id')
    term_days = require_int(payload, 'term_days')

    ctx = SavingBankContext.load()
    new_id = ctx.renew(current_user.address, deposit_id, plan_id, term_days)
    return jsonify(ctx.get_deposit(new_id)), 201
