"""
Ownership unit routes
Transferring a unit hands over every right on its deposit.
"""

from flask import jsonify
from flask_login import current_user, login_required
from savingbank.presentation.routes.api import api_bp
from savingbank.presentation.routes.api.request_parsing import (
    json_body,
    optional_str,
    require_bool,
    require_str,
)
from savingbank.buisness.savings.context import SavingBankContext
from savingbank.logger import get_logger

logger = get_logger("savingbank.routes.api.units")


@api_bp.get('/units/<int:unit_id>/owner')
@login_required
def units_owner(unit_id):
    ctx = SavingBankContext.load()
    return jsonify({
        'unit_id': unit_id,
        'owner': ctx.owner_of(unit_id),
        'approved': ctx.registry.get_approved(unit_id),
    })


@api_bp.get('/units')
@login_required
def units_list():
    ctx = SavingBankContext.load()
    return jsonify({
        'holder': current_user.address,
        'units': ctx.registry.units_of(current_user.address),
    })


@api_bp.post('/units/<int:unit_id>/transfer')
@login_required
def units_transfer(unit_id):
    payload = json_body()
    recipient = require_str(payload, 'to')
    sender = optional_str(payload, 'from') or current_user.address

    ctx = SavingBankContext.load()
    ctx.transfer_unit(current_user.address, sender, recipient, unit_id)
    logger.info(f"Unit {unit_id} moved {sender} -> {recipient} by {current_user.address}")
    return jsonify({'unit_id': unit_id, 'owner': recipient})


@api_bp.post('/units/<int:unit_id>/approve')
@login_required
def units_approve(unit_id):
    approved = optional_str(json_body(), 'to')

    ctx = SavingBankContext.load()
    ctx.approve_unit(current_user.address, approved, unit_id)
    return jsonify({'unit_id': unit_id, 'approved': approved})


@api_bp.post('/units/operators')
@login_required
def units_set_operator():
    payload = json_body()
    operator = require_str(payload, 'operator')
    approved = require_bool(payload, 'approved')

    ctx = SavingBankContext.load()
    ctx.set_approval_for_all(current_user.address, operator, approved)
    return jsonify({'holder': current_user.address, 'operator': operator, 'approved': approved})
