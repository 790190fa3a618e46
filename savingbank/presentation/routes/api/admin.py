"""
Admin routes
Pause switch, penalty routing, vault top-up/drain and account onboarding.
Every handler passes the caller through; the admin check itself lives in AccessControl.
"""

from flask import jsonify
from flask_login import current_user, login_required
from werkzeug.exceptions import Conflict
from savingbank.presentation.routes.api import api_bp
from savingbank.presentation.routes.api.request_parsing import (
    json_body,
    loggable,
    optional_str,
    require_int,
    require_str,
)
from savingbank.buisness.savings.context import SavingBankContext
from savingbank.data.core.account import Account
from savingbank.logger import get_logger

logger = get_logger("savingbank.routes.api.admin")


@api_bp.get('/admin/vault')
@login_required
def admin_vault():
    ctx = SavingBankContext.load()
    ctx.access.require_admin(current_user.address)
    return jsonify(ctx.get_summary())


@api_bp.post('/admin/vault/deposit')
@login_required
def admin_vault_deposit():
    amount = require_int(json_body(), 'amount')

    ctx = SavingBankContext.load()
    ctx.deposit_to_vault(current_user.address, amount)
    return jsonify({'vault_balance': ctx.vault_balance()})


@api_bp.post('/admin/vault/withdraw')
@login_required
def admin_vault_withdraw():
    amount = require_int(json_body(), 'amount')

    ctx = SavingBankContext.load()
    ctx.withdraw_from_vault(current_user.address, amount)
    return jsonify({'vault_balance': ctx.vault_balance()})


@api_bp.post('/admin/pause')
@login_required
def admin_pause():
    ctx = SavingBankContext.load()
    ctx.pause(current_user.address)
    logger.warning(f"Operations paused by {current_user.address}")
    return jsonify({'paused': True})


@api_bp.post('/admin/unpause')
@login_required
def admin_unpause():
    ctx = SavingBankContext.load()
    ctx.unpause(current_user.address)
    logger.warning(f"Operations resumed by {current_user.address}")
    return jsonify({'paused': False})


@api_bp.post('/admin/penalty-receiver')
@login_required
def admin_penalty_receiver():
    receiver = optional_str(json_body(), 'receiver')

    ctx = SavingBankContext.load()
    ctx.set_penalty_receiver(current_user.address, receiver)
    return jsonify({'penalty_receiver': receiver})


@api_bp.post('/admin/transfer')
@login_required
def admin_transfer():
    new_admin = require_str(json_body(), 'new_admin')

    ctx = SavingBankContext.load()
    ctx.transfer_admin(current_user.address, new_admin)
    return jsonify({'admin': new_admin})


@api_bp.post('/admin/accounts')
@login_required
def admin_register_account():
    payload = json_body()
    logger.info(f"Account registration requested by {current_user.address}: {loggable(payload)}")
    address = require_str(payload, 'address')

    ctx = SavingBankContext.load()
    ctx.access.require_admin(current_user.address)
    if Account.query.filter_by(address=address).first():
        raise Conflict(f"An account for {address} already exists")

    account, api_key = ctx.register_account(current_user.address, address)
    return jsonify({'address': account.address, 'api_key': api_key}), 201


@api_bp.post('/admin/assets/mint')
@login_required
def admin_mint_asset():
    payload = json_body()
    to = require_str(payload, 'to')
    amount = require_int(payload, 'amount')

    ctx = SavingBankContext.load()
    ctx.mint_asset_as_admin(current_user.address, to, amount)
    return jsonify({'address': to, 'balance': ctx.asset_balance(to)})
