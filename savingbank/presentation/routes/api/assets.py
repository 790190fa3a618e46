"""
Asset ledger routes
A depositor approves the ledger address before opening a deposit.
"""

from flask import jsonify, request
from flask_login import current_user, login_required
from savingbank.presentation.routes.api import api_bp
from savingbank.presentation.routes.api.request_parsing import json_body, optional_str, require_int
from savingbank.buisness.savings.context import SavingBankContext


@api_bp.get('/assets/balance')
@login_required
def assets_balance():
    address = request.args.get('address') or current_user.address
    ctx = SavingBankContext.load()
    return jsonify({
        'address': address,
        'balance': ctx.asset_balance(address),
        'allowance_to_ledger': ctx.asset.allowance(address, ctx.ledger_address),
    })


@api_bp.post('/assets/approve')
@login_required
def assets_approve():
    payload = json_body()
    amount = require_int(payload, 'amount')

    ctx = SavingBankContext.load()
    spender = optional_str(payload, 'spender') or ctx.ledger_address
    ctx.approve_asset(current_user.address, spender, amount)
    return jsonify({'owner': current_user.address, 'spender': spender, 'amount': amount})
