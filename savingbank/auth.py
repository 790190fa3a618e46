"""
Caller identification for the API

Each request carries an API key in the X-Api-Key header. The key resolves to
an Account, whose address is the caller passed into every ledger operation.
"""

from flask import jsonify, request
from savingbank import db, login_manager
from savingbank.data.core.account import Account
from savingbank.logger import get_logger
from savingbank.utils.logging_sanitizer import sanitize_headers

logger = get_logger("savingbank.auth")

API_KEY_HEADER = 'X-Api-Key'


@login_manager.user_loader
def load_user(account_id):
    return db.session.get(Account, int(account_id))


@login_manager.request_loader
def load_user_from_request(req):
    api_key = req.headers.get(API_KEY_HEADER)
    if not api_key:
        return None

    account = Account.find_by_api_key(api_key)
    if account is None:
        logger.warning(f"Rejected API key from {req.remote_addr}")
        logger.debug(f"Rejected request headers: {sanitize_headers(req.headers)}")
    return account


@login_manager.unauthorized_handler
def unauthorized():
    logger.debug(f"Unauthenticated request to {request.path}")
    return jsonify({
        'error': 'Unauthenticated',
        'message': f'A valid {API_KEY_HEADER} header is required',
    }), 401
