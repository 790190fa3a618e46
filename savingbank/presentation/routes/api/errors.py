"""
Error translation for the API blueprint

Domain exceptions become JSON bodies of the form
{"error": <condition>, "message": ..., "details": {...}}.
"""

from flask import jsonify
from werkzeug.exceptions import HTTPException
from savingbank.presentation.routes.api import api_bp
from savingbank.buisness.savings.errors import (
    SavingBankError,
    SavingBankValidationError,
    SavingBankAuthorizationError,
    SavingBankLifecycleError,
    SavingBankResourceError,
    SavingBankOperationalError,
    PlanNotFoundError,
    DepositNotFoundError,
    UnitNotFoundError,
)
from savingbank.logger import get_logger
from savingbank.utils.logging_sanitizer import sanitize_exception_message

logger = get_logger("savingbank.routes.api.errors")

NOT_FOUND_ERRORS = (PlanNotFoundError, DepositNotFoundError, UnitNotFoundError)

# Checked in order; the first matching category wins
STATUS_BY_CATEGORY = (
    (NOT_FOUND_ERRORS, 404),
    (SavingBankValidationError, 400),
    (SavingBankAuthorizationError, 403),
    (SavingBankLifecycleError, 409),
    (SavingBankResourceError, 409),
    (SavingBankOperationalError, 503),
)


def status_for(error: SavingBankError) -> int:
    for category, status in STATUS_BY_CATEGORY:
        if isinstance(error, category):
            return status
    return 400


@api_bp.errorhandler(SavingBankError)
def handle_saving_bank_error(error):
    status = status_for(error)
    logger.info(f"Request rejected with {status}: {error.code}")
    return jsonify({
        'error': error.code,
        'message': str(error),
        'details': error.details,
    }), status


@api_bp.errorhandler(HTTPException)
def handle_http_error(error):
    return jsonify({
        'error': error.name.replace(' ', ''),
        'message': error.description,
    }), error.code


@api_bp.errorhandler(Exception)
def handle_unexpected_error(error):
    logger.error(f"Unhandled error: {sanitize_exception_message(error)}")
    return jsonify({
        'error': 'InternalServerError',
        'message': 'The operation could not be completed',
    }), 500
