from flask import jsonify, request
from flask_login import login_required
from savingbank.presentation.routes.api import api_bp
from savingbank.services.savings.event_service import EventService
from savingbank.utils.logging_sanitizer import sanitize_form_data
from savingbank.logger import get_logger

logger = get_logger("savingbank.routes.api.events")


@api_bp.get('/events')
@login_required
def events_list():
    logger.debug(f"Event query: {sanitize_form_data(request.args)}")
    filters, page, per_page = EventService.extract_filters(request)
    return jsonify(EventService.get_event_page(filters, page=page, per_page=per_page))
