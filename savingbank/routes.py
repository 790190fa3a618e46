"""
Top-level route registration for the savings bank service
"""

from flask import jsonify
from savingbank.logger import get_logger

logger = get_logger("savingbank.routes.main")


def init_routes(app):
    from savingbank.presentation.routes import init_app
    init_app(app)

    @app.get('/health')
    def health():
        return jsonify({'status': 'ok'})

    logger.debug("Routes initialized")
