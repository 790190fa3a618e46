"""
Routes package for the savings bank
Blueprints are grouped by audience; everything is JSON under /api
"""

from savingbank.logger import get_logger

logger = get_logger("savingbank.routes")


def init_app(app):
    """Initialize all route blueprints with the Flask app"""
    logger.debug("Initializing route blueprints")

    from .api import api_bp
    app.register_blueprint(api_bp, url_prefix='/api')

    logger.info("Registered api blueprint")
