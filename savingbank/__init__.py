from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_login import LoginManager
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
import os
from savingbank.logger import get_logger

# Initialize extensions
db = SQLAlchemy()
migrate = Migrate()
login_manager = LoginManager()
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=["2000 per day", "200 per hour"],
    storage_uri="memory://"  # Use Redis in production for distributed systems
)


def _env_flag(name, default):
    return os.environ.get(name, default).lower() in ('true', '1', 'yes', 'on')


def create_app(config_overrides=None):
    """
    Application factory for the savings bank service.

    Args:
        config_overrides (dict, optional): Values applied on top of the
            environment-derived configuration, before extensions are
            initialised. Tests use this to point at an in-memory database
            and to inject a manual clock.
    """
    from pathlib import Path

    app = Flask(__name__)

    logger = get_logger("savingbank")
    logger.info("Initializing Flask application")

    overrides = dict(config_overrides or {})

    # SECURITY: Require SECRET_KEY in environment - no fallback
    app.config['SECRET_KEY'] = overrides.pop('SECRET_KEY', None) or os.environ.get('SECRET_KEY')
    if not app.config['SECRET_KEY']:
        logger.critical("SECRET_KEY not set in environment! Application cannot start.")
        raise RuntimeError("SECRET_KEY environment variable is required")

    # Prefer an explicit DATABASE_URL; otherwise keep the SQLite file in instance/
    db_env = os.environ.get('DATABASE_URL')
    if db_env:
        app.config['SQLALCHEMY_DATABASE_URI'] = db_env
    else:
        base_dir = Path(__file__).parent.parent
        instance_dir = base_dir / 'instance'
        instance_dir.mkdir(parents=True, exist_ok=True)
        default_db_path = instance_dir / 'savingbank.db'
        app.config['SQLALCHEMY_DATABASE_URI'] = f"sqlite:///{str(default_db_path.resolve())}"

    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False

    # Component addresses. The ledger is the only caller the vault and the
    # ownership registry will accept.
    app.config['SAVINGBANK_ADMIN_ADDRESS'] = os.environ.get('SAVINGBANK_ADMIN_ADDRESS', 'admin')
    app.config['SAVINGBANK_ADMIN_API_KEY'] = os.environ.get('SAVINGBANK_ADMIN_API_KEY')
    app.config['SAVINGBANK_LEDGER_ADDRESS'] = os.environ.get('SAVINGBANK_LEDGER_ADDRESS', 'savingbank:ledger')
    app.config['SAVINGBANK_VAULT_ADDRESS'] = os.environ.get('SAVINGBANK_VAULT_ADDRESS', 'savingbank:vault')
    app.config['SAVINGBANK_CERTIFICATE_NAME'] = os.environ.get('SAVINGBANK_CERTIFICATE_NAME', 'SavingBank Deposit Certificate')
    app.config['SAVINGBANK_CERTIFICATE_SYMBOL'] = os.environ.get('SAVINGBANK_CERTIFICATE_SYMBOL', 'SBDC')
    app.config['SAVINGBANK_CLOCK'] = None

    # Rate limiting
    app.config['RATELIMIT_ENABLED'] = _env_flag('RATELIMIT_ENABLED', 'True')

    app.config.update(overrides)

    logger.debug(f"Database configured: {app.config['SQLALCHEMY_DATABASE_URI'].split(':', 1)[0]}")

    # Initialize extensions with app
    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)
    limiter.init_app(app)

    logger.debug("Extensions initialized")

    # Import models to ensure they're registered with SQLAlchemy
    from savingbank.data import build_models
    build_models()

    # Register API key loader
    import savingbank.auth  # noqa: F401

    from savingbank.routes import init_routes
    init_routes(app)

    logger.info("Flask application initialized")
    return app
