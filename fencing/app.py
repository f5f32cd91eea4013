import logging
import os
from flask import Flask, jsonify
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from .auth import login_manager
from .config import config
from .exceptions import FencingError
from .models import db
from .services import build_services

logger = logging.getLogger(__name__)


def create_app(config_name: str = None) -> Flask:
    """Application factory for the fencing API."""
    if config_name is None:
        config_name = os.getenv('FLASK_ENV', 'development')

    app = Flask(__name__)
    app.config.from_object(config.get(config_name, config['default']))

    configure_logging(app)

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)

    # Services are stateless and shared by every request
    app.services = build_services()

    # Create tables
    with app.app_context():
        db.create_all()

    register_error_handlers(app)
    register_blueprints(app)
    register_health_check(app)

    return app


def configure_logging(app: Flask):
    level = getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s'
    )
    logging.getLogger('fencing').setLevel(level)


def register_blueprints(app: Flask):
    from .routes import accounts, events, knockout_stages, players, tournaments

    app.register_blueprint(accounts.bp)
    app.register_blueprint(tournaments.bp)
    app.register_blueprint(events.bp)
    app.register_blueprint(knockout_stages.bp)
    app.register_blueprint(players.bp)


def register_error_handlers(app: Flask):
    """Translate raised errors into JSON responses."""

    @app.errorhandler(FencingError)
    def handle_fencing_error(error: FencingError):
        db.session.rollback()
        logger.warning("%s (%d): %s", type(error).__name__, error.status_code, error.message)
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error: HTTPException):
        return jsonify({'error': error.description}), error.code

    @app.errorhandler(SQLAlchemyError)
    def handle_database_error(error: SQLAlchemyError):
        db.session.rollback()
        logger.exception("Database error")
        return jsonify({'error': 'Database error'}), 500


def register_health_check(app: Flask):

    @app.route('/health')
    def health_check():
        """Health check endpoint."""
        try:
            db.session.execute(db.text('SELECT 1'))
            db_ok = True
        except SQLAlchemyError:
            db.session.rollback()
            db_ok = False

        return jsonify({
            'status': 'healthy' if db_ok else 'unhealthy',
            'database': 'connected' if db_ok else 'disconnected'
        }), 200 if db_ok else 503
