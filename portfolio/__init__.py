"""Flask application factory."""

import logging
import os
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException
from .config import DEFAULT_SECRET_KEY, config
from .extensions import db, migrate, login_manager, bcrypt, mail
from .sessions import init_sessions
from .storage import EXTENSION_KEY, build_storage, get_storage
from .storage.sql import SqlStorage

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def create_app(config_name=None, storage=None, config_overrides=None):
    """Create and configure the Flask application.

    ``storage`` replaces the backend selected by configuration, e.g. to run
    against fakes in tests. ``config_overrides`` is applied on top of the
    config class.
    """
    if config_name is None:
        config_name = os.environ.get('FLASK_CONFIG', 'development')

    app = Flask(__name__)
    app.config.from_object(config[config_name])
    if config_overrides:
        app.config.update(config_overrides)
    logging.basicConfig(level=app.config['LOG_LEVEL'], format=LOG_FORMAT)

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)
    bcrypt.init_app(app)
    mail.init_app(app)

    # Storage and sessions
    if storage is None:
        storage = build_storage(app)
    app.extensions[EXTENSION_KEY] = storage
    init_sessions(app)

    if isinstance(storage, SqlStorage) or app.config['SESSION_BACKEND'] == 'sql':
        with app.app_context():
            db.create_all()

    if app.config['SECRET_KEY'] == DEFAULT_SECRET_KEY and not (app.debug or app.testing):
        logger.warning('SECRET_KEY is the development default; set SECRET_KEY in production')

    if not (app.config.get('ADMIN_PASSWORD') or app.config.get('ADMIN_PASSWORD_HASH')):
        logger.warning('No ADMIN_PASSWORD or ADMIN_PASSWORD_HASH configured; admin login is disabled')

    # Register blueprints
    from .routes import register_blueprints
    register_blueprints(app)

    # User loader for Flask-Login
    @login_manager.user_loader
    def load_user(user_id):
        try:
            return get_storage().get_user(int(user_id))
        except (TypeError, ValueError):
            return None

    @login_manager.unauthorized_handler
    def unauthorized():
        return jsonify({'message': 'Unauthorized'}), 401

    # Error handlers
    @app.errorhandler(HTTPException)
    def http_error(error):
        return jsonify({'message': error.description}), error.code

    @app.errorhandler(404)
    def not_found_error(error):
        return jsonify({'message': 'Resource not found'}), 404

    @app.errorhandler(500)
    def internal_error(error):
        db.session.rollback()
        return jsonify({'message': 'Internal server error'}), 500

    @app.after_request
    def set_security_headers(response):
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'DENY'
        return response

    return app
