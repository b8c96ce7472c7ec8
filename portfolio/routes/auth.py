"""Authentication routes for the single site admin."""

import hmac
import logging
from flask import Blueprint, current_app, jsonify, redirect, session
from flask_login import current_user, login_user, logout_user
from portfolio.extensions import bcrypt
from portfolio.forms import LoginForm
from portfolio.sessions import regenerate_session
from portfolio.storage import get_storage
from portfolio.utils.responses import invalid_data

auth_bp = Blueprint('auth', __name__)
logger = logging.getLogger(__name__)


def check_admin_credentials(username, password):
    """Compare submitted credentials with the configured admin account."""
    config = current_app.config
    admin_username = config.get('ADMIN_USERNAME') or ''
    if not hmac.compare_digest(username.encode('utf-8'), admin_username.encode('utf-8')):
        return False
    
    password_hash = config.get('ADMIN_PASSWORD_HASH')
    if password_hash:
        try:
            return bcrypt.check_password_hash(password_hash, password)
        except ValueError:
            logger.error('ADMIN_PASSWORD_HASH is not a valid bcrypt hash')
            return False
    
    admin_password = config.get('ADMIN_PASSWORD')
    if not admin_password:
        return False
    return hmac.compare_digest(password.encode('utf-8'), admin_password.encode('utf-8'))


@auth_bp.route('/login', methods=['POST'])
def login():
    """Admin login; establishes a server-side session."""
    form = LoginForm()
    if not form.validate():
        return invalid_data(form.errors)
    
    if not check_admin_credentials(form.username.data, form.password.data):
        logger.warning('Failed login attempt for username %r', form.username.data)
        return jsonify({'success': False, 'message': 'Invalid username or password'}), 401
    
    user = get_storage().upsert_user(form.username.data, is_admin=True)
    
    # New session id on privilege change
    regenerate_session()
    login_user(user)
    logger.info('Admin %s logged in', user.username)
    
    return jsonify({'success': True, 'user': user.to_dict()})


@auth_bp.route('/logout')
def logout():
    """Log out and destroy the session."""
    if current_user.is_authenticated:
        logger.info('Admin %s logged out', current_user.username)
    logout_user()
    session.clear()
    return redirect('/')


@auth_bp.route('/auth/user')
def current_session_user():
    """Who is logged in."""
    if not current_user.is_authenticated:
        return jsonify({'message': 'Unauthorized'}), 401
    return jsonify(current_user.to_dict())
