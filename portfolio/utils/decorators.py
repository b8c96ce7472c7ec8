"""Role-based access decorators."""

import logging
from functools import wraps
from flask import jsonify, request
from flask_login import current_user

logger = logging.getLogger(__name__)


def admin_required(f):
    """Decorator to require an admin session.

    Answers 401 when nobody is logged in and 403 when the logged-in user
    is not an admin.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not current_user.is_authenticated:
            return jsonify({'message': 'Unauthorized'}), 401
        if not current_user.is_admin:
            logger.warning('Non-admin user %s denied %s %s',
                           current_user.get_id(), request.method, request.path)
            return jsonify({'message': 'Admin access required'}), 403
        return f(*args, **kwargs)
    return decorated_function
