"""Server-side sessions through Flask-Session.

The session cookie only carries a random session id. ``SESSION_BACKEND``
picks where the data lives: ``sql`` keeps it in the ``sessions`` table of
the application database, ``memory`` in a cachelib ``SimpleCache`` owned
by the app.
"""

from cachelib import SimpleCache
from flask import current_app, session
from portfolio.extensions import db, server_session

SESSION_TABLE = 'sessions'


def init_sessions(app):
    """Point Flask-Session at the store selected by ``SESSION_BACKEND``."""
    backend = app.config.get('SESSION_BACKEND', 'memory')
    if backend == 'sql':
        app.config['SESSION_TYPE'] = 'sqlalchemy'
        app.config['SESSION_SQLALCHEMY'] = db
        app.config.setdefault('SESSION_SQLALCHEMY_TABLE', SESSION_TABLE)
    elif backend == 'memory':
        lifetime = int(app.permanent_session_lifetime.total_seconds())
        app.config['SESSION_TYPE'] = 'cachelib'
        app.config['SESSION_CACHELIB'] = SimpleCache(threshold=1000, default_timeout=lifetime)
    else:
        raise ValueError(f'Unknown SESSION_BACKEND: {backend!r}')
    server_session.init_app(app)


def regenerate_session():
    """Move the current session to a fresh id, e.g. after login."""
    current_app.session_interface.regenerate(session)
