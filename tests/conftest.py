"""
Test configuration and fixtures.

Provides:
- An app per test, run once against SQL storage and once against memory storage
- Anonymous, admin and non-admin test clients
- Helpers to create contact messages and read their tokens
"""
import pytest

from portfolio import create_app
from portfolio.extensions import db
from portfolio.storage import get_storage
from portfolio.storage.memory import MemoryStorage

ADMIN_CREDENTIALS = {'username': 'admin', 'password': 'correct-horse'}

CONTACT_PAYLOAD = {
    'name': 'A',
    'email': 'a@x.com',
    'message': 'hello',
}


# =============================================================================
# Application Fixtures
# =============================================================================

@pytest.fixture(params=['sql', 'memory'])
def app(request):
    """Application on the testing config with the chosen storage backend."""
    storage = MemoryStorage() if request.param == 'memory' else None
    app = create_app('testing', storage=storage)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def storage(app):
    """Storage of the app, used inside an application context."""
    with app.app_context():
        yield get_storage()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(app):
    """Client holding an admin session."""
    client = app.test_client()
    response = client.post('/api/login', json=ADMIN_CREDENTIALS)
    assert response.status_code == 200
    return client


@pytest.fixture
def non_admin_client(app):
    """Client logged in as a regular (non-admin) user."""
    with app.app_context():
        storage = get_storage()
        storage.upsert_user('owner', is_admin=True)
        user = storage.upsert_user('visitor', is_admin=False)
        user_id = user.id

    client = app.test_client()
    with client.session_transaction() as sess:
        sess['_user_id'] = str(user_id)
        sess['_fresh'] = True
    return client


# =============================================================================
# Helpers
# =============================================================================

def submit_message(client, **overrides):
    """Submit the contact form and return the new message id."""
    payload = dict(CONTACT_PAYLOAD, **overrides)
    response = client.post('/api/contact', json=payload)
    assert response.status_code == 201, response.get_json()
    return response.get_json()['id']


def token_for(app, message_id):
    with app.app_context():
        return get_storage().get_contact_message(message_id).conversation_token


@pytest.fixture
def message_id(client):
    return submit_message(client)


@pytest.fixture
def token(app, message_id):
    return token_for(app, message_id)


@pytest.fixture
def answered_token(app, admin_client, message_id):
    """Token of a message the admin has already replied to."""
    response = admin_client.post(f'/api/admin/messages/{message_id}/reply', json={'reply': 'hi'})
    assert response.status_code == 200
    return token_for(app, message_id)
