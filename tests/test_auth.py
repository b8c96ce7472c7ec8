"""Admin login, logout and the current-user endpoint."""
import pytest

from portfolio.extensions import bcrypt

from conftest import ADMIN_CREDENTIALS


def login(client, username='admin', password='correct-horse'):
    return client.post('/api/login', json={'username': username, 'password': password})


class TestLogin:
    def test_success(self, client):
        response = login(client)
        assert response.status_code == 200
        data = response.get_json()
        assert data['success'] is True
        assert data['user']['username'] == 'admin'
        assert data['user']['is_admin'] is True

    @pytest.mark.parametrize('username,password', [
        ('admin', 'wrong'),
        ('someone', 'correct-horse'),
    ])
    def test_bad_credentials(self, client, username, password):
        response = login(client, username, password)
        assert response.status_code == 401
        assert response.get_json() == {'success': False, 'message': 'Invalid username or password'}
        assert client.get('/api/auth/user').status_code == 401

    def test_missing_fields(self, client):
        response = client.post('/api/login', json={'username': 'admin'})
        assert response.status_code == 400
        assert 'password' in response.get_json()['errors']

    def test_bcrypt_hash(self, app, client):
        app.config['ADMIN_PASSWORD'] = None
        app.config['ADMIN_PASSWORD_HASH'] = bcrypt.generate_password_hash('s3cret', 4).decode('utf-8')
        assert login(client, password='correct-horse').status_code == 401
        assert login(client, password='s3cret').status_code == 200

    def test_invalid_hash_rejects(self, app, client):
        app.config['ADMIN_PASSWORD_HASH'] = 'not-a-bcrypt-hash'
        assert login(client).status_code == 401

    def test_no_password_configured(self, app, client):
        app.config['ADMIN_PASSWORD'] = None
        assert login(client, password='').status_code == 400
        assert login(client, password='anything').status_code == 401

    def test_login_twice_keeps_one_user(self, client):
        first = login(client).get_json()['user']['id']
        second = login(client).get_json()['user']['id']
        assert first == second


class TestCurrentUser:
    def test_anonymous(self, client):
        response = client.get('/api/auth/user')
        assert response.status_code == 401
        assert response.get_json()['message'] == 'Unauthorized'

    def test_logged_in(self, admin_client):
        data = admin_client.get('/api/auth/user').get_json()
        assert data['username'] == ADMIN_CREDENTIALS['username']
        assert data['is_admin'] is True


class TestLogout:
    def test_logout_redirects_home(self, admin_client):
        response = admin_client.get('/api/logout')
        assert response.status_code == 302
        assert response.headers['Location'] == '/'

    def test_logout_ends_session(self, admin_client):
        admin_client.get('/api/logout')
        assert admin_client.get('/api/auth/user').status_code == 401
        assert admin_client.get('/api/admin/messages').status_code == 401

    def test_logout_when_anonymous(self, client):
        assert client.get('/api/logout').status_code == 302


@pytest.mark.parametrize('payload', [
    {'username': {'a': 'b'}, 'password': 'correct-horse'},
    {'username': 'admin', 'password': {'a': 'b'}},
    {'username': ['admin'], 'password': 'correct-horse'},
])
def test_login_rejects_non_string_credentials(client, payload):
    response = client.post('/api/login', json=payload)
    assert response.status_code == 400
    assert client.get('/api/auth/user').status_code == 401
