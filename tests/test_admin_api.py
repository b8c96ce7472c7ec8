"""Admin message inbox and access control."""
import pytest

from conftest import submit_message, token_for

ADMIN_ENDPOINTS = [
    ('get', '/api/admin/messages'),
    ('get', '/api/admin/messages/1'),
    ('patch', '/api/admin/messages/1/read'),
    ('post', '/api/admin/messages/1/reply'),
    ('delete', '/api/admin/messages/1'),
    ('get', '/api/admin/projects'),
]


@pytest.mark.parametrize('method,url', ADMIN_ENDPOINTS)
def test_requires_login(client, message_id, method, url):
    response = getattr(client, method)(url, json={'reply': 'x'})
    assert response.status_code == 401
    assert response.get_json()['message'] == 'Unauthorized'


@pytest.mark.parametrize('method,url', ADMIN_ENDPOINTS)
def test_requires_admin(non_admin_client, message_id, method, url):
    response = getattr(non_admin_client, method)(url, json={'reply': 'x'})
    assert response.status_code == 403


class TestMessages:
    def test_list_newest_first(self, client, admin_client):
        first = submit_message(client, name='First')
        second = submit_message(client, name='Second')
        data = admin_client.get('/api/admin/messages').get_json()
        assert [m['id'] for m in data] == [second, first]
        assert data[0]['is_read'] is False
        assert data[0]['has_reply'] is False

    def test_detail_includes_token(self, app, admin_client, message_id):
        data = admin_client.get(f'/api/admin/messages/{message_id}').get_json()
        assert data['conversation_token'] == token_for(app, message_id)
        assert data['email'] == 'a@x.com'
        assert data['replies'] == []

    def test_unknown_message(self, admin_client):
        response = admin_client.get('/api/admin/messages/999')
        assert response.status_code == 404
        assert response.get_json()['message'] == 'Message not found'

    def test_mark_read(self, admin_client, message_id):
        response = admin_client.patch(f'/api/admin/messages/{message_id}/read')
        assert response.status_code == 200
        assert response.get_json()['is_read'] is True
        assert admin_client.patch('/api/admin/messages/999/read').status_code == 404


class TestReplies:
    def test_reply(self, admin_client, message_id):
        response = admin_client.post(f'/api/admin/messages/{message_id}/reply',
                                     json={'reply': 'Thanks for writing'})
        assert response.status_code == 200
        data = response.get_json()
        assert data['has_reply'] is True
        assert data['is_read'] is True
        assert data['replied_at'] is not None
        assert [(r['author_type'], r['content']) for r in data['replies']] == [
            ('admin', 'Thanks for writing')]

    def test_empty_reply(self, admin_client, message_id):
        response = admin_client.post(f'/api/admin/messages/{message_id}/reply', json={'reply': ''})
        assert response.status_code == 400
        assert 'reply' in response.get_json()['errors']

    def test_reply_too_long(self, admin_client, message_id):
        response = admin_client.post(f'/api/admin/messages/{message_id}/reply',
                                     json={'reply': 'x' * 5001})
        assert response.status_code == 400

    def test_reply_to_unknown_message(self, admin_client):
        response = admin_client.post('/api/admin/messages/999/reply', json={'reply': 'hi'})
        assert response.status_code == 404

    def test_latest_answer_shown_to_visitor(self, app, client, admin_client, message_id):
        for text in ('first', 'second'):
            admin_client.post(f'/api/admin/messages/{message_id}/reply', json={'reply': text})
        token = token_for(app, message_id)
        data = client.get(f'/api/conversation/{token}').get_json()
        assert data['admin_reply'] == 'second'
        assert len(data['replies']) == 2


class TestDelete:
    def test_delete_removes_conversation(self, app, client, admin_client, message_id):
        token = token_for(app, message_id)
        admin_client.post(f'/api/admin/messages/{message_id}/reply', json={'reply': 'hi'})

        response = admin_client.delete(f'/api/admin/messages/{message_id}')
        assert response.status_code == 204
        assert client.get(f'/api/conversation/{token}').status_code == 404
        assert admin_client.get('/api/admin/messages').get_json() == []
        assert admin_client.delete(f'/api/admin/messages/{message_id}').status_code == 404


def test_reply_object_is_rejected(admin_client, message_id):
    response = admin_client.post(f'/api/admin/messages/{message_id}/reply',
                                 json={'reply': {'text': 'hi'}})
    assert response.status_code == 400
    assert 'reply' in response.get_json()['errors']
    assert admin_client.get(f'/api/admin/messages/{message_id}').get_json()['replies'] == []
