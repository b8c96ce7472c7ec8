"""Storage backends. Every test runs against SQL and memory storage."""
from datetime import datetime

from portfolio.models import ConversationReply, ProjectImage
from portfolio.models.contact import AUTHOR_ADMIN, AUTHOR_USER
from portfolio.storage.sql import SqlStorage

MESSAGE = {'name': 'A', 'email': 'a@x.com', 'message': 'hello'}


def count_rows(storage, model):
    if isinstance(storage, SqlStorage):
        return model.query.count()
    return len(storage._tables[model])


class TestUsers:
    def test_first_user_becomes_admin(self, storage):
        first = storage.upsert_user('alice')
        second = storage.upsert_user('bob')
        assert first.is_admin
        assert not second.is_admin
        assert storage.count_users() == 2

    def test_upsert_updates_existing(self, storage):
        user = storage.upsert_user('alice', email='old@example.com')
        again = storage.upsert_user('alice', email='new@example.com')
        assert again.id == user.id
        assert storage.get_user(user.id).email == 'new@example.com'
        assert storage.count_users() == 1

    def test_get_user_by_username(self, storage):
        storage.upsert_user('alice')
        assert storage.get_user_by_username('alice').username == 'alice'
        assert storage.get_user_by_username('nobody') is None


class TestProjects:
    def test_gallery_order(self, storage):
        for title, order in (('low', 1), ('high', 3), ('mid', 2)):
            storage.create_project({'title': title, 'sort_order': order})
        assert [p.title for p in storage.get_projects()] == ['high', 'mid', 'low']

    def test_column_defaults(self, storage):
        project = storage.create_project({'title': 'Plain'})
        assert project.published is True
        assert project.featured is False
        assert project.tags == []
        assert project.created_at is not None

    def test_published_filter(self, storage):
        storage.create_project({'title': 'Live'})
        storage.create_project({'title': 'Draft', 'published': False})
        assert [p.title for p in storage.get_published_projects()] == ['Live']
        assert len(storage.get_projects()) == 2

    def test_update_only_given_fields(self, storage):
        project = storage.create_project({'title': 'Old', 'category': 'Web'})
        storage.update_project(project.id, {'title': 'New', 'id': 999})
        updated = storage.get_project(project.id)
        assert updated.title == 'New'
        assert updated.category == 'Web'
        assert updated.id == project.id

    def test_update_unknown_project(self, storage):
        assert storage.update_project(42, {'title': 'x'}) is None

    def test_reorder_skips_unknown_ids(self, storage):
        a = storage.create_project({'title': 'a', 'sort_order': 1})
        b = storage.create_project({'title': 'b', 'sort_order': 2})
        assert storage.reorder_projects([(a.id, 5), (b.id, 0), (999, 1)]) == 2
        assert [p.title for p in storage.get_projects()] == ['a', 'b']

    def test_delete_cascades_images(self, storage):
        project = storage.create_project({'title': 'With images'})
        storage.add_project_image(project.id, {'image_url': '/1.png'})
        storage.add_project_image(project.id, {'image_url': '/2.png'})
        assert storage.delete_project(project.id)
        assert storage.get_project(project.id) is None
        assert storage.get_project_images(project.id) == []
        assert count_rows(storage, ProjectImage) == 0
        assert not storage.delete_project(project.id)


class TestProjectImages:
    def test_images_ordered(self, storage):
        project = storage.create_project({'title': 'p'})
        storage.add_project_image(project.id, {'image_url': '/b.png', 'sort_order': 2})
        storage.add_project_image(project.id, {'image_url': '/a.png', 'sort_order': 1})
        assert [i.image_url for i in storage.get_project_images(project.id)] == ['/a.png', '/b.png']

    def test_add_to_missing_project(self, storage):
        assert storage.add_project_image(404, {'image_url': '/x.png'}) is None

    def test_update_order_and_delete(self, storage):
        project = storage.create_project({'title': 'p'})
        image = storage.add_project_image(project.id, {'image_url': '/a.png'})
        assert storage.update_project_image_order(image.id, 7).sort_order == 7
        assert storage.update_project_image_order(999, 1) is None
        assert storage.delete_project_image(image.id)
        assert storage.get_project_image(image.id) is None
        assert not storage.delete_project_image(image.id)


class TestSingleRowContent:
    def test_about_upsert_keeps_one_row(self, storage):
        assert storage.get_about_content() is None
        first = storage.upsert_about_content({'title': 'About', 'skills': ['Python']})
        second = storage.upsert_about_content({'bio': 'Hello'})
        assert first.id == second.id
        about = storage.get_about_content()
        assert about.title == 'About'
        assert about.bio == 'Hello'
        assert about.skills == ['Python']

    def test_site_settings_defaults(self, storage):
        assert storage.get_site_settings() is None
        settings = storage.upsert_site_settings({'greeting_name': 'Alex'})
        assert settings.greeting_name == 'Alex'
        assert settings.greeting_prefix == 'Hi, I am'
        assert settings.works_title == 'My work'


class TestContactMessages:
    def test_tokens_are_unique(self, storage):
        tokens = {storage.create_contact_message(MESSAGE).conversation_token for _ in range(20)}
        assert len(tokens) == 20

    def test_new_message_state(self, storage):
        message = storage.create_contact_message(MESSAGE)
        assert message.is_read is False
        assert message.user_reply_count == 0
        assert message.replies == []
        assert message.subject is None

    def test_lookup_by_token(self, storage):
        message = storage.create_contact_message(MESSAGE)
        assert storage.get_message_by_token(message.conversation_token).id == message.id

    def test_malformed_tokens_are_not_found(self, storage):
        storage.create_contact_message(MESSAGE)
        for token in (None, '', 'x' * 65, 123, 'unknown-token'):
            assert storage.get_message_by_token(token) is None

    def test_newest_first(self, storage):
        first = storage.create_contact_message(MESSAGE)
        second = storage.create_contact_message(dict(MESSAGE, name='B'))
        assert [m.id for m in storage.get_contact_messages()] == [second.id, first.id]

    def test_mark_as_read(self, storage):
        message = storage.create_contact_message(MESSAGE)
        assert storage.mark_message_as_read(message.id).is_read is True
        assert storage.mark_message_as_read(999) is None

    def test_admin_reply_appends_and_marks_read(self, storage):
        message = storage.create_contact_message(MESSAGE)
        storage.reply_to_message(message.id, 'first answer')
        storage.reply_to_message(message.id, 'second answer')
        message = storage.get_contact_message(message.id)
        assert message.is_read is True
        assert [r.author_type for r in message.thread] == [AUTHOR_ADMIN, AUTHOR_ADMIN]
        assert message.latest_admin_reply.content == 'second answer'
        assert storage.reply_to_message(999, 'x') is None

    def test_user_reply_updates_counters(self, storage):
        message = storage.create_contact_message(MESSAGE)
        storage.reply_to_message(message.id, 'answer')
        now = datetime(2024, 5, 1, 12, 0, 0)
        reply = storage.add_user_reply(message, 'thanks', now=now)
        assert reply.id is not None
        assert reply.author_type == AUTHOR_USER
        message = storage.get_contact_message(message.id)
        assert message.user_reply_count == 1
        assert message.last_user_reply_at == now
        assert message.has_reply

    def test_delete_cascades_thread(self, storage):
        message = storage.create_contact_message(MESSAGE)
        token = message.conversation_token
        storage.reply_to_message(message.id, 'answer')
        assert storage.delete_contact_message(message.id)
        assert storage.get_message_by_token(token) is None
        assert storage.get_contact_messages() == []
        assert count_rows(storage, ConversationReply) == 0
        assert not storage.delete_contact_message(message.id)
