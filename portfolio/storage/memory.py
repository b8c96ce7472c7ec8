"""In-memory storage used when no database is configured.

Records are ordinary (transient) model instances that never touch a
SQLAlchemy session, so both backends hand the same types to the routes.
Column defaults normally applied on flush are filled in by ``_save``.
"""

import itertools
from collections import defaultdict
from datetime import datetime
from portfolio.models import (User, Project, ProjectImage, AboutContent, SiteSettings,
                              ContactMessage, ConversationReply)
from . import Storage


class MemoryStorage(Storage):
    """Dictionary-backed storage; data lives as long as the process."""

    def __init__(self):
        self._tables = defaultdict(dict)  # model class -> {id: record}
        self._ids = defaultdict(lambda: itertools.count(1))

    def _save(self, *objects):
        now = datetime.utcnow()
        for obj in objects:
            table = self._tables[type(obj)]
            if obj.id is None:
                _apply_column_defaults(obj)
                obj.id = next(self._ids[type(obj)])
            elif hasattr(obj, 'updated_at'):
                obj.updated_at = now
            if isinstance(obj, ConversationReply):
                obj.message_id = obj.contact_message.id
            table[obj.id] = obj

    def _delete(self, obj):
        if isinstance(obj, ContactMessage):
            for reply in obj.replies:
                self._tables[ConversationReply].pop(reply.id, None)
        elif isinstance(obj, Project):
            images = self._tables[ProjectImage]
            for image_id in [i.id for i in images.values() if i.project_id == obj.id]:
                del images[image_id]
        self._tables[type(obj)].pop(obj.id, None)

    def _all(self, model):
        return list(self._tables[model].values())

    # --- Users ---
    def get_user(self, user_id):
        return self._tables[User].get(user_id)

    def get_user_by_username(self, username):
        for user in self._all(User):
            if user.username == username:
                return user
        return None

    def count_users(self):
        return len(self._tables[User])

    # --- Projects ---
    def get_projects(self):
        return sorted(self._all(Project), key=lambda p: (p.display_key(), -p.id))

    def get_project(self, project_id):
        return self._tables[Project].get(project_id)

    # --- Project images ---
    def get_project_images(self, project_id):
        images = [i for i in self._all(ProjectImage) if i.project_id == project_id]
        return sorted(images, key=lambda i: (i.sort_order or 0, i.id))

    def get_project_image(self, image_id):
        return self._tables[ProjectImage].get(image_id)

    # --- About content and site settings ---
    def get_about_content(self):
        rows = self._all(AboutContent)
        return rows[0] if rows else None

    def get_site_settings(self):
        rows = self._all(SiteSettings)
        return rows[0] if rows else None

    # --- Contact messages ---
    def get_contact_messages(self):
        return sorted(self._all(ContactMessage),
                      key=lambda m: (m.created_at, m.id), reverse=True)

    def get_contact_message(self, message_id):
        return self._tables[ContactMessage].get(message_id)

    def _find_message_by_token(self, token):
        for message in self._all(ContactMessage):
            if message.conversation_token == token:
                return message
        return None


def _apply_column_defaults(obj):
    """Fill unset columns with their scalar or callable defaults."""
    for column in obj.__table__.columns:
        if column.default is None or getattr(obj, column.key) is not None:
            continue
        if column.default.is_callable:
            setattr(obj, column.key, column.default.arg(None))
        elif column.default.is_scalar:
            setattr(obj, column.key, column.default.arg)
