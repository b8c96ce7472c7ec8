"""Storage interface for portfolio content and contact conversations.

Two backends implement it: ``SqlStorage`` on top of Flask-SQLAlchemy and
``MemoryStorage``, which keeps transient model instances in dictionaries.
The app factory builds one of them (or takes an injected instance) and
exposes it to request handlers through :func:`get_storage`.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from flask import current_app
from portfolio.models import (User, Project, ProjectImage, AboutContent, SiteSettings,
                              ContactMessage, ConversationReply)
from portfolio.models.contact import AUTHOR_ADMIN, AUTHOR_USER

EXTENSION_KEY = 'portfolio.storage'
MAX_TOKEN_LENGTH = 64


class Storage(ABC):
    """Operations the HTTP layer needs from a persistence backend.

    Backends implement lookups plus ``_save``/``_delete``; the mutations
    shared by both backends are written once here on top of them.
    """

    # --- Persistence primitives ---
    @abstractmethod
    def _save(self, *objects):
        """Persist new or modified records in one step."""

    @abstractmethod
    def _delete(self, obj):
        """Remove a record together with its dependent rows."""

    # --- Users ---
    @abstractmethod
    def get_user(self, user_id):
        pass

    @abstractmethod
    def get_user_by_username(self, username):
        pass

    @abstractmethod
    def count_users(self):
        pass

    def upsert_user(self, username, **fields):
        """Create or update a user by username. The first user becomes admin."""
        user = self.get_user_by_username(username)
        if user is None:
            is_first_user = self.count_users() == 0
            user = User(username=username, **fields)
            if is_first_user:
                user.is_admin = True
        else:
            _assign(user, fields)
        self._save(user)
        return user

    # --- Projects ---
    @abstractmethod
    def get_projects(self):
        """All projects in gallery order."""

    @abstractmethod
    def get_project(self, project_id):
        pass

    def get_published_projects(self):
        return [p for p in self.get_projects() if p.published]

    def create_project(self, data):
        project = Project(**data)
        self._save(project)
        return project

    def update_project(self, project_id, data):
        project = self.get_project(project_id)
        if project is None:
            return None
        _assign(project, data)
        self._save(project)
        return project

    def reorder_projects(self, project_orders):
        """Apply ``(id, sort_order)`` pairs; unknown ids are skipped."""
        changed = []
        for project_id, sort_order in project_orders:
            project = self.get_project(project_id)
            if project is not None:
                project.sort_order = sort_order
                changed.append(project)
        if changed:
            self._save(*changed)
        return len(changed)

    def delete_project(self, project_id):
        project = self.get_project(project_id)
        if project is None:
            return False
        self._delete(project)
        return True

    # --- Project images ---
    @abstractmethod
    def get_project_images(self, project_id):
        """Images of a project ordered by sort_order."""

    @abstractmethod
    def get_project_image(self, image_id):
        pass

    def add_project_image(self, project_id, data):
        if self.get_project(project_id) is None:
            return None
        image = ProjectImage(project_id=project_id, **data)
        self._save(image)
        return image

    def update_project_image_order(self, image_id, sort_order):
        image = self.get_project_image(image_id)
        if image is None:
            return None
        image.sort_order = sort_order
        self._save(image)
        return image

    def delete_project_image(self, image_id):
        image = self.get_project_image(image_id)
        if image is None:
            return False
        self._delete(image)
        return True

    # --- About content and site settings (single rows) ---
    @abstractmethod
    def get_about_content(self):
        pass

    def upsert_about_content(self, data):
        about = self.get_about_content()
        if about is None:
            about = AboutContent()
        _assign(about, data)
        self._save(about)
        return about

    @abstractmethod
    def get_site_settings(self):
        pass

    def upsert_site_settings(self, data):
        settings = self.get_site_settings()
        if settings is None:
            settings = SiteSettings()
        _assign(settings, data)
        self._save(settings)
        return settings

    # --- Contact messages and conversations ---
    @abstractmethod
    def get_contact_messages(self):
        """All messages, newest first."""

    @abstractmethod
    def get_contact_message(self, message_id):
        pass

    @abstractmethod
    def _find_message_by_token(self, token):
        pass

    def get_message_by_token(self, token):
        """Resolve a conversation token; anything unknown or malformed is None."""
        if not isinstance(token, str) or not token or len(token) > MAX_TOKEN_LENGTH:
            return None
        return self._find_message_by_token(token)

    def new_conversation_token(self):
        token = ContactMessage.generate_token()
        while self._find_message_by_token(token) is not None:
            token = ContactMessage.generate_token()
        return token

    def create_contact_message(self, data):
        message = ContactMessage(
            name=data['name'],
            email=data['email'],
            subject=data.get('subject'),
            message=data['message'],
            is_read=False,
            user_reply_count=0,
            conversation_token=self.new_conversation_token(),
        )
        self._save(message)
        return message

    def mark_message_as_read(self, message_id):
        message = self.get_contact_message(message_id)
        if message is None:
            return None
        message.is_read = True
        self._save(message)
        return message

    def reply_to_message(self, message_id, content):
        """Append an admin entry to the thread and mark the message read."""
        message = self.get_contact_message(message_id)
        if message is None:
            return None
        reply = ConversationReply(author_type=AUTHOR_ADMIN, content=content,
                                  created_at=datetime.utcnow())
        message.replies.append(reply)
        message.is_read = True
        self._save(message, reply)
        return message

    def add_user_reply(self, message, content, now=None):
        """Append a visitor entry and bump the reply counters.

        The caller is responsible for checking ``message.can_reply`` first.
        """
        now = now or datetime.utcnow()
        reply = ConversationReply(author_type=AUTHOR_USER, content=content, created_at=now)
        message.replies.append(reply)
        message.user_reply_count = (message.user_reply_count or 0) + 1
        message.last_user_reply_at = now
        self._save(message, reply)
        return reply

    def delete_contact_message(self, message_id):
        message = self.get_contact_message(message_id)
        if message is None:
            return False
        self._delete(message)
        return True


def _assign(obj, data):
    """Copy submitted fields onto a record, ignoring anything that is not a column."""
    columns = obj.__table__.columns.keys()
    for key, value in data.items():
        if key in columns and key not in ('id', 'created_at', 'updated_at'):
            setattr(obj, key, value)


def build_storage(app):
    """Create the storage backend selected by ``STORAGE_BACKEND``."""
    backend = app.config.get('STORAGE_BACKEND', 'sql')
    if backend == 'sql':
        from .sql import SqlStorage
        return SqlStorage()
    if backend == 'memory':
        from .memory import MemoryStorage
        return MemoryStorage()
    raise ValueError(f'Unknown STORAGE_BACKEND: {backend!r}')


def get_storage():
    """Storage bound to the current application."""
    return current_app.extensions[EXTENSION_KEY]
