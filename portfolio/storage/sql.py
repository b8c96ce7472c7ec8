"""Storage backed by the Flask-SQLAlchemy session."""

import logging
from sqlalchemy.exc import SQLAlchemyError
from portfolio.extensions import db
from portfolio.models import (User, Project, ProjectImage, AboutContent, SiteSettings,
                              ContactMessage)
from . import Storage

logger = logging.getLogger(__name__)


class SqlStorage(Storage):
    """Relational storage (PostgreSQL in production, SQLite locally)."""

    def _commit(self):
        try:
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            logger.exception('Database commit failed')
            raise

    def _save(self, *objects):
        db.session.add_all(objects)
        self._commit()

    def _delete(self, obj):
        db.session.delete(obj)
        self._commit()

    # --- Users ---
    def get_user(self, user_id):
        return db.session.get(User, user_id)

    def get_user_by_username(self, username):
        return User.query.filter_by(username=username).first()

    def count_users(self):
        return User.query.count()

    # --- Projects ---
    def get_projects(self):
        return Project.query.order_by(
            Project.sort_order.desc(), Project.created_at.desc()
        ).all()

    def get_published_projects(self):
        return Project.query.filter_by(published=True).order_by(
            Project.sort_order.desc(), Project.created_at.desc()
        ).all()

    def get_project(self, project_id):
        return db.session.get(Project, project_id)

    # --- Project images ---
    def get_project_images(self, project_id):
        return ProjectImage.query.filter_by(project_id=project_id).order_by(
            ProjectImage.sort_order.asc(), ProjectImage.id.asc()
        ).all()

    def get_project_image(self, image_id):
        return db.session.get(ProjectImage, image_id)

    # --- About content and site settings ---
    def get_about_content(self):
        return AboutContent.query.order_by(AboutContent.id.asc()).first()

    def get_site_settings(self):
        return SiteSettings.query.order_by(SiteSettings.id.asc()).first()

    # --- Contact messages ---
    def get_contact_messages(self):
        return ContactMessage.query.order_by(
            ContactMessage.created_at.desc(), ContactMessage.id.desc()
        ).all()

    def get_contact_message(self, message_id):
        return db.session.get(ContactMessage, message_id)

    def _find_message_by_token(self, token):
        return ContactMessage.query.filter_by(conversation_token=token).first()
