"""Project and ProjectImage models."""

from datetime import datetime
from portfolio.extensions import db
from portfolio.utils.formatting import isoformat


class Project(db.Model):
    """Portfolio project shown in the public gallery."""
    __tablename__ = 'projects'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text)
    short_description = db.Column(db.String(500))
    image_url = db.Column(db.String(500))
    tags = db.Column(db.JSON, default=lambda: [])
    category = db.Column(db.String(100))
    external_url = db.Column(db.String(500))
    github_url = db.Column(db.String(500))
    technologies = db.Column(db.JSON, default=lambda: [])
    role = db.Column(db.String(255))
    year = db.Column(db.Integer)
    featured = db.Column(db.Boolean, default=False)
    published = db.Column(db.Boolean, default=True)
    sort_order = db.Column(db.Integer, default=0)  # Higher shows first
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'))
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    images = db.relationship('ProjectImage', backref='project',
                             cascade='all, delete-orphan',
                             order_by='ProjectImage.sort_order')

    def display_key(self):
        """Sort key for gallery order: sort_order desc, then newest first."""
        created = self.created_at.timestamp() if self.created_at else 0
        return (-(self.sort_order or 0), -created)

    def to_dict(self):
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'short_description': self.short_description,
            'image_url': self.image_url,
            'tags': list(self.tags or []),
            'category': self.category,
            'external_url': self.external_url,
            'github_url': self.github_url,
            'technologies': list(self.technologies or []),
            'role': self.role,
            'year': self.year,
            'featured': bool(self.featured),
            'published': bool(self.published),
            'sort_order': self.sort_order or 0,
            'user_id': self.user_id,
            'created_at': isoformat(self.created_at),
            'updated_at': isoformat(self.updated_at),
        }

    def __repr__(self):
        return f'<Project {self.title}>'


class ProjectImage(db.Model):
    """Additional gallery image attached to a project."""
    __tablename__ = 'project_images'

    id = db.Column(db.Integer, primary_key=True)
    project_id = db.Column(db.Integer, db.ForeignKey('projects.id', ondelete='CASCADE'),
                           nullable=False, index=True)
    image_url = db.Column(db.String(500), nullable=False)
    caption = db.Column(db.String(500))
    sort_order = db.Column(db.Integer, default=0)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'project_id': self.project_id,
            'image_url': self.image_url,
            'caption': self.caption,
            'sort_order': self.sort_order or 0,
            'created_at': isoformat(self.created_at),
        }

    def __repr__(self):
        return f'<ProjectImage {self.id} of project {self.project_id}>'
