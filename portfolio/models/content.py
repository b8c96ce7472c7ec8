"""About page and site-wide settings models. Both are single-row tables."""

from datetime import datetime
from portfolio.extensions import db
from portfolio.utils.formatting import isoformat


class AboutContent(db.Model):
    """Content of the "about me" page."""
    __tablename__ = 'about_content'
    
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(255))
    subtitle = db.Column(db.String(500))
    bio = db.Column(db.Text)
    photo_url = db.Column(db.String(500))
    resume_url = db.Column(db.String(500))
    skills = db.Column(db.JSON, default=lambda: [])
    social_links = db.Column(db.JSON, default=lambda: {})  # network name -> URL
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    
    def to_dict(self):
        return {
            'id': self.id,
            'title': self.title,
            'subtitle': self.subtitle,
            'bio': self.bio,
            'photo_url': self.photo_url,
            'resume_url': self.resume_url,
            'skills': list(self.skills or []),
            'social_links': dict(self.social_links or {}),
            'created_at': isoformat(self.created_at),
            'updated_at': isoformat(self.updated_at),
        }
    
    def __repr__(self):
        return f'<AboutContent {self.title}>'


class SiteSettings(db.Model):
    """Hero section and branding texts."""
    __tablename__ = 'site_settings'
    
    id = db.Column(db.Integer, primary_key=True)
    greeting_name = db.Column(db.String(100))
    greeting_prefix = db.Column(db.String(100), default='Hi, I am')
    hero_title = db.Column(db.String(255), default='Creating')
    hero_highlight = db.Column(db.String(255), default='digital wonders')
    hero_description = db.Column(db.Text)
    works_title = db.Column(db.String(255), default='My work')
    works_subtitle = db.Column(db.Text)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    
    def to_dict(self):
        return {
            'id': self.id,
            'greeting_name': self.greeting_name,
            'greeting_prefix': self.greeting_prefix,
            'hero_title': self.hero_title,
            'hero_highlight': self.hero_highlight,
            'hero_description': self.hero_description,
            'works_title': self.works_title,
            'works_subtitle': self.works_subtitle,
            'created_at': isoformat(self.created_at),
            'updated_at': isoformat(self.updated_at),
        }
    
    def __repr__(self):
        return f'<SiteSettings {self.id}>'
