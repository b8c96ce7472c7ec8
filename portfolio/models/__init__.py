"""Database models package."""

from .user import User
from .project import Project, ProjectImage
from .content import AboutContent, SiteSettings
from .contact import ContactMessage, ConversationReply

__all__ = [
    'User',
    'Project',
    'ProjectImage',
    'AboutContent',
    'SiteSettings',
    'ContactMessage',
    'ConversationReply',
]
