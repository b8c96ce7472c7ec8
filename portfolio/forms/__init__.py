"""WTForms forms validating the JSON bodies of API requests."""

from .base import JsonForm
from .auth import LoginForm
from .contact import ContactForm, ConversationReplyForm, AdminReplyForm
from .content import (ProjectForm, ProjectUpdateForm, ProjectImageForm, ImageOrderForm,
                      AboutForm, SiteSettingsForm)

__all__ = [
    'JsonForm',
    'LoginForm',
    'ContactForm',
    'ConversationReplyForm',
    'AdminReplyForm',
    'ProjectForm',
    'ProjectUpdateForm',
    'ProjectImageForm',
    'ImageOrderForm',
    'AboutForm',
    'SiteSettingsForm',
]
