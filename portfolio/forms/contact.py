"""Contact form and conversation reply forms."""

from wtforms import StringField, TextAreaField
from wtforms.validators import DataRequired, Email, Length, Optional
from .base import JsonForm, _strip

MAX_MESSAGE_LENGTH = 5000
MAX_VISITOR_REPLY_LENGTH = 2000


class ContactForm(JsonForm):
    """Public contact form."""
    name = StringField('Name', filters=[_strip], validators=[
        DataRequired(message='Name is required'),
        Length(max=255)
    ])
    email = StringField('Email', filters=[_strip], validators=[
        DataRequired(message='Email is required'),
        Email(message='Please enter a valid email address'),
        Length(max=255)
    ])
    subject = StringField('Subject', filters=[_strip], validators=[
        Optional(),
        Length(max=500)
    ])
    message = TextAreaField('Message', filters=[_strip], validators=[
        DataRequired(message='Message is required'),
        Length(max=MAX_MESSAGE_LENGTH)
    ])


class ConversationReplyForm(JsonForm):
    """Visitor reply on a conversation page."""
    message = TextAreaField('Message', filters=[_strip], validators=[
        DataRequired(message='Reply text is required'),
        Length(max=MAX_VISITOR_REPLY_LENGTH,
               message=f'Reply must be at most {MAX_VISITOR_REPLY_LENGTH} characters')
    ])


class AdminReplyForm(JsonForm):
    """Admin reply to a contact message."""
    reply = TextAreaField('Reply', filters=[_strip], validators=[
        DataRequired(message='Reply text is required'),
        Length(max=MAX_MESSAGE_LENGTH)
    ])
