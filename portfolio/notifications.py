"""Email notifications about contact conversations.

The conversation token is only ever delivered by email to the address
that submitted the contact form. Mail failures are logged and swallowed:
by the time we send, the message or reply is already stored.
"""

import logging
from flask import current_app
from flask_mail import Message
from portfolio.extensions import mail

logger = logging.getLogger(__name__)


def conversation_url(message):
    """Public link to the conversation page of a message."""
    template = current_app.config['CONVERSATION_URL_TEMPLATE']
    base_url = current_app.config['PUBLIC_BASE_URL'].rstrip('/')
    return template.format(base_url=base_url, token=message.conversation_token)


def _send(subject, recipients, body):
    if not current_app.config.get('MAIL_ENABLED'):
        logger.info('Mail disabled, not sending "%s"', subject)
        return False
    try:
        mail.send(Message(subject=subject, recipients=recipients, body=body))
    except Exception:
        logger.exception('Failed to send "%s"', subject)
        return False
    return True


def send_conversation_link(message):
    """Tell the sender where to follow their conversation."""
    body = (
        f'Hi {message.name},\n\n'
        'Thanks for getting in touch. Your message has been received.\n'
        'You can follow the conversation and read replies here:\n\n'
        f'{conversation_url(message)}\n\n'
        'Keep this link private: anyone with it can read the conversation.\n'
    )
    return _send('Your message has been received', [message.email], body)


def send_admin_reply_notice(message):
    """Let the sender know an answer is waiting."""
    subject = f'Re: {message.subject}' if message.subject else 'You have a new reply'
    body = (
        f'Hi {message.name},\n\n'
        'You have a new reply to your message. Read it and answer here:\n\n'
        f'{conversation_url(message)}\n'
    )
    return _send(subject, [message.email], body)


def notify_owner(message, reply=None):
    """Alert the site owner about a new message or a visitor reply."""
    owner = current_app.config.get('ADMIN_EMAIL')
    if not owner:
        return False
    if reply is None:
        subject = f'New contact message from {message.name}'
        content = message.message
    else:
        subject = f'New reply from {message.name}'
        content = reply.content
    body = (
        f'From: {message.name} <{message.email}>\n'
        f'Subject: {message.subject or "(none)"}\n\n'
        f'{content}\n'
    )
    return _send(subject, [owner], body)
