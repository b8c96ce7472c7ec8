"""Contact message and conversation thread models."""

import secrets
from datetime import datetime, timedelta
from portfolio.extensions import db
from portfolio.utils.formatting import isoformat

AUTHOR_USER = 'user'
AUTHOR_ADMIN = 'admin'
AUTHOR_TYPES = (AUTHOR_USER, AUTHOR_ADMIN)

REASON_AWAITING_ADMIN = 'You can reply once your message has been answered.'
REASON_LIMIT_REACHED = 'Reply limit reached for this conversation.'
REASON_COOLDOWN = 'Please wait a moment before sending another reply.'


class ContactMessage(db.Model):
    """Contact form submission and the conversation that follows it."""
    __tablename__ = 'contact_messages'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    subject = db.Column(db.String(500))
    message = db.Column(db.Text, nullable=False)
    is_read = db.Column(db.Boolean, default=False)
    conversation_token = db.Column(db.String(64), unique=True, nullable=False, index=True)
    user_reply_count = db.Column(db.Integer, default=0)
    last_user_reply_at = db.Column(db.DateTime)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    # Relationships
    replies = db.relationship('ConversationReply', backref='contact_message',
                              cascade='all, delete-orphan',
                              order_by='ConversationReply.created_at')

    @staticmethod
    def generate_token():
        """Mint a new conversation token (43 url-safe characters)."""
        return secrets.token_urlsafe(32)

    @property
    def thread(self):
        """Replies in display order."""
        return sorted(self.replies, key=lambda r: (r.created_at or datetime.min, r.id or 0))

    @property
    def latest_admin_reply(self):
        admin_replies = [r for r in self.thread if r.author_type == AUTHOR_ADMIN]
        return admin_replies[-1] if admin_replies else None

    @property
    def has_reply(self):
        return self.latest_admin_reply is not None

    @property
    def replied_at(self):
        reply = self.latest_admin_reply
        return reply.created_at if reply else None

    def can_reply(self, max_replies, cooldown_seconds=0, now=None):
        """Check whether the visitor may add a reply.

        Returns an ``(allowed, reason)`` tuple; ``reason`` is None when allowed.
        """
        now = now or datetime.utcnow()

        if not self.has_reply:
            return False, REASON_AWAITING_ADMIN

        if (self.user_reply_count or 0) >= max_replies:
            return False, REASON_LIMIT_REACHED

        if cooldown_seconds and self.last_user_reply_at:
            if now - self.last_user_reply_at < timedelta(seconds=cooldown_seconds):
                return False, REASON_COOLDOWN

        return True, None

    def to_dict(self):
        """Admin view of the message, including the conversation token."""
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'subject': self.subject,
            'message': self.message,
            'is_read': bool(self.is_read),
            'has_reply': self.has_reply,
            'replied_at': isoformat(self.replied_at),
            'conversation_token': self.conversation_token,
            'user_reply_count': self.user_reply_count or 0,
            'last_user_reply_at': isoformat(self.last_user_reply_at),
            'created_at': isoformat(self.created_at),
            'replies': [r.to_dict() for r in self.thread],
        }

    def to_conversation_dict(self, can_reply, reason=None):
        """Visitor view of the conversation. Never includes email or token."""
        admin_reply = self.latest_admin_reply
        return {
            'name': self.name,
            'subject': self.subject,
            'original_message': self.message,
            'created_at': isoformat(self.created_at),
            'has_reply': admin_reply is not None,
            'admin_reply': admin_reply.content if admin_reply else None,
            'replied_at': isoformat(admin_reply.created_at) if admin_reply else None,
            'replies': [r.to_dict() for r in self.thread],
            'can_reply': can_reply,
            'reply_blocked_reason': None if can_reply else reason,
        }

    def __repr__(self):
        return f'<ContactMessage {self.id} from {self.name}>'


class ConversationReply(db.Model):
    """One entry of a conversation thread, written by the visitor or the admin."""
    __tablename__ = 'conversation_replies'

    id = db.Column(db.Integer, primary_key=True)
    message_id = db.Column(db.Integer, db.ForeignKey('contact_messages.id', ondelete='CASCADE'),
                           nullable=False, index=True)
    author_type = db.Column(db.String(10), nullable=False)  # user, admin
    content = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'author_type': self.author_type,
            'content': self.content,
            'created_at': isoformat(self.created_at),
        }

    def __repr__(self):
        return f'<ConversationReply {self.author_type} on {self.message_id}>'
