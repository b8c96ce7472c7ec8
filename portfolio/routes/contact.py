"""Public contact form and conversation pages."""

import logging
from flask import Blueprint, current_app, jsonify
from portfolio.forms import ContactForm, ConversationReplyForm
from portfolio.notifications import notify_owner, send_conversation_link
from portfolio.storage import get_storage
from portfolio.utils.responses import invalid_data, not_found

contact_bp = Blueprint('contact', __name__)
logger = logging.getLogger(__name__)


def reply_permission(message):
    """Apply the configured reply policy to a message."""
    return message.can_reply(
        max_replies=current_app.config['CONVERSATION_MAX_USER_REPLIES'],
        cooldown_seconds=current_app.config['CONVERSATION_REPLY_COOLDOWN'],
    )


@contact_bp.route('/contact', methods=['POST'])
def submit_contact_message():
    """Store a contact form submission and email the sender their link."""
    form = ContactForm()
    if not form.validate():
        return invalid_data(form.errors)
    
    message = get_storage().create_contact_message(form.submitted_data())
    logger.info('Contact message %s received', message.id)
    
    send_conversation_link(message)
    notify_owner(message)
    
    return jsonify({'success': True, 'id': message.id}), 201


@contact_bp.route('/conversation/<token>')
def view_conversation(token):
    """Conversation thread as seen by the visitor holding the token."""
    message = get_storage().get_message_by_token(token)
    if message is None:
        return not_found('Conversation')
    
    can_reply, reason = reply_permission(message)
    return jsonify(message.to_conversation_dict(can_reply, reason))


@contact_bp.route('/conversation/<token>/reply', methods=['POST'])
def reply_to_conversation(token):
    """Visitor follow-up on their conversation."""
    storage = get_storage()
    message = storage.get_message_by_token(token)
    if message is None:
        return not_found('Conversation')
    
    can_reply, reason = reply_permission(message)
    if not can_reply:
        logger.warning('Refused visitor reply on message %s: %s', message.id, reason)
        return jsonify({'message': reason}), 403
    
    form = ConversationReplyForm()
    if not form.validate():
        return invalid_data(form.errors)
    
    reply = storage.add_user_reply(message, form.message.data)
    logger.info('Visitor replied on message %s (%d replies)',
                message.id, message.user_reply_count)
    notify_owner(message, reply)
    
    return jsonify({'success': True, 'reply': reply.to_dict()})
