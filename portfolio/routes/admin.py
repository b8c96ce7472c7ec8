"""Admin panel routes."""

import logging
from flask import Blueprint, jsonify
from flask_login import login_required
from portfolio.forms import AdminReplyForm
from portfolio.notifications import send_admin_reply_notice
from portfolio.storage import get_storage
from portfolio.utils.decorators import admin_required
from portfolio.utils.responses import invalid_data, not_found

admin_bp = Blueprint('admin', __name__)
logger = logging.getLogger(__name__)


# --- Projects ---
@admin_bp.route('/projects')
@login_required
@admin_required
def projects():
    """All projects, published or not."""
    return jsonify([p.to_dict() for p in get_storage().get_projects()])


# --- Contact Messages ---
@admin_bp.route('/messages')
@login_required
@admin_required
def messages():
    """Contact messages, newest first, with their threads."""
    return jsonify([m.to_dict() for m in get_storage().get_contact_messages()])


@admin_bp.route('/messages/<int:message_id>')
@login_required
@admin_required
def message_detail(message_id):
    message = get_storage().get_contact_message(message_id)
    if message is None:
        return not_found('Message')
    return jsonify(message.to_dict())


@admin_bp.route('/messages/<int:message_id>/read', methods=['PATCH'])
@login_required
@admin_required
def mark_message_read(message_id):
    """Mark message as read."""
    message = get_storage().mark_message_as_read(message_id)
    if message is None:
        return not_found('Message')
    return jsonify(message.to_dict())


@admin_bp.route('/messages/<int:message_id>/reply', methods=['POST'])
@login_required
@admin_required
def reply_to_message(message_id):
    """Answer a contact message; the sender gets an email with the link."""
    form = AdminReplyForm()
    if not form.validate():
        return invalid_data(form.errors)
    
    message = get_storage().reply_to_message(message_id, form.reply.data)
    if message is None:
        return not_found('Message')
    
    logger.info('Admin replied to message %s', message.id)
    send_admin_reply_notice(message)
    return jsonify(message.to_dict())


@admin_bp.route('/messages/<int:message_id>', methods=['DELETE'])
@login_required
@admin_required
def delete_message(message_id):
    """Delete a message together with its conversation."""
    if not get_storage().delete_contact_message(message_id):
        return not_found('Message')
    logger.info('Deleted message %s', message_id)
    return '', 204
