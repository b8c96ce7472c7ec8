"""About page and site settings routes."""

from flask import Blueprint, jsonify
from flask_login import login_required
from portfolio.forms import AboutForm, SiteSettingsForm
from portfolio.storage import get_storage
from portfolio.utils.decorators import admin_required
from portfolio.utils.responses import invalid_data

content_bp = Blueprint('content', __name__)


@content_bp.route('/about')
def about():
    about = get_storage().get_about_content()
    return jsonify(about.to_dict() if about else None)


@content_bp.route('/about', methods=['PUT'])
@login_required
@admin_required
def update_about():
    form = AboutForm()
    if not form.validate():
        return invalid_data(form.errors)
    return jsonify(get_storage().upsert_about_content(form.submitted_data()).to_dict())


@content_bp.route('/site-settings')
def site_settings():
    settings = get_storage().get_site_settings()
    return jsonify(settings.to_dict() if settings else None)


@content_bp.route('/site-settings', methods=['PUT'])
@login_required
@admin_required
def update_site_settings():
    form = SiteSettingsForm()
    if not form.validate():
        return invalid_data(form.errors)
    return jsonify(get_storage().upsert_site_settings(form.submitted_data()).to_dict())
