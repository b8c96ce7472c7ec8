"""Project gallery routes: public reads, admin writes."""

import logging
from flask import Blueprint, jsonify, request
from flask_login import current_user, login_required
from portfolio.forms import ProjectForm, ProjectUpdateForm, ProjectImageForm, ImageOrderForm
from portfolio.storage import get_storage
from portfolio.utils.decorators import admin_required
from portfolio.utils.responses import invalid_data, not_found

projects_bp = Blueprint('projects', __name__)
logger = logging.getLogger(__name__)


def _is_admin():
    return current_user.is_authenticated and current_user.is_admin


def _visible_project(project_id):
    """Project by id; unpublished ones only exist for the admin."""
    project = get_storage().get_project(project_id)
    if project is None or (not project.published and not _is_admin()):
        return None
    return project


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


@projects_bp.route('/projects')
def published_projects():
    """Published projects in gallery order."""
    return jsonify([p.to_dict() for p in get_storage().get_published_projects()])


@projects_bp.route('/projects/<int:project_id>')
def project_detail(project_id):
    project = _visible_project(project_id)
    if project is None:
        return not_found('Project')
    return jsonify(project.to_dict())


@projects_bp.route('/projects', methods=['POST'])
@login_required
@admin_required
def create_project():
    """Add a project."""
    form = ProjectForm()
    if not form.validate():
        return invalid_data(form.errors)
    
    data = form.submitted_data()
    data['user_id'] = current_user.id
    project = get_storage().create_project(data)
    logger.info('Created project %s', project.id)
    return jsonify(project.to_dict()), 201


@projects_bp.route('/projects/reorder', methods=['PATCH'])
@login_required
@admin_required
def reorder_projects():
    """Persist the drag-and-drop order of the admin project list.

    Body: ``{"project_orders": [{"id": 3, "sort_order": 2}, ...]}``.
    """
    payload = request.get_json(silent=True)
    orders = payload.get('project_orders') if isinstance(payload, dict) else None
    if not isinstance(orders, list):
        return jsonify({'message': 'project_orders must be an array'}), 400
    
    pairs = []
    for entry in orders:
        if not isinstance(entry, dict) or not _is_int(entry.get('id')) \
                or not _is_int(entry.get('sort_order')):
            return jsonify({'message': 'Each entry needs an integer id and sort_order'}), 400
        pairs.append((entry['id'], entry['sort_order']))
    
    updated = get_storage().reorder_projects(pairs)
    return jsonify({'success': True, 'updated': updated})


@projects_bp.route('/projects/<int:project_id>', methods=['PATCH'])
@login_required
@admin_required
def update_project(project_id):
    """Update the fields present in the body."""
    form = ProjectUpdateForm()
    if not form.validate():
        return invalid_data(form.errors)
    
    project = get_storage().update_project(project_id, form.submitted_data())
    if project is None:
        return not_found('Project')
    return jsonify(project.to_dict())


@projects_bp.route('/projects/<int:project_id>', methods=['DELETE'])
@login_required
@admin_required
def delete_project(project_id):
    if not get_storage().delete_project(project_id):
        return not_found('Project')
    logger.info('Deleted project %s', project_id)
    return '', 204


# --- Project Images ---
@projects_bp.route('/projects/<int:project_id>/images')
def project_images(project_id):
    if _visible_project(project_id) is None:
        return not_found('Project')
    return jsonify([i.to_dict() for i in get_storage().get_project_images(project_id)])


@projects_bp.route('/projects/<int:project_id>/images', methods=['POST'])
@login_required
@admin_required
def add_project_image(project_id):
    form = ProjectImageForm()
    if not form.validate():
        return invalid_data(form.errors)
    
    image = get_storage().add_project_image(project_id, form.submitted_data())
    if image is None:
        return not_found('Project')
    return jsonify(image.to_dict()), 201


@projects_bp.route('/project-images/<int:image_id>', methods=['PATCH'])
@login_required
@admin_required
def update_project_image_order(image_id):
    form = ImageOrderForm()
    if not form.validate():
        return invalid_data(form.errors)
    
    image = get_storage().update_project_image_order(image_id, form.sort_order.data)
    if image is None:
        return not_found('Image')
    return jsonify(image.to_dict())


@projects_bp.route('/project-images/<int:image_id>', methods=['DELETE'])
@login_required
@admin_required
def delete_project_image(image_id):
    if not get_storage().delete_project_image(image_id):
        return not_found('Image')
    return '', 204
