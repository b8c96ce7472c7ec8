"""JSON error bodies shared by the blueprints."""

from flask import jsonify


def invalid_data(errors):
    return jsonify({'message': 'Invalid data', 'errors': errors}), 400


def not_found(what):
    return jsonify({'message': f'{what} not found'}), 404
