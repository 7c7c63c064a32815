"""
Activity Logs Routes
"""
from flask import Blueprint, jsonify, request

from saharapor.core import get_service
from saharapor.core.auth import manager_required

activity_logs_bp = Blueprint('activity_logs', __name__, url_prefix='/api')


@activity_logs_bp.route('/logs')
@manager_required
def api_logs():
    """Recent log entries, ?level= filters by level name"""
    level_filter = request.args.get('level', 'ALL').upper()
    try:
        limit = int(request.args.get('limit', 50))
    except ValueError:
        return jsonify({'error': 'limit must be an integer'}), 400
    if limit < 0:
        return jsonify({'error': 'limit must not be negative'}), 400

    return jsonify(get_service('activity_logs').get_logs(level_filter=level_filter, limit=limit))
