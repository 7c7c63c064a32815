"""
Sheet Settings API Routes
"""
import logging

from flask import Blueprint, jsonify, request

from saharapor.core import get_service
from saharapor.core.auth import crew_required, current_team
from .service import InvalidSheetUrl

logger = logging.getLogger(__name__)

sheet_settings_bp = Blueprint('sheet_settings', __name__, url_prefix='/api')


@sheet_settings_bp.route('/settings', methods=['GET'])
@crew_required
def api_get_settings():
    return jsonify(get_service('sheet_settings').get_settings(current_team()))


@sheet_settings_bp.route('/settings', methods=['PUT'])
@crew_required
def api_update_settings():
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or 'sheetUrl' not in data:
        return jsonify({'error': 'sheetUrl required'}), 400

    try:
        result = get_service('sheet_settings').update_sheet_url(current_team(), data['sheetUrl'])
    except InvalidSheetUrl as e:
        return jsonify({'error': str(e)}), 400

    logger.info(f"Crew {current_team()} sheet URL {'set' if result['sheetUrl'] else 'cleared'}")
    return jsonify(result)
