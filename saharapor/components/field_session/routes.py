"""
Crew session routes
Crews sign in with their crew code, there is no password
"""
import logging

from flask import Blueprint, jsonify, request, session

from saharapor.core.auth import CREW_SESSION_KEY, current_team
from saharapor.models import ReportValidationError, normalize_team_code

logger = logging.getLogger(__name__)

field_session_bp = Blueprint('field_session', __name__, url_prefix='/api')


@field_session_bp.route('/session', methods=['GET'])
def session_status():
    team = current_team()
    return jsonify({'logged_in': bool(team), 'ekipKodu': team or ''})


@field_session_bp.route('/session', methods=['POST'])
def login():
    data = request.get_json(silent=True) or {}
    try:
        team = normalize_team_code(data.get('ekipKodu'))
    except ReportValidationError as e:
        return jsonify({'error': str(e)}), 400

    session.permanent = True
    session[CREW_SESSION_KEY] = team
    logger.info(f'Crew {team} signed in')
    return jsonify({'logged_in': True, 'ekipKodu': team})


@field_session_bp.route('/session', methods=['DELETE'])
def logout():
    team = session.pop(CREW_SESSION_KEY, None)
    if team:
        logger.info(f'Crew {team} signed out')
    return jsonify({'logged_in': False, 'ekipKodu': ''})
