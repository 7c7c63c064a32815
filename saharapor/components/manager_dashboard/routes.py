"""
Manager Dashboard API Routes
"""
import logging

from flask import Blueprint, current_app, jsonify, request, session

from saharapor.core import get_service
from saharapor.core.auth import MANAGER_SESSION_KEY, check_password, manager_required
from .service import sheet_table

logger = logging.getLogger(__name__)

manager_dashboard_bp = Blueprint('manager_dashboard', __name__, url_prefix='/api/manager')


@manager_dashboard_bp.route('/login', methods=['POST'])
def api_manager_login():
    data = request.get_json(silent=True) or {}
    username = data.get('username', '')
    if not check_password(current_app.config['MANAGER_USERS'], username, data.get('password', '')):
        logger.warning(f'Failed manager login for {username!r}')
        return jsonify({'error': 'Kullanıcı adı veya şifre hatalı'}), 401

    session.permanent = True
    session[MANAGER_SESSION_KEY] = username
    logger.info(f'Manager {username} signed in')
    return jsonify({'logged_in': True, 'username': username})


@manager_dashboard_bp.route('/logout', methods=['POST'])
def api_manager_logout():
    session.pop(MANAGER_SESSION_KEY, None)
    return jsonify({'logged_in': False})


def _load_sheet_data():
    """Sheet dump for the request, or an error response tuple"""
    sheet_url = (request.args.get('sheetUrl') or current_app.config.get('MANAGER_SHEET_URL') or '').strip()
    if not sheet_url:
        return None, (jsonify({'error': 'Sheet URL is not configured'}), 400)

    result = get_service('manager_dashboard').fetch_data(sheet_url)
    if 'error' in result:
        logger.error(f"Manager data fetch failed: {result['error']}")
        return None, (jsonify(result), 502)
    return result['data'], None


@manager_dashboard_bp.route('/overview')
@manager_required
def api_overview():
    data, error = _load_sheet_data()
    if error:
        return error
    return jsonify(get_service('manager_dashboard').overview(data))


@manager_dashboard_bp.route('/teams')
@manager_required
def api_teams():
    data, error = _load_sheet_data()
    if error:
        return error
    return jsonify({'teams': get_service('manager_dashboard').teams(data)})


@manager_dashboard_bp.route('/sheets/<path:sheet_name>')
@manager_required
def api_sheet(sheet_name):
    data, error = _load_sheet_data()
    if error:
        return error
    if sheet_name not in data:
        return jsonify({'error': f'Unknown sheet: {sheet_name}'}), 404
    return jsonify(sheet_table(data, sheet_name, request.args.get('q', '')))
