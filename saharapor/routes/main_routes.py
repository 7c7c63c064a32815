"""
Main routes for SahaRapor
"""
import logging
import os
from datetime import datetime

from flask import Blueprint, current_app, jsonify

from saharapor.components import registry

logger = logging.getLogger(__name__)

main_bp = Blueprint('main', __name__)


@main_bp.route('/')
def index():
    """Service summary"""
    return jsonify({
        'service': 'SahaRapor',
        'description': 'Saha operasyonları raporlama servisi',
        'endpoints': {
            'session': '/api/session',
            'reports': '/api/reports/<reportType>',
            'history': '/api/history',
            'settings': '/api/settings',
            'sheet': '/exec',
            'manager': '/api/manager/overview',
        },
        'current_time': datetime.now().isoformat(),
    })


@main_bp.route('/health', methods=['GET'])
def health():
    """Health check endpoint"""
    try:
        data_dir = os.path.abspath(current_app.config['DATA_DIR'])
        # the data dir is created on first write, so check its parent until then
        target = data_dir if os.path.isdir(data_dir) else os.path.dirname(data_dir)
        writable = os.access(target, os.W_OK)
        health_info = {
            'status': 'healthy' if writable else 'error',
            'data_dir_writable': writable,
            'components': registry.names(),
        }
        return jsonify(health_info), 200 if writable else 503
    except Exception as e:
        logger.exception(f'Health check failed: {e}')
        return jsonify({'status': 'error', 'message': str(e)}), 503
