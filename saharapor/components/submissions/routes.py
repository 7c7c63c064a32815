"""
Submission API Routes
"""
import logging

from flask import Blueprint, jsonify, request

from saharapor.core import get_service
from saharapor.core.auth import crew_required, current_team
from saharapor.models import ReportValidationError, form_options

logger = logging.getLogger(__name__)

submissions_bp = Blueprint('submissions', __name__, url_prefix='/api')


@submissions_bp.route('/reports/<report_type>', methods=['POST'])
@crew_required
def api_submit_report(report_type):
    """Submit one form record of the given reportType"""
    data = request.get_json(silent=True)
    if data is None:
        return jsonify({'error': 'No data received'}), 400

    service = get_service('submissions')
    try:
        record = service.submit(current_team(), report_type, data)
    except ReportValidationError as e:
        return jsonify({'error': str(e)}), 400
    except OSError as e:
        logger.exception(f'Could not store {report_type} record: {e}')
        return jsonify({'error': 'Kayıt saklanamadı'}), 500
    return jsonify(record), 201


@submissions_bp.route('/jobs/summary')
@crew_required
def api_job_summary():
    return jsonify(get_service('submissions').job_summary(current_team()))


@submissions_bp.route('/history')
@crew_required
def api_history():
    """Crew history; ?all=1 includes every record type"""
    include_all = request.args.get('all', '').lower() in ('1', 'true', 'yes')
    records = get_service('submissions').history(current_team(), include_all=include_all)
    return jsonify({'records': records, 'total': len(records)})


@submissions_bp.route('/options')
def api_options():
    """Choice lists for the crew forms"""
    return jsonify(form_options())
