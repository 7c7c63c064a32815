"""
Spreadsheet endpoint routes
GET /exec dumps every sheet as JSON, POST /exec appends one record.
POST answers are plain text, the way crews' clients expect them.
"""
import json
import logging
import zipfile

from flask import Blueprint, Response, current_app, jsonify, request, send_from_directory
from openpyxl.utils.exceptions import IllegalCharacterError, InvalidFileException

from saharapor.core import get_service

logger = logging.getLogger(__name__)

sheet_backend_bp = Blueprint('sheet_backend', __name__)

SUCCESS_TEXT = 'Başarılı'
NO_DATA_TEXT = 'Hata: Veri Yok'


def _text(body):
    return Response(body, mimetype='text/plain')


@sheet_backend_bp.route('/exec', methods=['GET'])
def sheet_read():
    """Every sheet keyed by name, rows keyed by header"""
    store = get_service('sheet_store')
    return jsonify(store.read_all())


@sheet_backend_bp.route('/exec', methods=['POST'])
def sheet_append():
    """Append a record posted as a JSON body of any content type"""
    raw = request.get_data(as_text=True)
    if not raw or not raw.strip():
        return _text(NO_DATA_TEXT)

    try:
        data = json.loads(raw)
        store = get_service('sheet_store')
        store.append(data)
    except json.JSONDecodeError as e:
        logger.warning(f'Rejected non-JSON body: {e}')
        return _text(f'Hata: {e}')
    except (ValueError, OSError, IllegalCharacterError) as e:
        logger.error(f'Could not append row: {e}')
        return _text(f'Hata: {e}')
    except (zipfile.BadZipFile, KeyError, InvalidFileException) as e:
        logger.error(f'Workbook {current_app.config["WORKBOOK_PATH"]} is unreadable: {e}')
        return _text(f'Hata: {e}')

    return _text(SUCCESS_TEXT)


@sheet_backend_bp.route('/photos/<path:filename>')
def serve_photo(filename):
    """Serve stored report photos"""
    return send_from_directory(current_app.config['PHOTO_DIR'], filename)
