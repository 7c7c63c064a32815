"""
Photo storage for spreadsheet rows
Saves data-URL photos to the photo folder and returns the cell text for the row
"""
import base64
import logging
import os
from datetime import datetime

from werkzeug.utils import secure_filename

logger = logging.getLogger(__name__)

FALLBACK_PREFIX = 'DRIVE_IZIN_YOK_VERI: '


class PhotoStorage:
    """Writes report photos into a folder served under /photos"""

    def __init__(self, photo_dir, public_base_url, fallback_limit=30000):
        self.photo_dir = photo_dir
        self.public_base_url = public_base_url.rstrip('/')
        self.fallback_limit = fallback_limit

    def file_name(self, report_type, data, now):
        stem = str(data.get('hizmetNo') or '').strip() or str(int(now.timestamp() * 1000))
        return secure_filename(f'{report_type}_{stem}.jpg') or f'{report_type}.jpg'

    def public_url(self, filename):
        return f'{self.public_base_url}/photos/{filename}'

    def store(self, report_type, data, now=None):
        """Store the record's photo and return the cell text

        Returns '' when there is no data-URL photo, an =IMAGE() formula when
        the file was written, and the truncated data URL behind
        FALLBACK_PREFIX when it could not be written.
        """
        photo = data.get('photo')
        if not isinstance(photo, str) or 'base64' not in photo:
            return ''

        now = now or datetime.now()
        try:
            payload = photo.split(',', 1)[1]
            content = base64.b64decode(payload)
            filename = self.file_name(report_type, data, now)
            os.makedirs(self.photo_dir, exist_ok=True)
            with open(os.path.join(self.photo_dir, filename), 'wb') as f:
                f.write(content)
        except (OSError, IndexError, ValueError) as e:
            logger.warning(f'Photo for {report_type} kept inline, storage failed: {e}')
            return FALLBACK_PREFIX + photo[:self.fallback_limit]

        logger.info(f'Stored photo {filename}')
        return f'=IMAGE("{self.public_url(filename)}")'
