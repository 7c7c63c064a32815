"""
Photo downscaling for field reports
Keeps data-URL photos small enough to fit a spreadsheet cell when stored inline
"""
import base64
import binascii
import logging

import cv2
import numpy as np

logger = logging.getLogger(__name__)

DATA_URL_PREFIX = 'data:image/jpeg;base64,'


def decode_data_url(data_url):
    """Decode a data URL into a BGR image, None when it is not an image"""
    if not isinstance(data_url, str) or 'base64,' not in data_url:
        return None
    try:
        raw = base64.b64decode(data_url.split(',', 1)[1])
    except (binascii.Error, ValueError):
        return None
    buffer = np.frombuffer(raw, dtype=np.uint8)
    if buffer.size == 0:
        return None
    return cv2.imdecode(buffer, cv2.IMREAD_COLOR)


def compress_photo(data_url, max_width=400, quality=50):
    """Downscale to max_width and re-encode as JPEG

    Photos that cannot be decoded are returned unchanged.
    """
    image = decode_data_url(data_url)
    if image is None:
        logger.debug('Photo is not a decodable image, keeping as is')
        return data_url

    height, width = image.shape[:2]
    if width > max_width:
        new_height = max(1, int(round(height * max_width / width)))
        image = cv2.resize(image, (max_width, new_height), interpolation=cv2.INTER_AREA)

    ok, encoded = cv2.imencode('.jpg', image, [int(cv2.IMWRITE_JPEG_QUALITY), int(quality)])
    if not ok:
        logger.warning('JPEG encoding failed, keeping original photo')
        return data_url
    return DATA_URL_PREFIX + base64.b64encode(encoded.tobytes()).decode('ascii')
