"""
Sheet endpoint forwarder
Posts a record to the crew's configured sheet URL and reports the outcome
"""
import json
import logging

import requests

logger = logging.getLogger(__name__)


class SheetForwarder:
    """Sends records to a sheet endpoint"""

    def __init__(self, timeout=10):
        self.timeout = timeout

    def forward(self, url, record):
        """Post a record and return its resulting status

        Returns:
            'pending' when no URL is configured, 'sent' when the endpoint
            accepted the row, 'error' otherwise
        """
        if not url:
            return 'pending'

        # the scripting endpoint reads the raw body, so send JSON as text/plain
        body = json.dumps(record, ensure_ascii=False).encode('utf-8')
        try:
            response = requests.post(
                url,
                data=body,
                headers={'Content-Type': 'text/plain;charset=utf-8'},
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.warning(f"Forwarding {record.get('reportType')} {record.get('id')} failed: {e}")
            return 'error'

        if response.status_code >= 300:
            logger.warning(f"Sheet endpoint answered HTTP {response.status_code} for {record.get('id')}")
            return 'error'
        if response.text.strip().startswith('Hata'):
            logger.warning(f"Sheet endpoint rejected {record.get('id')}: {response.text.strip()[:200]}")
            return 'error'

        logger.info(f"Forwarded {record.get('reportType')} {record.get('id')}")
        return 'sent'
