"""
Per-crew record storage
A JSON document per crew code holds everything the crew has submitted
plus its sheet endpoint address
"""
import json
import logging
import os
import re
import threading
from typing import Any, Dict

from saharapor.models.reports import STATE_KEYS

logger = logging.getLogger(__name__)

_SAFE_NAME = re.compile(r'[^A-Z0-9_-]')


def empty_state() -> Dict[str, Any]:
    state = {key: [] for key in STATE_KEYS.values()}
    state['sheetUrl'] = ''
    return state


class CrewStore:
    """File-backed store of crew state documents"""

    def __init__(self, base_dir):
        self.base_dir = base_dir
        self._lock = threading.RLock()

    def _path(self, ekip):
        name = _SAFE_NAME.sub('_', ekip.upper())
        return os.path.join(self.base_dir, f'{name}.json')

    def load(self, ekip: str) -> Dict[str, Any]:
        """Load a crew state; a missing or unreadable file gives a fresh state"""
        path = self._path(ekip)
        state = empty_state()
        with self._lock:
            if not os.path.exists(path):
                return state
            try:
                with open(path, 'r', encoding='utf-8') as f:
                    saved = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                logger.error(f'Could not read state for crew {ekip}: {e}')
                return state

        if not isinstance(saved, dict):
            logger.error(f'State for crew {ekip} is not an object, starting fresh')
            return state
        for key in STATE_KEYS.values():
            if isinstance(saved.get(key), list):
                state[key] = saved[key]
        state['sheetUrl'] = saved.get('sheetUrl') or ''
        return state

    def save(self, ekip: str, state: Dict[str, Any]) -> None:
        path = self._path(ekip)
        tmp_path = path + '.tmp'
        with self._lock:
            os.makedirs(self.base_dir, exist_ok=True)
            with open(tmp_path, 'w', encoding='utf-8') as f:
                json.dump(state, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, path)

    def add_record(self, ekip: str, record: Dict[str, Any]) -> Dict[str, Any]:
        """Prepend a record to the list matching its reportType"""
        key = STATE_KEYS.get(record.get('reportType'))
        if key is None:
            raise ValueError(f"Unknown reportType: {record.get('reportType')}")
        with self._lock:
            state = self.load(ekip)
            state[key].insert(0, record)
            self.save(ekip, state)
        return record

    def get_sheet_url(self, ekip: str) -> str:
        return self.load(ekip).get('sheetUrl', '')

    def set_sheet_url(self, ekip: str, url: str) -> str:
        with self._lock:
            state = self.load(ekip)
            state['sheetUrl'] = url
            self.save(ekip, state)
        return url
