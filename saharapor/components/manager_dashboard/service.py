"""
Manager Dashboard Business Logic
Summaries over the sheet dump returned by GET on the sheet endpoint
"""
import json
import re
from collections import Counter
from datetime import date, datetime

import requests

from saharapor.components import register_component
from saharapor.models.reports import parse_turkish_timestamp

TIMESTAMP_HEADER = 'Zaman Damgası'
TEAM_HEADER = 'Ekip'

IMAGE_FORMULA = re.compile(r'^=IMAGE\("([^"]+)"\)', re.IGNORECASE)
LOCATION_TEXT = re.compile(r'^\s*(-?\d+(?:\.\d+)?)\s*,\s*(-?\d+(?:\.\d+)?)\s*$')


def _rows(data, sheet_name):
    rows = (data or {}).get(sheet_name)
    return rows if isinstance(rows, list) else []


def _number(value):
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0


def compute_stats(data):
    """Headline counters for the overview page"""
    total_jobs = sum(_number(row.get('Adet')) for row in _rows(data, 'İş Tamamlamalar')
                     if isinstance(row, dict))
    return {
        'totalProblems': len(_rows(data, 'Sorunlar')),
        'totalDamage': len(_rows(data, 'Hasar Tespitleri')),
        'totalJobs': int(total_jobs) if float(total_jobs).is_integer() else total_jobs,
        'totalInventory': len(_rows(data, 'Envanter Kayıtları')),
        'activeVehicles': len(_rows(data, 'Araç Kayıtları')),
    }


def team_stats(data, limit=10):
    """(team, row count) across all sheets, busiest first"""
    counts = Counter()
    for rows in (data or {}).values():
        if not isinstance(rows, list):
            continue
        for row in rows:
            team = row.get(TEAM_HEADER) if isinstance(row, dict) else None
            if team:
                counts[str(team)] += 1
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return ranked[:limit] if limit else ranked


def _activity_key(row):
    parsed = parse_turkish_timestamp(row.get(TIMESTAMP_HEADER))
    return parsed or datetime.min


def recent_activity(data, limit=5):
    """Latest rows from every sheet, tagged with their sheet name in `_cat`"""
    rows = []
    for category, sheet_rows in (data or {}).items():
        if not isinstance(sheet_rows, list):
            continue
        rows.extend(dict(row, _cat=category) for row in sheet_rows if isinstance(row, dict))
    rows.sort(key=_activity_key, reverse=True)
    return rows[:limit]


def filter_rows(rows, term):
    """Rows where any value contains term, case-insensitive"""
    term = (term or '').strip().lower()
    if not term:
        return list(rows)
    return [row for row in rows
            if any(term in str(value).lower() for value in row.values())]


def render_cell(value):
    """Display form of a cell: text, or a typed link for images and coordinates"""
    if value is None:
        return '-'
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (dict, list)):
        try:
            return json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError):
            return '[Hatalı Veri]'

    text = str(value)
    image = IMAGE_FORMULA.match(text)
    if image:
        return {'type': 'image', 'url': image.group(1)}
    if isinstance(value, str) and LOCATION_TEXT.match(text):
        return {'type': 'location', 'label': 'KONUM',
                'url': f'https://www.google.com/maps?q={text.strip()}'}
    return text


def sheet_table(data, sheet_name, term=''):
    """Filtered, rendered rows of one sheet"""
    rows = filter_rows([row for row in _rows(data, sheet_name) if isinstance(row, dict)], term)
    headers = list(rows[0].keys()) if rows else []
    return {
        'name': sheet_name,
        'headers': headers,
        'rows': [{h: render_cell(row.get(h)) for h in headers} for row in rows],
        'total': len(_rows(data, sheet_name)),
        'matched': len(rows),
    }


@register_component('manager_dashboard')
class ManagerDashboardService:
    """Service for reading the sheet dump for managers"""

    def __init__(self, timeout=15):
        self.timeout = timeout

    def fetch_data(self, sheet_url):
        """GET the sheet dump; returns {'data': ...} or {'error': ...}"""
        try:
            response = requests.get(sheet_url, timeout=self.timeout)
            if response.status_code != 200:
                return {'error': f'Sheet endpoint answered HTTP {response.status_code}'}
            data = response.json()
        except requests.exceptions.RequestException as e:
            return {'error': f'Veriler alınamadı: {e}'}
        except ValueError:
            return {'error': 'Sheet endpoint did not return JSON'}

        if not isinstance(data, dict):
            return {'error': 'Sheet endpoint returned an unexpected payload'}
        return {'data': data}

    def overview(self, data):
        return {
            'stats': compute_stats(data),
            'topTeams': [{'team': team, 'count': count} for team, count in team_stats(data, limit=5)],
            'recent': recent_activity(data, limit=5),
            'categories': list(data.keys()),
        }

    def teams(self, data):
        return [{'team': team, 'count': count} for team, count in team_stats(data)]
