"""
Record types shared by the crew and spreadsheet components
"""
from .reports import (
    ReportValidationError,
    SorunTipi,
    REPORT_TYPES,
    STATE_KEYS,
    build_report,
    normalize_team_code,
    parse_location,
    form_options,
)

__all__ = [
    'ReportValidationError',
    'SorunTipi',
    'REPORT_TYPES',
    'STATE_KEYS',
    'build_report',
    'normalize_team_code',
    'parse_location',
    'form_options',
]
