"""
Spreadsheet store
Appends submitted records as rows of an .xlsx workbook and reads them back
for the manager dashboard
"""
import logging
import os
import threading
from datetime import datetime, timedelta, timezone

from openpyxl import Workbook, load_workbook
from openpyxl.styles import Font, PatternFill

from saharapor.components import register_component
from .layouts import build_row, format_location, layout_for
from .photo_storage import PhotoStorage

logger = logging.getLogger(__name__)

HEADER_FILL = PatternFill(fill_type='solid', start_color='E2E8F0', end_color='E2E8F0')
HEADER_FONT = Font(bold=True)
IMAGE_ROW_HEIGHT = 100


@register_component('sheet_backend')
class SheetStore:
    """Workbook-backed store with one sheet per report type"""

    def __init__(self, workbook_path, photo_storage: PhotoStorage, tz_offset_hours=3):
        self.workbook_path = workbook_path
        self.photo_storage = photo_storage
        self.tz = timezone(timedelta(hours=tz_offset_hours))
        self._lock = threading.Lock()
        self._workbook = None

    def _load(self):
        if self._workbook is None:
            if os.path.exists(self.workbook_path):
                self._workbook = load_workbook(self.workbook_path)
            else:
                self._workbook = Workbook()
                # drop the default sheet, sheets are created per report type
                self._workbook.remove(self._workbook.active)
        return self._workbook

    def _save(self):
        directory = os.path.dirname(self.workbook_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        self._workbook.save(self.workbook_path)

    def _get_or_create_sheet(self, workbook, sheet_name, headers):
        if sheet_name in workbook.sheetnames:
            return workbook[sheet_name]
        sheet = workbook.create_sheet(sheet_name)
        sheet.append(headers)
        for cell in sheet[1]:
            cell.font = HEADER_FONT
            cell.fill = HEADER_FILL
        sheet.freeze_panes = 'A2'
        logger.info(f'Created sheet {sheet_name}')
        return sheet

    def now(self):
        return datetime.now(self.tz)

    def append(self, data, now=None):
        """Append one record as a row of its sheet

        Returns:
            (sheet name, appended row)
        """
        if not isinstance(data, dict):
            raise ValueError('Kayıt bir JSON nesnesi olmalı')

        now = now or self.now()
        report_type = data.get('reportType') or 'generic'
        sheet_name, headers = layout_for(report_type)
        timestamp = now.strftime('%d.%m.%Y %H:%M:%S')
        location_str = format_location(data.get('location'))
        photo_cell = self.photo_storage.store(report_type, data, now)
        row = build_row(report_type, data, timestamp, location_str, photo_cell)

        with self._lock:
            try:
                workbook = self._load()
                sheet = self._get_or_create_sheet(workbook, sheet_name, headers)
                sheet.append(row)
                if photo_cell.startswith('='):
                    sheet.row_dimensions[sheet.max_row].height = IMAGE_ROW_HEIGHT
                self._save()
            except Exception:
                # a rejected row may have left cells behind, reload from disk next time
                self._workbook = None
                raise

        logger.info(f"Appended {report_type} row for {data.get('ekipKodu') or '-'} to {sheet_name}")
        return sheet_name, row

    def read_all(self):
        """All sheets as {sheet name: [ {header: value}, ... ]}"""
        result = {}
        with self._lock:
            if self._workbook is None and not os.path.exists(self.workbook_path):
                return result
            workbook = self._load()
            for sheet in workbook.worksheets:
                rows = list(sheet.iter_rows(values_only=True))
                if len(rows) > 1:
                    headers = rows[0]
                    result[sheet.title] = [
                        {str(h): _json_value(row[i] if i < len(row) else None)
                         for i, h in enumerate(headers) if h is not None}
                        for row in rows[1:]
                    ]
                else:
                    result[sheet.title] = []
        return result


def _json_value(value):
    if isinstance(value, datetime):
        return value.isoformat()
    return value
