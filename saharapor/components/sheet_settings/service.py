"""
Sheet Settings Service
"""
from urllib.parse import urlparse

from saharapor.components import register_component


class InvalidSheetUrl(ValueError):
    pass


def validate_sheet_url(raw):
    """Trimmed http(s) URL, or '' to clear the setting"""
    url = str(raw or '').strip()
    if not url:
        return ''
    parsed = urlparse(url)
    if parsed.scheme not in ('http', 'https') or not parsed.netloc:
        raise InvalidSheetUrl('Geçerli bir http(s) adresi girin')
    return url


@register_component('sheet_settings')
class SheetSettingsService:
    """Reads and updates the crew's sheet endpoint address"""

    def __init__(self, crew_store):
        self.crew_store = crew_store

    def get_settings(self, ekip):
        return {'sheetUrl': self.crew_store.get_sheet_url(ekip)}

    def update_sheet_url(self, ekip, raw_url):
        url = validate_sheet_url(raw_url)
        self.crew_store.set_sheet_url(ekip, url)
        return {'sheetUrl': url}
