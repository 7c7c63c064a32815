"""
Submission Business Logic
"""
import logging

from saharapor.components import register_component
from saharapor.models.reports import STATE_KEYS, build_report, parse_turkish_timestamp
from .photos import compress_photo

logger = logging.getLogger(__name__)

# problem photos are shrunk before leaving the server
COMPRESSED_PHOTO_TYPES = {'problem'}


@register_component('submissions')
class SubmissionService:
    """Service for building, forwarding and keeping crew records"""

    def __init__(self, crew_store, forwarder, photo_max_width=400, photo_quality=50):
        self.crew_store = crew_store
        self.forwarder = forwarder
        self.photo_max_width = photo_max_width
        self.photo_quality = photo_quality

    def submit(self, ekip, report_type, data):
        """Validate, forward and store one record

        Raises:
            ReportValidationError: if the form data is invalid
        """
        record = build_report(report_type, data, ekip)
        if record.get('photo') and report_type in COMPRESSED_PHOTO_TYPES:
            record['photo'] = compress_photo(
                record['photo'], max_width=self.photo_max_width, quality=self.photo_quality)

        sheet_url = self.crew_store.get_sheet_url(ekip)
        record['status'] = self.forwarder.forward(sheet_url, record)
        self.crew_store.add_record(ekip, record)
        logger.info(f"Crew {ekip} submitted {report_type} {record['id']} ({record['status']})")
        return record

    def job_summary(self, ekip):
        """ARIZA / TESİS completion counts for the crew"""
        completions = self.crew_store.load(ekip)[STATE_KEYS['job_completion']]
        ariza = sum(int(jc.get('isAdedi') or 0) for jc in completions if jc.get('isTipi') == 'ARIZA')
        tesis = sum(int(jc.get('isAdedi') or 0) for jc in completions if jc.get('isTipi') == 'TESİS')
        return {'ariza': ariza, 'tesis': tesis, 'total': ariza + tesis}

    def history(self, ekip, include_all=False):
        """Problem reports newest first, or every record when include_all is set"""
        state = self.crew_store.load(ekip)
        if not include_all:
            return list(state[STATE_KEYS['problem']])

        records = []
        for key in STATE_KEYS.values():
            records.extend(state[key])
        # lists are already newest first, the stable sort keeps that order for equal stamps
        return sorted(records, key=_timestamp_key, reverse=True)


def _timestamp_key(record):
    parsed = parse_turkish_timestamp(record.get('timestamp'))
    return parsed.timestamp() if parsed else 0.0
