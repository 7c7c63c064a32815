"""
Field report record types
Builds and validates the flat records crews submit from the forms
"""
import uuid
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional


class ReportValidationError(ValueError):
    """Raised when submitted form data cannot become a record"""


class SorunTipi(str, Enum):
    GPON_SEVIYE_YOK = 'GPON SEVİYE YOK'
    DISS_MODEM_ARIZASI = 'DISS MODEM ARIZASI'
    HATALI_ADRES = 'HATALI ADRES (SAHA KUTU)'
    HAES_KART_ARIZASI = 'HAES KART ARIZASI'
    SINYAL_YOK = 'Sinyal Yok'
    KABLO_HASARI = 'Kablo Hasarı'
    KUTU_ARIZASI = 'Kutu Arızası'
    KAPASITE_SORUNU = 'Kapasite Sorunu'
    DIGER = 'Diğer'


DURUM_SECENEKLERI = ['İYİ', 'ORTA', 'KÖTÜ', 'YOK', 'ONARILDI']
MODEM_TIPLERI = ['FIBER (GPON)', 'VDSL', 'ADSL', 'HGW', 'DIGER']
INVENTORY_ACTIONS = ['receive', 'install', 'return']
DEVICE_TYPES = ['MODEM', 'GPON', 'DECO', 'STB']
JOB_TYPES = ['ARIZA', 'TESİS']

TEAM_CODE_MIN_LENGTH = 3
TEAM_CODE_MAX_LENGTH = 15
SCORE_MIN, SCORE_MAX = 1, 10

# reportType -> key of the list holding that type in a crew's state
STATE_KEYS = {
    'problem': 'reports',
    'improvement': 'improvementReports',
    'modem_setup': 'modemReports',
    'damage_report': 'damageReports',
    'job_completion': 'jobCompletions',
    'vehicle_log': 'vehicleLogs',
    'port_change': 'portChanges',
    'inventory': 'inventoryLogs',
}

REPORT_TYPES = tuple(STATE_KEYS)

DAMAGE_TEXT_FIELDS = [
    'projeId', 'hasarYapanAdSoyad', 'tcKimlik', 'vergiNo', 'telNo', 'cepTel',
    'hasarYapanAdres', 'hasarYeri', 'hasarOlusSekli', 'tesisCinsiMiktari',
    'etkilenenAboneSayisi', 'duzenleyenPersonel', 'duzenleyenUnvan',
    'tanikBilgileri', 'guvenlikGorevlisi', 'ihbarEden', 'kullanilanMalzemeler',
]

IMPROVEMENT_CONDITION_FIELDS = [
    'kabloDurumu', 'menholDurumu', 'direkDurumu', 'direkDonanimDurumu', 'kutuKabinDurumu',
]


def turkish_timestamp(now: Optional[datetime] = None) -> str:
    """Local timestamp in the tr-TR form the crews read, e.g. 05.03.2025 14:07:09"""
    now = now or datetime.now()
    return now.strftime('%d.%m.%Y %H:%M:%S')


def parse_turkish_timestamp(value: Any) -> Optional[datetime]:
    """Parse `dd.mm.yyyy HH:MM[:SS]` text; returns None when it does not match"""
    if isinstance(value, datetime):
        return value
    text = str(value or '').strip()
    for fmt in ('%d.%m.%Y %H:%M:%S', '%d.%m.%Y %H:%M'):
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def normalize_team_code(raw: Any) -> str:
    """Trim and upper-case a crew code such as `saha17550`"""
    code = str(raw or '').strip().upper()
    if len(code) < TEAM_CODE_MIN_LENGTH:
        raise ReportValidationError(
            f'Ekip kodu en az {TEAM_CODE_MIN_LENGTH} karakter olmalı')
    if len(code) > TEAM_CODE_MAX_LENGTH:
        raise ReportValidationError(
            f'Ekip kodu en fazla {TEAM_CODE_MAX_LENGTH} karakter olabilir')
    return code


def parse_location(value: Any) -> Optional[Dict[str, float]]:
    if value in (None, ''):
        return None
    if not isinstance(value, dict) or 'lat' not in value or 'lng' not in value:
        raise ReportValidationError('Konum {"lat", "lng"} biçiminde olmalı')
    try:
        return {'lat': float(value['lat']), 'lng': float(value['lng'])}
    except (TypeError, ValueError):
        raise ReportValidationError('Konum koordinatları sayı olmalı')


def _text(data, key, default=''):
    value = data.get(key, default)
    if value is None:
        return default
    return str(value).strip()


def _required(data, key):
    value = _text(data, key)
    if not value:
        raise ReportValidationError(f'Zorunlu alan eksik: {key}')
    return value


def _choice(data, key, choices, default):
    value = _text(data, key) or default
    if value not in choices:
        raise ReportValidationError(f'Geçersiz {key}: {value}')
    return value


def _int(data, key, default=None, minimum=None, maximum=None):
    raw = data.get(key, default)
    if raw in (None, ''):
        if default is None:
            raise ReportValidationError(f'Zorunlu alan eksik: {key}')
        raw = default
    try:
        value = int(float(raw))
    except (TypeError, ValueError, OverflowError):
        raise ReportValidationError(f'{key} sayı olmalı')
    if minimum is not None and value < minimum:
        raise ReportValidationError(f'{key} en az {minimum} olmalı')
    if maximum is not None and value > maximum:
        raise ReportValidationError(f'{key} en fazla {maximum} olabilir')
    return value


def _photo(data):
    photo = data.get('photo')
    return photo if isinstance(photo, str) and photo else None


def _problem_fields(data):
    return {
        'hizmetNo': _required(data, 'hizmetNo'),
        'saha': _required(data, 'saha'),
        'kutu': _required(data, 'kutu'),
        'sorunTipi': _choice(data, 'sorunTipi', [t.value for t in SorunTipi],
                             SorunTipi.GPON_SEVIYE_YOK.value),
        'aciklama': _required(data, 'aciklama'),
        'photo': _photo(data),
        'location': parse_location(data.get('location')),
    }


def _improvement_fields(data):
    fields = {
        'yerlesimAdi': _required(data, 'yerlesimAdi'),
        'bakimTarihi': _text(data, 'bakimTarihi') or datetime.now().strftime('%Y-%m-%d'),
    }
    for key in IMPROVEMENT_CONDITION_FIELDS:
        fields[key] = _choice(data, key, DURUM_SECENEKLERI, 'İYİ')
    fields['takdirPuani'] = _int(data, 'takdirPuani', default=5, minimum=SCORE_MIN, maximum=SCORE_MAX)
    fields['photo'] = _photo(data)
    fields['location'] = parse_location(data.get('location'))
    return fields


def _modem_fields(data):
    return {
        'hizmetNo': _required(data, 'hizmetNo'),
        'modemTipi': _choice(data, 'modemTipi', MODEM_TIPLERI, MODEM_TIPLERI[0]),
        'aciklama': _text(data, 'aciklama'),
    }


def _damage_fields(data):
    now = datetime.now()
    fields = {key: _text(data, key) for key in DAMAGE_TEXT_FIELDS}
    for key in ('projeId', 'hasarYapanAdSoyad', 'hasarYeri', 'hasarOlusSekli', 'duzenleyenPersonel'):
        fields[key] = _required(data, key)
    fields['hasarTarihi'] = _text(data, 'hasarTarihi') or now.strftime('%Y-%m-%d')
    fields['hasarSaati'] = _text(data, 'hasarSaati') or now.strftime('%H:%M')
    fields['photo'] = _photo(data)
    fields['location'] = parse_location(data.get('location'))
    return fields


def _job_fields(data):
    return {
        'hizmetNo': _required(data, 'hizmetNo'),
        'isTipi': _choice(data, 'isTipi', JOB_TYPES, 'ARIZA'),
        # every completion counts as a single job
        'isAdedi': 1,
    }


def _vehicle_fields(data):
    return {
        'plaka': _required(data, 'plaka').upper(),
        'kilometre': _int(data, 'kilometre', minimum=0),
    }


def _port_fields(data):
    return {
        'hizmetNo': _required(data, 'hizmetNo'),
        'yeniPort': _text(data, 'yeniPort'),
        'yeniDevre': _text(data, 'yeniDevre'),
        'aciklama': _text(data, 'aciklama'),
    }


def _inventory_fields(data):
    action = _choice(data, 'actionType', INVENTORY_ACTIONS, 'receive')
    fields = {
        'actionType': action,
        'serialNumber': _required(data, 'serialNumber').upper(),
        'deviceType': _choice(data, 'deviceType', DEVICE_TYPES, 'MODEM'),
    }
    if action == 'install':
        fields['hizmetNo'] = _required(data, 'hizmetNo')
    else:
        fields['hizmetNo'] = _text(data, 'hizmetNo')
    return fields


FIELD_BUILDERS = {
    'problem': _problem_fields,
    'improvement': _improvement_fields,
    'modem_setup': _modem_fields,
    'damage_report': _damage_fields,
    'job_completion': _job_fields,
    'vehicle_log': _vehicle_fields,
    'port_change': _port_fields,
    'inventory': _inventory_fields,
}


def build_report(report_type: str, data: Dict[str, Any], ekip_kodu: str,
                 now: Optional[datetime] = None) -> Dict[str, Any]:
    """Validate form data and return a complete record

    Args:
        report_type: One of REPORT_TYPES
        data: Raw form payload
        ekip_kodu: Crew code of the logged-in crew
        now: Override for the record timestamp

    Returns:
        Record dict with id, ekipKodu, timestamp, status and reportType set.
        Status starts as 'pending' until the record is forwarded.
    """
    builder = FIELD_BUILDERS.get(report_type)
    if builder is None:
        raise ReportValidationError(f'Bilinmeyen rapor tipi: {report_type}')
    if not isinstance(data, dict):
        raise ReportValidationError('Form verisi bir nesne olmalı')

    record = {'id': str(uuid.uuid4())}
    record.update(builder(data))
    record['ekipKodu'] = ekip_kodu
    record['timestamp'] = turkish_timestamp(now)
    record['status'] = 'pending'
    record['reportType'] = report_type
    return record


def form_options() -> Dict[str, Any]:
    """Choice lists the crew forms offer"""
    return {
        'sorunTipleri': [t.value for t in SorunTipi],
        'durumSecenekleri': list(DURUM_SECENEKLERI),
        'modemTipleri': list(MODEM_TIPLERI),
        'inventoryActions': list(INVENTORY_ACTIONS),
        'deviceTypes': list(DEVICE_TYPES),
        'isTipleri': list(JOB_TYPES),
        'reportTypes': list(REPORT_TYPES),
    }
