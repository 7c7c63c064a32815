"""
Sheet layouts and the row mapper
One sheet per reportType; the header order here is the column order of every row
"""
from typing import Any, Dict, List, Optional, Tuple

DEFAULT_LAYOUT = ('Kayıtlar', ['Zaman Damgası', 'Ekip'])

SHEET_LAYOUTS: Dict[str, Tuple[str, List[str]]] = {
    'problem': ('Sorunlar', [
        'Zaman Damgası', 'Ekip', 'Hizmet No', 'Saha', 'Kutu', 'Sorun', 'Açıklama', 'Konum', 'Foto',
    ]),
    'damage_report': ('Hasar Tespitleri', [
        'Zaman Damgası', 'Ekip', 'Proje ID', 'Hasar Yapan', 'TC/Vergi', 'İletişim', 'Adres',
        'Tarih/Saat', 'Yer', 'Oluş Şekli', 'Miktar', 'Abone', 'Düzenleyen', 'Ünvan', 'Tanık',
        'Güvenlik', 'İhbar', 'Malzeme', 'Konum', 'Foto',
    ]),
    'inventory': ('Envanter Kayıtları', [
        'Zaman Damgası', 'Ekip', 'İşlem', 'Seri No', 'Hizmet No', 'Tip',
    ]),
    'job_completion': ('İş Tamamlamalar', [
        'Zaman Damgası', 'Ekip', 'Hizmet No', 'Tip', 'Adet',
    ]),
    'vehicle_log': ('Araç Kayıtları', [
        'Zaman Damgası', 'Ekip', 'Plaka', 'KM',
    ]),
    'modem_setup': ('Modem Kurulumlar', [
        'Zaman Damgası', 'Ekip', 'Hizmet No', 'Modem', 'Notlar',
    ]),
    'port_change': ('Port Değişimleri', [
        'Zaman Damgası', 'Ekip', 'Hizmet No', 'Port', 'Devre', 'Notlar',
    ]),
    'improvement': ('İyileştirmeler', [
        'Zaman Damgası', 'Ekip', 'Yer', 'Tarih', 'Kablo', 'Menhol', 'Direk', 'Donanım', 'Kutu',
        'Puan', 'Konum', 'Foto',
    ]),
}


def layout_for(report_type: Optional[str]) -> Tuple[str, List[str]]:
    return SHEET_LAYOUTS.get(report_type or '', DEFAULT_LAYOUT)


def format_location(location: Any) -> str:
    """`lat,lng` for a location object, `-` when absent"""
    if not isinstance(location, dict):
        return '-'
    lat, lng = location.get('lat'), location.get('lng')
    if lat is None or lng is None:
        return '-'
    return f'{_coordinate(lat)},{_coordinate(lng)}'


def _coordinate(value):
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _join(data, first, second, sep):
    return f"{data.get(first) or ''}{sep}{data.get(second) or ''}"


def build_row(report_type: str, data: Dict[str, Any], timestamp: str,
              location_str: str, photo_cell: str) -> List[Any]:
    """Map a submitted record onto the columns of its sheet"""
    row = [timestamp, data.get('ekipKodu') or '-']
    get = data.get

    if report_type == 'problem':
        row += [get('hizmetNo'), get('saha'), get('kutu'), get('sorunTipi'), get('aciklama'),
                location_str, photo_cell]
    elif report_type == 'damage_report':
        row += [get('projeId'), get('hasarYapanAdSoyad'), _join(data, 'tcKimlik', 'vergiNo', '/'),
                get('telNo'), get('hasarYapanAdres'), _join(data, 'hasarTarihi', 'hasarSaati', ' '),
                get('hasarYeri'), get('hasarOlusSekli'), get('tesisCinsiMiktari'),
                get('etkilenenAboneSayisi'), get('duzenleyenPersonel'), get('duzenleyenUnvan'),
                get('tanikBilgileri'), get('guvenlikGorevlisi'), get('ihbarEden'),
                get('kullanilanMalzemeler'), location_str, photo_cell]
    elif report_type == 'inventory':
        row += [get('actionType'), get('serialNumber'), get('hizmetNo') or '-', get('deviceType')]
    elif report_type == 'job_completion':
        row += [get('hizmetNo'), get('isTipi'), get('isAdedi')]
    elif report_type == 'vehicle_log':
        row += [get('plaka'), get('kilometre')]
    elif report_type == 'modem_setup':
        row += [get('hizmetNo'), get('modemTipi'), get('aciklama')]
    elif report_type == 'port_change':
        row += [get('hizmetNo'), get('yeniPort'), get('yeniDevre'), get('aciklama')]
    elif report_type == 'improvement':
        row += [get('yerlesimAdi'), get('bakimTarihi'), get('kabloDurumu'), get('menholDurumu'),
                get('direkDurumu'), get('direkDonanimDurumu'), get('kutuKabinDurumu'),
                get('takdirPuani'), location_str, photo_cell]
    return row
