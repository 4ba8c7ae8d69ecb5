import logging
import re
from dataclasses import dataclass
from datetime import date, datetime

logger = logging.getLogger(__name__)

YEAR_RANGE = range(2018, 2031)

_DATE_SPLIT = re.compile(r"[-/]")
_TRUE_STRINGS = {"true", "1", "yes", "ya"}
_FALSE_STRINGS = {"false", "0", "no", "tidak", ""}


@dataclass(frozen=True)
class HolidayRecord:
    date: date
    description: str
    is_collective_leave: bool = False


# =========================
# PARSING
# =========================
def parse_holiday_date(value) -> date | None:
    """
    Ubah nilai tanggal dari API menjadi `date`.

    Format yang diterima:
    - 2025-01-01 / 2025-1-1 / 2025/01/01  (tahun di depan)
    - 01-01-2025 / 1/1/2025               (hari di depan)
    Bagian jam (T00:00:00 atau spasi) diabaikan. Tidak ada konversi zona
    waktu, jadi hasilnya sama di mesin mana pun.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip().split("T")[0].split(" ")[0]
    parts = _DATE_SPLIT.split(text)
    if len(parts) != 3 or not all(p.isdigit() for p in parts):
        return None

    if len(parts[0]) == 4:
        year, month, day = parts
    elif len(parts[2]) == 4:
        day, month, year = parts
    else:
        return None

    try:
        return date(int(year), int(month), int(day))
    except (ValueError, OverflowError):
        return None


def _parse_flag(value) -> bool | None:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    return None


def _first_present(entry: dict, *keys):
    for key in keys:
        if key in entry:
            return entry[key]
    return None


# =========================
# NORMALIZE (boundary)
# =========================
def normalize_holidays(raw) -> list[HolidayRecord]:
    """
    Validasi data libur mentah (JSON dari API) menjadi list HolidayRecord.
    Entri yang rusak dibuang, bukan dilempar sebagai error.
    """
    if not isinstance(raw, (list, tuple)):
        return []

    records = []
    for entry in raw:
        if isinstance(entry, HolidayRecord):
            records.append(entry)
            continue

        if not isinstance(entry, dict):
            logger.debug("Skipping non-mapping holiday entry: %r", entry)
            continue

        d = parse_holiday_date(_first_present(entry, "tanggal", "date", "holiday_date"))
        if d is None:
            logger.debug("Skipping holiday with unparsable date: %r", entry)
            continue

        flag = _parse_flag(_first_present(entry, "is_cuti", "is_collective_leave"))
        if flag is None:
            logger.debug("Skipping holiday with invalid cuti flag: %r", entry)
            continue

        description = _first_present(entry, "keterangan", "description")
        records.append(HolidayRecord(
            date=d,
            description=str(description).strip() if description is not None else "",
            is_collective_leave=flag,
        ))

    # sorted() stabil: urutan input dipertahankan untuk tanggal yang sama
    return sorted(records, key=lambda r: r.date)


# =========================
# FILTER & LOOKUP
# =========================
def holidays_in_year(holidays, year: int, include_collective_leave: bool = True) -> list[HolidayRecord]:
    return [
        h for h in holidays
        if h.date.year == year
        and (include_collective_leave or not h.is_collective_leave)
    ]


def canonical_holiday_names(holidays) -> dict[date, str]:
    """
    Satu nama per tanggal. Libur nasional menang atas cuti bersama;
    antar libur nasional di tanggal yang sama, yang pertama dipakai.
    """
    names = {}
    statutory = set()

    for h in holidays:
        if h.date in statutory:
            continue
        if not h.is_collective_leave:
            names[h.date] = h.description
            statutory.add(h.date)
        elif h.date not in names:
            names[h.date] = h.description

    return names


def holidays_by_month(holidays, year: int) -> dict[int, list[HolidayRecord]]:
    months = {m: [] for m in range(1, 13)}
    for h in sorted(holidays_in_year(holidays, year), key=lambda r: r.date):
        months[h.date.month].append(h)
    return months
