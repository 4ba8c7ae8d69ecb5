import logging
import os
from datetime import date

import requests

from core.holiday import HolidayRecord, normalize_holidays

logger = logging.getLogger(__name__)

DAYOFF_API_URL = os.getenv("DAYOFF_API_URL", "https://dayoffapi.vercel.app/api")
DAYOFF_API_TIMEOUT = float(os.getenv("DAYOFF_API_TIMEOUT", "10"))

_session = requests.Session()


def build_params(year: int, month: int | None = None, today: date | None = None) -> dict:
    # API mengembalikan tahun berjalan kalau parameter year kosong
    if today is None:
        today = date.today()

    params = {}
    if year != today.year:
        params["year"] = year
    if month is not None:
        params["month"] = month
    return params


def fetch_holidays(year: int, month: int | None = None, session=None, today: date | None = None) -> list[HolidayRecord]:
    """
    Ambil daftar hari libur dari dayoffapi.

    Kalau request gagal atau data tidak valid, kembalikan list kosong:
    analyzer tetap jalan tanpa hari libur.
    """
    session = session or _session
    params = build_params(year, month, today)

    try:
        r = session.get(DAYOFF_API_URL, params=params, timeout=DAYOFF_API_TIMEOUT)
        r.raise_for_status()
        data = r.json()
    except requests.RequestException as e:
        logger.warning("Gagal mengambil data hari libur %s: %s", year, e)
        return []
    except ValueError as e:
        logger.warning("Response hari libur %s bukan JSON: %s", year, e)
        return []

    if not isinstance(data, list):
        logger.warning("Response hari libur %s bukan list: %r", year, type(data).__name__)
        return []

    holidays = normalize_holidays(data)
    logger.info("Fetched %d holidays for %s (%d dropped)", len(holidays), year, len(data) - len(holidays))
    return holidays
