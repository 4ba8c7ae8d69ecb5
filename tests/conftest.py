"""
Pytest configuration and fixtures for Liburku tests.

Dates below are chosen for their weekday in 2026:
1 Jan = Thursday, 17 Aug = Monday, 25 Dec = Friday.
"""
from datetime import date

import pytest

from core.holiday import HolidayRecord


TODAY = date(2026, 1, 1)


# =============================================================================
# Factory Helpers
# =============================================================================

def make_holiday(d: date, description: str = "Hari Libur", cuti: bool = False) -> HolidayRecord:
    """Create a HolidayRecord with sensible defaults."""
    return HolidayRecord(date=d, description=description, is_collective_leave=cuti)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def holiday_payload_2026() -> list[dict]:
    """Raw payload in the shape returned by dayoffapi (unpadded dates, is_cuti)."""
    return [
        {"tanggal": "2026-1-1", "keterangan": "Tahun Baru Masehi", "is_cuti": False},
        {"tanggal": "2026-1-16", "keterangan": "Isra Mikraj", "is_cuti": False},
        {"tanggal": "2026-2-16", "keterangan": "Cuti Bersama Imlek", "is_cuti": True},
        {"tanggal": "2026-2-17", "keterangan": "Tahun Baru Imlek", "is_cuti": False},
        {"tanggal": "2026-3-18", "keterangan": "Cuti Bersama Nyepi", "is_cuti": True},
        {"tanggal": "2026-3-19", "keterangan": "Hari Suci Nyepi", "is_cuti": False},
        {"tanggal": "2026-3-20", "keterangan": "Idul Fitri", "is_cuti": False},
        {"tanggal": "2026-3-21", "keterangan": "Idul Fitri", "is_cuti": False},
        {"tanggal": "2026-3-23", "keterangan": "Cuti Bersama Idul Fitri", "is_cuti": True},
        {"tanggal": "2026-3-24", "keterangan": "Cuti Bersama Idul Fitri", "is_cuti": True},
        {"tanggal": "2026-4-3", "keterangan": "Wafat Yesus Kristus", "is_cuti": False},
        {"tanggal": "2026-5-1", "keterangan": "Hari Buruh", "is_cuti": False},
        {"tanggal": "2026-5-14", "keterangan": "Kenaikan Yesus Kristus", "is_cuti": False},
        {"tanggal": "2026-5-15", "keterangan": "Cuti Bersama Kenaikan", "is_cuti": True},
        {"tanggal": "2026-5-27", "keterangan": "Idul Adha", "is_cuti": False},
        {"tanggal": "2026-5-31", "keterangan": "Waisak", "is_cuti": False},
        {"tanggal": "2026-6-1", "keterangan": "Hari Lahir Pancasila", "is_cuti": False},
        {"tanggal": "2026-6-16", "keterangan": "Tahun Baru Islam", "is_cuti": False},
        {"tanggal": "2026-8-17", "keterangan": "Hari Kemerdekaan", "is_cuti": False},
        {"tanggal": "2026-8-25", "keterangan": "Maulid Nabi", "is_cuti": False},
        {"tanggal": "2026-12-24", "keterangan": "Cuti Bersama Natal", "is_cuti": True},
        {"tanggal": "2026-12-25", "keterangan": "Hari Raya Natal", "is_cuti": False},
    ]
