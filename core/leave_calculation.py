from datetime import date, timedelta
from core.workweek import WorkWeekPolicy, is_off_day


def calculate_leave_days(start_date: date, end_date: date, off_days, policy: WorkWeekPolicy) -> int:
    """
    Hitung jumlah hari cuti yang harus diambil supaya seluruh rentang libur:
    - hari kerja menurut policy (Senin–Jumat / Senin–Sabtu)
    - BUKAN hari libur
    """
    total_days = 0
    current = start_date

    while current <= end_date:
        if not is_off_day(current, off_days, policy):
            total_days += 1

        current += timedelta(days=1)

    return total_days
