from dataclasses import dataclass
from datetime import date

SATURDAY = 5
SUNDAY = 6


@dataclass(frozen=True)
class WorkWeekPolicy:
    saturday_is_workday: bool = False
    include_collective_leave: bool = True

    @property
    def min_confirmed_days(self) -> int:
        # Minggu + libur Senin saja belum "panjang" kalau Sabtu masuk kerja
        return 2 if self.saturday_is_workday else 3

    @property
    def label(self) -> str:
        return "Senin–Sabtu" if self.saturday_is_workday else "Senin–Jumat"

    @property
    def sector_label(self) -> str:
        if self.include_collective_leave:
            return "🏛️ PNS (cuti bersama ikut libur)"
        return "🏢 Swasta (cuti bersama tidak libur)"


FIVE_DAY_WEEK = WorkWeekPolicy(saturday_is_workday=False)
SIX_DAY_WEEK = WorkWeekPolicy(saturday_is_workday=True)


def private_sector_policy(saturday_is_workday: bool = False) -> WorkWeekPolicy:
    """Swasta: cuti bersama tidak otomatis libur."""
    return WorkWeekPolicy(saturday_is_workday, include_collective_leave=False)


def civil_servant_policy(saturday_is_workday: bool = False) -> WorkWeekPolicy:
    """PNS: cuti bersama ikut libur."""
    return WorkWeekPolicy(saturday_is_workday, include_collective_leave=True)


def sector_policy(include_collective_leave: bool, saturday_is_workday: bool = False) -> WorkWeekPolicy:
    if include_collective_leave:
        return civil_servant_policy(saturday_is_workday)
    return private_sector_policy(saturday_is_workday)


def is_off_day(d: date, off_days, policy: WorkWeekPolicy) -> bool:
    weekday = d.weekday()
    if weekday == SUNDAY:
        return True
    if weekday == SATURDAY and not policy.saturday_is_workday:
        return True
    return d in off_days


def is_workday(d: date, off_days, policy: WorkWeekPolicy) -> bool:
    return not is_off_day(d, off_days, policy)


def get_day_type(d: date, holidays_by_date: dict) -> str:
    """
    Return:
    - 'holiday'
    - 'cuti_bersama'
    - 'sunday'
    - 'saturday'
    - 'weekday'
    """
    records = holidays_by_date.get(d, [])
    if any(not r.is_collective_leave for r in records):
        return "holiday"
    if records:
        return "cuti_bersama"

    if d.weekday() == SUNDAY:
        return "sunday"
    if d.weekday() == SATURDAY:
        return "saturday"

    return "weekday"
