"""
Long weekend analyzer.

Dari daftar hari libur satu tahun dan kebijakan hari kerja, cari:
- libur panjang yang sudah pasti (tanpa cuti), dan
- potensi libur panjang dengan 1 hari cuti (Harpitnas).

Fungsi di sini murni: tidak ada I/O, tidak ada state global.
"""
import logging
from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum

from core.formatting import day_name
from core.holiday import canonical_holiday_names, holidays_in_year, normalize_holidays
from core.leave_calculation import calculate_leave_days
from core.workweek import WorkWeekPolicy, is_off_day, sector_policy

logger = logging.getLogger(__name__)

TUESDAY = 1
THURSDAY = 3
FRIDAY = 4

ONE_DAY = timedelta(days=1)


class Category(Enum):
    CONFIRMED = "confirmed"
    POTENTIAL = "potential"

    @property
    def title(self) -> str:
        if self is Category.CONFIRMED:
            return "Libur Panjang Akhir Pekan"
        return "Potensi Libur Panjang"


@dataclass(frozen=True)
class LongWeekendOpportunity:
    category: Category
    start_date: date
    end_date: date
    holiday_names: tuple = ()
    leave_suggestion: str | None = None
    leave_date: date | None = None
    leave_days: int = 0

    @property
    def duration_days(self) -> int:
        return (self.end_date - self.start_date).days + 1

    @property
    def holiday_name(self) -> str:
        return ", ".join(self.holiday_names)

    @property
    def title(self) -> str:
        return self.category.title

    @property
    def dedupe_key(self) -> tuple:
        return (self.start_date, self.end_date, self.leave_suggestion)

    def to_dict(self) -> dict:
        return {
            "category": self.category.value,
            "title": self.title,
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "duration_days": self.duration_days,
            "holiday_names": list(self.holiday_names),
            "holiday_name": self.holiday_name,
            "leave_suggestion": self.leave_suggestion,
            "leave_date": self.leave_date.isoformat() if self.leave_date else None,
            "leave_days": self.leave_days,
        }


def leave_suggestion_for(d: date) -> str:
    return f"Ambil cuti pada hari {day_name(d)}"


# =========================
# HELPERS
# =========================
def _expand_span(anchor: date, off_days, policy: WorkWeekPolicy) -> tuple[date, date]:
    start = anchor
    while is_off_day(start - ONE_DAY, off_days, policy):
        start -= ONE_DAY

    end = anchor
    while is_off_day(end + ONE_DAY, off_days, policy):
        end += ONE_DAY

    return start, end


def _names_between(names: dict, start: date, end: date) -> tuple:
    return tuple(names[d] for d in sorted(names) if start <= d <= end)


def _bridge_span(d: date, off_days, policy: WorkWeekPolicy):
    """
    Return (start, end, leave_date) untuk pola Harpitnas, atau None.

    Hanya tiga pola:
    - Selasa libur, Senin kerja        -> cuti Senin
    - Kamis libur, Jumat kerja         -> cuti Jumat (hanya 5 hari kerja)
    - Jumat libur, Sabtu kerja         -> cuti Sabtu (hanya 6 hari kerja)
    """
    weekday = d.weekday()

    if weekday == TUESDAY:
        monday = d - ONE_DAY
        if is_off_day(monday, off_days, policy):
            return None
        back = 2 if policy.saturday_is_workday else 3
        return d - timedelta(days=back), d, monday

    if weekday == THURSDAY and not policy.saturday_is_workday:
        friday = d + ONE_DAY
        if is_off_day(friday, off_days, policy):
            return None
        return d, d + timedelta(days=3), friday

    if weekday == FRIDAY and policy.saturday_is_workday:
        saturday = d + ONE_DAY
        if is_off_day(saturday, off_days, policy):
            return None
        return d, d + timedelta(days=2), saturday

    return None


# =========================
# MERGE
# =========================
def merge_opportunities(*groups) -> list[LongWeekendOpportunity]:
    seen = {}
    for group in groups:
        for op in group:
            if op.dedupe_key not in seen:
                seen[op.dedupe_key] = op

    return sorted(seen.values(), key=lambda op: op.start_date)


# =========================
# MAIN LOGIC
# =========================
def analyze(holidays, year: int, policy: WorkWeekPolicy, today: date | None = None) -> list[LongWeekendOpportunity]:
    if today is None:
        today = date.today()

    records = holidays_in_year(
        normalize_holidays(list(holidays or [])),
        year,
        policy.include_collective_leave,
    )
    off_days = {h.date for h in records}
    names = canonical_holiday_names(records)
    upcoming = sorted(d for d in off_days if d >= today)

    # =====================================================
    # PASS 1: libur panjang pasti (tanpa cuti)
    # =====================================================
    confirmed = []
    absorbed = set()

    for d in upcoming:
        if d in absorbed:
            continue

        start, end = _expand_span(d, off_days, policy)
        absorbed.update(x for x in off_days if start <= x <= end)

        op = LongWeekendOpportunity(
            category=Category.CONFIRMED,
            start_date=start,
            end_date=end,
            holiday_names=_names_between(names, start, end),
            leave_days=calculate_leave_days(start, end, off_days, policy),
        )
        if op.duration_days >= policy.min_confirmed_days:
            confirmed.append(op)

    # =====================================================
    # PASS 2: potensi libur panjang (Harpitnas, 1 hari cuti)
    # =====================================================
    potential = []

    for d in upcoming:
        span = _bridge_span(d, off_days, policy)
        if span is None:
            continue

        start, end, leave_date = span
        potential.append(LongWeekendOpportunity(
            category=Category.POTENTIAL,
            start_date=start,
            end_date=end,
            holiday_names=_names_between(names, start, end),
            leave_suggestion=leave_suggestion_for(leave_date),
            leave_date=leave_date,
            leave_days=calculate_leave_days(start, end, off_days, policy),
        ))

    result = merge_opportunities(confirmed, potential)
    logger.debug(
        "analyze year=%s policy=%s: %d confirmed, %d potential",
        year, policy, len(confirmed), len(potential),
    )
    return result


def analyze_all_policies(holidays, year: int, include_collective_leave: bool = True,
                         today: date | None = None) -> list[LongWeekendOpportunity]:
    """Jalankan untuk Senin–Jumat dan Senin–Sabtu lalu gabungkan."""
    if today is None:
        today = date.today()

    holidays = list(holidays or [])
    five = sector_policy(include_collective_leave, saturday_is_workday=False)
    six = sector_policy(include_collective_leave, saturday_is_workday=True)

    return merge_opportunities(
        analyze(holidays, year, five, today),
        analyze(holidays, year, six, today),
    )
