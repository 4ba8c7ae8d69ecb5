from datetime import date

# index = date.weekday() (Senin = 0)
DAY_NAMES = ("Senin", "Selasa", "Rabu", "Kamis", "Jumat", "Sabtu", "Minggu")
MONTH_NAMES = (
    "Januari", "Februari", "Maret", "April", "Mei", "Juni",
    "Juli", "Agustus", "September", "Oktober", "November", "Desember",
)


def day_name(d: date) -> str:
    return DAY_NAMES[d.weekday()]


def month_name(month: int) -> str:
    return MONTH_NAMES[month - 1]


def format_date(d: date) -> str:
    """Contoh: Senin, 17 Agustus 2026"""
    return f"{day_name(d)}, {d.day} {month_name(d.month)} {d.year}"


def format_date_range(start: date, end: date) -> str:
    if start == end:
        return format_date(start)
    return f"{format_date(start)} – {format_date(end)}"


def describe_opportunity(op) -> dict:
    return {
        "title": op.title,
        "holiday": op.holiday_name,
        "period": format_date_range(op.start_date, op.end_date),
        "duration": f"{op.duration_days} hari",
        "suggestion": op.leave_suggestion or "",
    }
