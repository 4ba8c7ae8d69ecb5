import logging
from datetime import date

from fastapi import FastAPI, Query

from core.formatting import format_date_range
from core.holiday import YEAR_RANGE, holidays_in_year
from core.holiday_source import fetch_holidays
from core.inspiration import pick_inspiration
from core.long_weekend import analyze, analyze_all_policies
from core.workweek import sector_policy

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Liburku API")

MIN_YEAR = YEAR_RANGE.start
MAX_YEAR = YEAR_RANGE.stop - 1


def _year_query():
    return Query(default=None, ge=MIN_YEAR, le=MAX_YEAR)


def _opportunity_dict(op):
    data = op.to_dict()
    data["period"] = format_date_range(op.start_date, op.end_date)
    return data


def _long_weekends(year, saturday_workday, include_cuti):
    holidays = fetch_holidays(year)
    today = date.today()

    if saturday_workday is None:
        return analyze_all_policies(holidays, year, include_collective_leave=include_cuti, today=today)

    policy = sector_policy(include_cuti, saturday_workday)
    return analyze(holidays, year, policy, today=today)


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/holidays")
def holidays(year: int | None = _year_query(), include_cuti: bool = True):
    year = year or date.today().year
    records = holidays_in_year(fetch_holidays(year), year, include_cuti)
    return {
        "year": year,
        "holidays": [
            {
                "date": h.date.isoformat(),
                "description": h.description,
                "is_collective_leave": h.is_collective_leave,
            }
            for h in records
        ],
    }


@app.get("/long-weekends")
def long_weekends(
    year: int | None = _year_query(),
    saturday_workday: bool | None = None,
    include_cuti: bool = True,
):
    year = year or date.today().year
    result = _long_weekends(year, saturday_workday, include_cuti)
    logger.info("long-weekends year=%s: %d opportunities", year, len(result))
    return {
        "year": year,
        "long_weekends": [_opportunity_dict(op) for op in result],
    }


@app.get("/inspiration")
def inspiration(year: int | None = _year_query(), include_cuti: bool = True):
    year = year or date.today().year
    pick = pick_inspiration(_long_weekends(year, None, include_cuti))
    if pick is None:
        return {"weekend": None, "theme": None}

    data = pick.to_dict()
    data["weekend"] = _opportunity_dict(pick.weekend)
    return data
