import requests
import streamlit as st
import pandas as pd
from datetime import date
from core.formatting import day_name, month_name
from core.holiday import YEAR_RANGE, holidays_by_month, normalize_holidays
from core.workweek import get_day_type
from ui.header import page_header
from utils.api import api_get

st.set_page_config(page_title="Kalender Libur", layout="wide")

page_header("Kalender Libur", subtitle="Hari libur nasional dan cuti bersama")

DAY_TYPE_LABEL = {
    "holiday": "🔴 Hari Libur Nasional",
    "cuti_bersama": "🟡 Cuti Bersama",
}

years = list(YEAR_RANGE)
this_year = date.today().year
year = st.selectbox(
    "Tahun",
    years,
    index=years.index(this_year) if this_year in years else len(years) - 1
)

# ======================================================
# FETCH
# ======================================================
try:
    r = api_get("/holidays", params={"year": year})
    r.raise_for_status()
    holidays = normalize_holidays(r.json().get("holidays", []))
except requests.RequestException:
    st.error("Tidak dapat mengambil data hari libur. Silakan coba lagi nanti.")
    st.stop()

if not holidays:
    st.info(f"Belum ada data hari libur untuk tahun {year}.")
    st.stop()

by_date = {}
for h in holidays:
    by_date.setdefault(h.date, []).append(h)

st.markdown(" &nbsp; ".join(DAY_TYPE_LABEL.values()))

# ======================================================
# MONTH GRID
# ======================================================
months = holidays_by_month(holidays, year)
cols = st.columns(3)

for month, records in months.items():
    with cols[(month - 1) % 3]:
        st.markdown(f"#### {month:02d} · {month_name(month)}")

        if not records:
            st.caption("Tidak ada hari libur")
            continue

        df = pd.DataFrame(
            [
                {
                    "Tanggal": r.date.day,
                    "Hari": day_name(r.date),
                    "Keterangan": r.description,
                    "Jenis": DAY_TYPE_LABEL[get_day_type(r.date, by_date)],
                }
                for r in records
            ]
        )
        st.dataframe(df, hide_index=True, width='stretch')
