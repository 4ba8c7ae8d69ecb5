import requests
import streamlit as st
from datetime import date
from core.holiday import YEAR_RANGE
from core.workweek import FIVE_DAY_WEEK, SIX_DAY_WEEK, civil_servant_policy, private_sector_policy
from ui.header import page_header
from utils.api import api_get

st.set_page_config(page_title="Liburku", layout="wide")

page_header("Liburku")

# ==========================
# FILTER
# ==========================
WEEK_ALL = "Semua kemungkinan"

years = list(YEAR_RANGE)
this_year = date.today().year

col1, col2, col3 = st.columns([1, 2, 2])

with col1:
    year = st.selectbox(
        "Tahun",
        years,
        index=years.index(this_year) if this_year in years else len(years) - 1
    )

with col2:
    sector = st.radio(
        "Sektor",
        [civil_servant_policy(), private_sector_policy()],
        format_func=lambda p: p.sector_label
    )

with col3:
    week = st.radio(
        "Hari kerja",
        [None, FIVE_DAY_WEEK, SIX_DAY_WEEK],
        format_func=lambda p: WEEK_ALL if p is None else p.label
    )

params = {
    "year": year,
    "include_cuti": sector.include_collective_leave,
}
if week is not None:
    params["saturday_workday"] = week.saturday_is_workday

# ==========================
# LONG WEEKENDS
# ==========================
st.subheader(f"✈️ Perencana Libur Panjang {year}")

try:
    r = api_get("/long-weekends", params=params)
    r.raise_for_status()
    long_weekends = r.json().get("long_weekends", [])
except requests.RequestException:
    st.error("Tidak dapat mengambil data hari libur. Silakan coba lagi nanti.")
    st.stop()

if not long_weekends:
    st.info(f"Tidak ada potensi libur panjang di sisa tahun {year}.")
else:
    for w in long_weekends:
        with st.container(border=True):
            c1, c2 = st.columns([1, 6])

            with c1:
                st.metric("Hari", w["duration_days"])

            with c2:
                st.markdown(f"**{w['title']}**")
                st.caption(w["holiday_name"] or "-")
                st.markdown(f"🗓️ {w['period']}")
                if w["leave_suggestion"]:
                    st.warning(f"Saran: {w['leave_suggestion']}")

# ==========================
# INSTANT INSPIRATION
# ==========================
st.divider()
st.subheader("🪄 Inspirasi Instan")

if st.button("Kejutkan Saya!", disabled=not long_weekends):
    try:
        r = api_get(
            "/inspiration",
            params={"year": year, "include_cuti": params["include_cuti"]}
        )
    except requests.RequestException:
        st.error("Gagal menghubungi server. Silakan coba lagi nanti.")
        st.stop()

    if r.status_code == 200 and r.json().get("weekend"):
        pick = r.json()
        w = pick["weekend"]
        st.success(f"Tema **{pick['theme']}** untuk {w['holiday_name'] or w['title']}")
        st.markdown(f"🗓️ {w['period']} ({w['duration_days']} hari)")
    else:
        st.error(f"Tidak ada potensi libur panjang di sisa tahun {year}.")
