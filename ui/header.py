import streamlit as st
from datetime import date
from core.formatting import format_date

def page_header(title, subtitle="Kalender & Perencana Liburan", icon="📅"):
    col1, col2 = st.columns([7, 3])

    with col1:
        st.markdown(
            f"""
            <div style="
                display: flex;
                align-items: center;
                gap: 14px;
            ">
                <div style="font-size:42px;">{icon}</div>
                <div>
                    <h1 style="margin:0;">{title}</h1>
                    <p style="color:gray; margin:0;">{subtitle}</p>
                </div>
            </div>
            """,
            unsafe_allow_html=True
        )

    with col2:
        st.markdown(
            f"""
            <div style="
                text-align: right;
                padding-top: 18px;
                font-weight: 600;
            ">
                🗓️ {format_date(date.today())}
            </div>
            """,
            unsafe_allow_html=True
        )

    st.divider()
