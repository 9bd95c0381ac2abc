"""RetailIQ Streamlit Frontend — ask a business question, see SQL, data, insights and a chart."""

import streamlit as st
import requests

from components import api_url, badge, chart_color, render_chart

st.set_page_config(
    page_title="RetailIQ — Retail Insights",
    page_icon="📊",
    layout="wide",
)

SAMPLE_QUESTIONS = [
    "What are total sales by region?",
    "Which product category brings in the most revenue?",
    "What is the profit margin of each product?",
    "How many orders has each customer placed?",
]


def api(method: str, path: str, silent: bool = False, **kwargs) -> dict | None:
    """Call the FastAPI backend."""
    try:
        if method == "GET":
            r = requests.get(api_url(path), timeout=60)
        else:
            r = requests.post(api_url(path), timeout=60, **kwargs)
    except requests.ConnectionError:
        if not silent:
            st.error("Could not connect to backend. Start it with: `python -m retailiq.main`")
        return None
    except requests.Timeout:
        if not silent:
            st.error("Backend request timed out.")
        return None

    if r.status_code >= 400:
        if not silent:
            try:
                body = r.json()
            except ValueError:
                body = {"error": r.text[:200]}
            st.error(body.get("error", f"Backend returned {r.status_code}"))
            if body.get("details"):
                with st.expander("Details"):
                    st.code(body["details"])
        return None
    return r.json()


def render_sidebar():
    st.sidebar.markdown("## 📊 RetailIQ")
    st.sidebar.caption("Retail insights from plain-English questions")
    st.sidebar.divider()

    health = api("GET", "/api/health", silent=True)
    if health:
        st.sidebar.success(f"Backend online · database {health.get('database')} · AI {health.get('ai')}")
    else:
        st.sidebar.error("Backend offline. Start: python -m retailiq.main")

    st.sidebar.divider()
    st.sidebar.markdown("**Try asking**")
    for q in SAMPLE_QUESTIONS:
        if st.sidebar.button(q, use_container_width=True):
            st.session_state["question"] = q


def page_analyze():
    st.title("Ask your retail data")

    question = st.text_input(
        "Business question:",
        value=st.session_state.get("question", ""),
        placeholder="e.g. What are total sales by region?",
    )
    if st.button("🔎 Analyze", type="primary", disabled=not question):
        with st.spinner("Analyzing your question..."):
            result = api("POST", "/api/analyze", json={"question": question})
        if result is not None:
            st.session_state["result"] = result

    result = st.session_state.get("result")
    if not result:
        return

    st.divider()

    st.markdown("### 💡 Insights")
    with st.container(border=True):
        st.markdown(result.get("insights") or "No insights available.")

    data = result.get("data") or []
    chart_type = result.get("chartType")
    if data:
        st.markdown(f"### 📈 Chart {badge(chart_type or 'bar', chart_color(chart_type))}", unsafe_allow_html=True)
        if not render_chart(data, chart_type, title=question):
            st.caption("Result has no numeric column to plot.")
        st.markdown("### 🧾 Data")
        st.dataframe(data, use_container_width=True)

    sql = result.get("sql")
    if sql:
        with st.expander("🔧 SQL Query Used"):
            st.code(sql, language="sql")


def main():
    render_sidebar()
    page_analyze()


if __name__ == "__main__":
    main()
