"""Shared styles for the calculator dashboard."""

import streamlit as st

PRIMARY = "rgb(63,185,236)"

SHARED_CSS = """
<style>
@import url('https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700;800&display=swap');

* {
    font-family: 'Inter', -apple-system, BlinkMacSystemFont, sans-serif !important;
}

.stApp {
    background: #f9fafb;
}

#MainMenu, footer {visibility: hidden;}

.main .block-container {
    max-width: 80rem;
    padding: 2rem 2.5rem;
    background: #ffffff;
    border-radius: 0.75rem;
    box-shadow: 0 10px 15px rgba(0, 0, 0, 0.08);
}

/* ===== PAGE HEADERS ===== */
.page-title {
    font-size: 2.25rem;
    font-weight: 800;
    color: #1f2937;
    text-align: center;
    margin-bottom: 0.75rem;
}

.page-title-bar {
    width: 6rem;
    height: 0.25rem;
    margin: 0 auto;
    border-radius: 9999px;
    background: rgb(63,185,236);
}

.page-subtitle {
    font-size: 1rem;
    color: #4b5563;
    text-align: center;
    margin: 1rem 0 2rem 0;
}

.section-title {
    font-size: 1.5rem;
    font-weight: 600;
    color: #2563eb;
    margin: 1rem 0 1.25rem 0;
}

.chart-title {
    font-size: 1.4rem;
    font-weight: 600;
    color: #2563eb;
    text-align: center;
    margin-bottom: 0.75rem;
}

/* ===== COST PANELS ===== */
.cost-panel {
    background: #f9fafb;
    border-radius: 0.75rem;
    padding: 1.25rem 1.5rem;
    box-shadow: 0 1px 3px rgba(0, 0, 0, 0.08);
}

.cost-panel h4 {
    font-size: 1.2rem;
    font-weight: 600;
    color: #2563eb;
    margin: 0 0 0.75rem 0;
}

.cost-row {
    display: flex;
    justify-content: space-between;
    padding: 0.2rem 0;
    color: #374151;
}

.cost-row.total {
    border-top: 1px solid #e5e7eb;
    margin-top: 0.4rem;
    padding-top: 0.5rem;
    font-weight: 600;
}

.cost-row .value { font-weight: 500; color: #1f2937; }
.cost-row .value.savings { color: #1d4ed8; }

/* ===== INFO BOX ===== */
.info-box {
    background: rgba(63, 185, 236, 0.08);
    border: 1px solid rgba(63, 185, 236, 0.35);
    border-radius: 0.75rem;
    padding: 1rem 1.25rem;
    margin: 1rem 0;
    color: #374151;
}

.info-box h5 {
    color: #2563eb;
    text-align: center;
    margin: 0 0 0.5rem 0;
}

/* ===== INPUT ACCENTS ===== */
.stSlider [role="slider"] {
    background-color: rgb(63,185,236) !important;
}
</style>
"""


def inject_styles():
    """Inject shared CSS styles into the page."""
    st.markdown(SHARED_CSS, unsafe_allow_html=True)


def page_header(title, subtitle=None):
    """Render a consistent page header."""
    st.markdown(f'<div class="page-title">{title}</div>', unsafe_allow_html=True)
    st.markdown('<div class="page-title-bar"></div>', unsafe_allow_html=True)
    if subtitle:
        st.markdown(f'<div class="page-subtitle">{subtitle}</div>', unsafe_allow_html=True)


def section_header(title):
    """Render a section header."""
    st.markdown(f'<div class="section-title">{title}</div>', unsafe_allow_html=True)


def chart_header(title):
    """Render a chart header."""
    st.markdown(f'<div class="chart-title">{title}</div>', unsafe_allow_html=True)


def cost_panel(title, rows, highlight=False):
    """Render a heating / cooling / total panel.

    Args:
        title: Panel heading
        rows: List of (label, formatted value) tuples; the last row is the total
        highlight: Color values as savings
    """
    value_class = "value savings" if highlight else "value"
    body = ""
    for i, (label, value) in enumerate(rows):
        row_class = "cost-row total" if i == len(rows) - 1 else "cost-row"
        body += (
            f'<div class="{row_class}"><span>{label}:</span>'
            f'<span class="{value_class}">{value}</span></div>'
        )
    return f'<div class="cost-panel"><h4>{title}</h4>{body}</div>'


def info_box(content, title=None):
    """Render an info box."""
    heading = f"<h5>{title}</h5>" if title else ""
    return f'<div class="info-box">{heading}{content}</div>'
