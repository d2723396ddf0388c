"""Streamlit dashboard for the heat pump savings calculator."""

import streamlit as st
import sys
from pathlib import Path

# Add project root (for hvac_savings) and this directory (for styles, components)
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent))

from hvac_savings.estimator import (  # noqa: E402
    CoolingSystem,
    EstimatorInputs,
    HeatingSystem,
    estimate_costs,
)
from hvac_savings.estimator.constants import (  # noqa: E402
    HEAT_PUMP_COOLING_SEER,
    HEAT_PUMP_HEATING_COP,
    TYPICAL_SEER,
    required_rates,
)
from hvac_savings.output.excel_generator import ExcelGenerator  # noqa: E402
from hvac_savings.output.report_data import ReportDataBuilder  # noqa: E402
from hvac_savings.utils.helpers import format_currency, load_config, setup_logging  # noqa: E402

from components.charts import create_monthly_cost_line, create_monthly_savings_bar  # noqa: E402
from styles import chart_header, cost_panel, info_box, inject_styles, page_header, section_header  # noqa: E402

st.set_page_config(
    page_title="HVAC Energy Savings Calculator",
    page_icon="🌡️",
    layout="wide",
)


@st.cache_data
def get_config():
    """Load config, falling back to built-in defaults."""
    try:
        return load_config()
    except FileNotFoundError:
        return {}


config = get_config()
setup_logging(config.get("logging", {}).get("level", "INFO"))

defaults = EstimatorInputs.from_config(config)
bounds = config.get("bounds", {})
size_bounds = bounds.get("home_size", {"min": 500, "max": 4000, "step": 100})
seer_bounds = bounds.get("seer", {"min": 8.0, "max": 16.0, "step": 0.5})
rate_step = bounds.get("rate_step", 0.01)
currency = config.get("currency", {})


def money(value: float) -> str:
    return format_currency(
        value,
        symbol=currency.get("symbol", "$"),
        decimals=currency.get("decimals", 0)
    )


inject_styles()
page_header(
    "HVAC Energy Savings Calculator",
    "Estimate your potential savings with a high-efficiency cold climate heat pump"
)

# ---------------------------------------------
# Inputs
# ---------------------------------------------
col_home, col_rates = st.columns(2)

with col_home:
    section_header("Home Details")

    home_size = st.slider(
        "Home Size (sq. ft.)",
        min_value=int(size_bounds["min"]),
        max_value=int(size_bounds["max"]),
        value=int(defaults.home_size),
        step=int(size_bounds["step"]),
    )

    use_manual_input = st.checkbox(
        "Use manual cost input instead",
        value=defaults.use_manual_input,
    )

    heating_system = defaults.heating_system
    manual_heating_cost = defaults.manual_heating_cost
    manual_cooling_cost = defaults.manual_cooling_cost

    if use_manual_input:
        manual_col1, manual_col2 = st.columns(2)
        with manual_col1:
            manual_heating_cost = st.text_input(
                "Annual Heating Cost ($)",
                value=str(defaults.manual_heating_cost),
                placeholder="Enter your annual heating cost",
            )
        with manual_col2:
            manual_cooling_cost = st.text_input(
                "Annual Cooling Cost ($)",
                value=str(defaults.manual_cooling_cost),
                placeholder="Enter your annual cooling cost",
            )
    else:
        heating_options = list(HeatingSystem)
        heating_system = st.selectbox(
            "Current Heating System",
            options=heating_options,
            index=heating_options.index(defaults.heating_system),
            format_func=lambda s: s.value,
        )

    cooling_options = list(CoolingSystem)
    cooling_system = st.selectbox(
        "Current Cooling System",
        options=cooling_options,
        index=cooling_options.index(defaults.cooling_system),
        format_func=lambda s: s.value,
    )

    current_seer = defaults.current_seer
    if cooling_system != CoolingSystem.NO_COOLING:
        typical = TYPICAL_SEER[cooling_system]
        start = typical if cooling_system != defaults.cooling_system else defaults.current_seer
        start = min(max(start, seer_bounds["min"]), seer_bounds["max"])
        current_seer = st.slider(
            "Current AC SEER Rating",
            min_value=float(seer_bounds["min"]),
            max_value=float(seer_bounds["max"]),
            value=float(start),
            step=float(seer_bounds["step"]),
            key=f"seer_{cooling_system.name}",
        )

with col_rates:
    section_header("Energy Rates")

    rate_fields = required_rates(heating_system, use_manual_input)
    if not rate_fields:
        st.caption("Energy rates are not used when annual costs are entered manually.")
    rates = {
        "electricity_rate": defaults.electricity_rate,
        "oil_rate": defaults.oil_rate,
        "gas_rate": defaults.gas_rate,
    }
    rate_labels = {
        "electricity_rate": "Electricity Rate ($/kWh)",
        "oil_rate": "Oil Rate ($/liter)",
        "gas_rate": "Gas Rate ($/cubic meter)",
    }

    for field in rate_fields:
        rates[field] = st.number_input(
            rate_labels[field],
            value=float(rates[field]),
            step=float(rate_step),
            format="%.2f",
        )

    st.markdown(
        info_box(
            "<b>System:</b> High-Efficiency Cold Climate Heat Pump<br>"
            f"<b>SEER Rating:</b> {HEAT_PUMP_COOLING_SEER:g} (Cooling)<br>"
            f"<b>COP:</b> {HEAT_PUMP_HEATING_COP:g} (Heating)",
            title="Heat Pump Information",
        ),
        unsafe_allow_html=True,
    )

# ---------------------------------------------
# Estimate (recomputed on every widget change)
# ---------------------------------------------
inputs = EstimatorInputs.from_dict(
    {
        "home_size": home_size,
        "heating_system": heating_system,
        "cooling_system": cooling_system,
        "current_seer": current_seer,
        "use_manual_input": use_manual_input,
        "manual_heating_cost": manual_heating_cost,
        "manual_cooling_cost": manual_cooling_cost,
        **rates,
    },
    base=defaults,
)
result = estimate_costs(inputs)
report = ReportDataBuilder(inputs, result)

st.divider()
page_header("Your Potential Savings")

panel1, panel2, panel3 = st.columns(3)

with panel1:
    st.markdown(cost_panel("Current Annual Costs", [
        ("Heating", money(result.current_heating_cost)),
        ("Cooling", money(result.current_cooling_cost)),
        ("Total", money(result.current_total_cost)),
    ]), unsafe_allow_html=True)

with panel2:
    st.markdown(cost_panel("Heat Pump Annual Costs", [
        ("Heating", money(result.heat_pump_heating_cost)),
        ("Cooling", money(result.heat_pump_cooling_cost)),
        ("Total", money(result.heat_pump_total_cost)),
    ]), unsafe_allow_html=True)

with panel3:
    st.markdown(cost_panel("Annual Savings", [
        ("Heating", money(result.annual_savings.heating)),
        ("Cooling", money(result.annual_savings.cooling)),
        ("Total", money(result.annual_savings.total)),
    ], highlight=True), unsafe_allow_html=True)

st.metric("Average Monthly Savings", money(result.monthly_savings.total))

monthly_df = report.export_to_dataframe()

chart_col1, chart_col2 = st.columns(2)

with chart_col1:
    chart_header("Monthly Energy Costs")
    st.plotly_chart(create_monthly_cost_line(monthly_df), use_container_width=True)

with chart_col2:
    chart_header("Monthly Savings")
    st.plotly_chart(create_monthly_savings_bar(monthly_df), use_container_width=True)

# ---------------------------------------------
# Breakdown & export
# ---------------------------------------------
with st.expander("Monthly breakdown"):
    table = report.export_to_dataframe(display_names=True)
    st.dataframe(
        table,
        use_container_width=True,
        hide_index=True,
        column_config={
            "Current System": st.column_config.NumberColumn("Current System", format="$%.0f"),
            "Heat Pump": st.column_config.NumberColumn("Heat Pump", format="$%.0f"),
            "Savings": st.column_config.NumberColumn("Savings", format="$%.0f"),
        }
    )

    dl_col1, dl_col2 = st.columns(2)
    with dl_col1:
        st.download_button(
            label="Download Breakdown (CSV)",
            data=table.to_csv(index=False),
            file_name="heat_pump_savings.csv",
            mime="text/csv",
        )
    with dl_col2:
        st.download_button(
            label="Download Report (Excel)",
            data=ExcelGenerator().to_bytes(report),
            file_name=config.get("report", {}).get("output", "heat_pump_savings_report.xlsx"),
            mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        )
