"""Reusable chart components for the dashboard."""

import plotly.graph_objects as go
from typing import Optional
import pandas as pd

PRIMARY = "rgb(63,185,236)"
SERIES_COLOR = "#3FBDC4"


def _apply_currency_layout(fig: go.Figure, yaxis_title: str, height: int) -> go.Figure:
    fig.update_layout(
        height=height,
        xaxis_title="Month",
        yaxis_title=yaxis_title,
        yaxis_tickformat="$,.0f",
        hoverlabel=dict(bgcolor="#f9fafb", font_color=PRIMARY),
        legend=dict(orientation="h", yanchor="bottom", y=1.02),
        margin=dict(t=40, b=20, l=20, r=20)
    )
    return fig


def create_monthly_cost_line(
    df: pd.DataFrame,
    month_col: str = "month",
    current_col: str = "current_total",
    heat_pump_col: str = "heat_pump_total",
    height: int = 300
) -> go.Figure:
    """Create a line chart of current vs heat pump monthly cost.

    Args:
        df: DataFrame with one row per month
        month_col: Column with month labels
        current_col: Column with current system cost
        heat_pump_col: Column with heat pump cost
        height: Figure height in pixels

    Returns:
        Plotly figure
    """
    if current_col not in df.columns or heat_pump_col not in df.columns:
        return go.Figure()

    fig = go.Figure()

    fig.add_trace(go.Scatter(
        x=df[month_col],
        y=df[current_col],
        mode='lines+markers',
        name='Current System',
        line=dict(color=SERIES_COLOR, width=3, shape='spline'),
        hovertemplate="%{x}: $%{y:,.0f}<extra>Current System</extra>"
    ))

    fig.add_trace(go.Scatter(
        x=df[month_col],
        y=df[heat_pump_col],
        mode='lines+markers',
        name='Heat Pump',
        line=dict(color=SERIES_COLOR, width=3, dash='dash', shape='spline'),
        hovertemplate="%{x}: $%{y:,.0f}<extra>Heat Pump</extra>"
    ))

    return _apply_currency_layout(fig, "Monthly Cost ($)", height)


def create_monthly_savings_bar(
    df: pd.DataFrame,
    month_col: str = "month",
    savings_col: str = "savings",
    height: int = 300,
    color: Optional[str] = None
) -> go.Figure:
    """Create a bar chart of savings per month.

    Args:
        df: DataFrame with one row per month
        month_col: Column with month labels
        savings_col: Column with savings values
        height: Figure height in pixels
        color: Bar color (defaults to the series color)

    Returns:
        Plotly figure
    """
    if savings_col not in df.columns:
        return go.Figure()

    fig = go.Figure(data=[go.Bar(
        x=df[month_col],
        y=df[savings_col],
        name='Savings',
        marker_color=color or SERIES_COLOR,
        hovertemplate="%{x}: $%{y:,.0f}<extra>Savings</extra>"
    )])

    fig.update_layout(showlegend=True)

    return _apply_currency_layout(fig, "Monthly Savings ($)", height)
