"""Prepare estimate data for reports, tables and charts."""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import pandas as pd

from ..estimator.constants import HEAT_PUMP_COOLING_SEER, HEAT_PUMP_HEATING_COP
from ..estimator.cost_estimator import CostEstimator
from ..estimator.models import EstimateResult, EstimatorInputs

logger = logging.getLogger(__name__)

MONTHLY_COLUMNS = {
    "month": "Month",
    "current_total": "Current System",
    "heat_pump_total": "Heat Pump",
    "savings": "Savings",
}


class ReportDataBuilder:
    """Turn one estimate into report-ready dictionaries and DataFrames."""

    def __init__(
        self,
        inputs: EstimatorInputs,
        result: Optional[EstimateResult] = None
    ):
        """Initialize the builder.

        Args:
            inputs: Inputs the estimate was computed from
            result: Precomputed estimate; computed from ``inputs`` if omitted
        """
        self.inputs = inputs
        self.result = result if result is not None else CostEstimator().estimate(inputs)
        self.generated_at = datetime.now(timezone.utc)

    def build_summary(self) -> Dict[str, Any]:
        """Build summary statistics for the estimate.

        Returns:
            Dictionary of annual costs, savings and the savings percentage
        """
        r = self.result
        current_total = r.current_total_cost
        savings_pct = (r.annual_savings.total / current_total * 100) if current_total > 0 else 0

        return {
            "generated_at": self.generated_at.strftime("%Y-%m-%d %H:%M UTC"),
            "mode": "manual" if self.inputs.use_manual_input else "formula",
            "current_heating": r.current_heating_cost,
            "current_cooling": r.current_cooling_cost,
            "current_total": current_total,
            "heat_pump_heating": r.heat_pump_heating_cost,
            "heat_pump_cooling": r.heat_pump_cooling_cost,
            "heat_pump_total": r.heat_pump_total_cost,
            "annual_savings": r.annual_savings.to_dict(),
            "monthly_savings": r.monthly_savings.to_dict(),
            "savings_percentage": savings_pct,
            "heat_pump_cop": HEAT_PUMP_HEATING_COP,
            "heat_pump_seer": HEAT_PUMP_COOLING_SEER,
        }

    def build_cost_table(self) -> pd.DataFrame:
        """Build the heating / cooling / total comparison table.

        Returns:
            DataFrame indexed by end use with current, heat pump and
            savings columns
        """
        r = self.result
        return pd.DataFrame(
            {
                "Current System": [
                    r.current_heating_cost, r.current_cooling_cost, r.current_total_cost
                ],
                "Heat Pump": [
                    r.heat_pump_heating_cost, r.heat_pump_cooling_cost, r.heat_pump_total_cost
                ],
                "Annual Savings": [
                    r.annual_savings.heating, r.annual_savings.cooling, r.annual_savings.total
                ],
            },
            index=pd.Index(["Heating", "Cooling", "Total"], name="End Use"),
        )

    def export_to_dataframe(self, display_names: bool = False) -> pd.DataFrame:
        """Export the monthly breakdown to a pandas DataFrame.

        Args:
            display_names: Use human-readable column headers

        Returns:
            DataFrame with one row per month, January first
        """
        df = pd.DataFrame([record.to_dict() for record in self.result.monthly_data])
        if display_names:
            df = df.rename(columns=MONTHLY_COLUMNS)
        return df

    def get_all_data(self) -> Dict[str, Any]:
        """Get all report data.

        Returns:
            Dictionary with inputs, summary and monthly records
        """
        return {
            "inputs": self.inputs.to_dict(),
            "summary": self.build_summary(),
            "monthly": [record.to_dict() for record in self.result.monthly_data],
        }
