"""Heating and cooling cost estimation."""

from .cost_estimator import CostEstimator, estimate_costs
from .models import (
    CoolingSystem,
    EstimateResult,
    EstimatorInputs,
    HeatingSystem,
    MonthlyRecord,
    SavingsBreakdown,
)

__all__ = [
    "CostEstimator",
    "estimate_costs",
    "CoolingSystem",
    "EstimateResult",
    "EstimatorInputs",
    "HeatingSystem",
    "MonthlyRecord",
    "SavingsBreakdown",
]
