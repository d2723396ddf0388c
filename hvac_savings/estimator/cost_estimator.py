"""Estimate heating and cooling costs for current equipment versus a heat pump."""

import logging
import math
from typing import List, Tuple

from ..utils.helpers import parse_number
from .constants import (
    BASELINE_SEER,
    BTU_PER_KWH,
    COOLING_BTU_PER_SQFT,
    COOLING_DISTRIBUTION,
    COOLING_SEASON_HOURS,
    FUEL_ENERGY_CONTENT,
    FUEL_RATE_FIELD,
    HEAT_PUMP_COOLING_SEER,
    HEAT_PUMP_HEATING_COP,
    HEATING_BTU_PER_SQFT,
    HEATING_DISTRIBUTION,
    HEATING_EFFICIENCY,
    HEATING_SEASON_HOURS,
    MONTHS,
)
from .models import (
    CoolingSystem,
    EstimateResult,
    EstimatorInputs,
    MonthlyRecord,
    SavingsBreakdown,
)

logger = logging.getLogger(__name__)

# (current heating, current cooling, heat pump heating, heat pump cooling)
AnnualCosts = Tuple[float, float, float, float]


def _divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE semantics instead of raising on a zero denominator."""
    if denominator == 0:
        logger.warning(
            f"Division by zero while estimating costs ({numerator} / 0); "
            "check the SEER rating"
        )
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


class CostEstimator:
    """Compare annual and monthly energy costs of existing HVAC equipment
    with a cold-climate heat pump.

    Two modes are supported:
    - Formula mode derives every cost from floor area, equipment efficiency
      and utility rates.
    - Manual mode starts from the homeowner's own annual heating and cooling
      bills and scales them to heat pump equivalents.

    The estimator is stateless; ``estimate`` can be called for every input
    change and from several threads at once.
    """

    def estimate(self, inputs: EstimatorInputs) -> EstimateResult:
        """Estimate costs and savings for one set of inputs.

        Args:
            inputs: Home, equipment and rate inputs

        Returns:
            EstimateResult with annual costs, savings and monthly breakdown
        """
        if inputs.use_manual_input:
            costs = self._manual_costs(inputs)
        else:
            costs = self._formula_costs(inputs)

        logger.debug(
            f"Estimated costs for {inputs.heating_system.value} / "
            f"{inputs.cooling_system.value} "
            f"(manual={inputs.use_manual_input}): {costs}"
        )
        return self._build_result(*costs)

    def _manual_costs(self, inputs: EstimatorInputs) -> AnnualCosts:
        """Scale user-supplied annual bills to heat pump equivalents.

        Heating divides by the heat pump COP. Cooling multiplies by the
        ratio of the current SEER to the heat pump SEER.
        """
        current_heating = parse_number(inputs.manual_heating_cost)
        current_cooling = parse_number(inputs.manual_cooling_cost)

        heat_pump_heating = current_heating / HEAT_PUMP_HEATING_COP
        if inputs.cooling_system != CoolingSystem.NO_COOLING:
            heat_pump_cooling = current_cooling * (inputs.current_seer / HEAT_PUMP_COOLING_SEER)
        else:
            heat_pump_cooling = 0.0

        return current_heating, current_cooling, heat_pump_heating, heat_pump_cooling

    def _formula_costs(self, inputs: EstimatorInputs) -> AnnualCosts:
        """Derive all four annual costs from floor area and rates."""
        has_cooling = inputs.cooling_system != CoolingSystem.NO_COOLING

        # Current heating: BTU-hours -> liters / kWh / m3 of fuel -> cost
        heating_btu = inputs.home_size * HEATING_BTU_PER_SQFT
        fuel_units = (heating_btu * HEATING_SEASON_HOURS) / (
            FUEL_ENERGY_CONTENT[inputs.heating_system]
            * HEATING_EFFICIENCY[inputs.heating_system]
        )
        fuel_rate = getattr(inputs, FUEL_RATE_FIELD[inputs.heating_system])
        current_heating = fuel_units * fuel_rate

        current_cooling = 0.0
        if has_cooling:
            cooling_btu = inputs.home_size * COOLING_BTU_PER_SQFT
            cooling_kwh = _divide(
                cooling_btu * COOLING_SEASON_HOURS,
                BTU_PER_KWH * (inputs.current_seer / BASELINE_SEER),
            )
            current_cooling = cooling_kwh * inputs.electricity_rate

        heat_pump_heating_kwh = (
            inputs.home_size * HEATING_BTU_PER_SQFT * HEATING_SEASON_HOURS
        ) / (BTU_PER_KWH * HEAT_PUMP_HEATING_COP)
        heat_pump_heating = heat_pump_heating_kwh * inputs.electricity_rate

        heat_pump_cooling = 0.0
        if has_cooling:
            heat_pump_cooling_kwh = (
                inputs.home_size * COOLING_BTU_PER_SQFT * COOLING_SEASON_HOURS
            ) / (BTU_PER_KWH * (HEAT_PUMP_COOLING_SEER / BASELINE_SEER))
            heat_pump_cooling = heat_pump_cooling_kwh * inputs.electricity_rate

        return current_heating, current_cooling, heat_pump_heating, heat_pump_cooling

    def _build_result(
        self,
        current_heating: float,
        current_cooling: float,
        heat_pump_heating: float,
        heat_pump_cooling: float
    ) -> EstimateResult:
        """Derive savings and the monthly breakdown from annual costs."""
        heating_savings = current_heating - heat_pump_heating
        cooling_savings = current_cooling - heat_pump_cooling
        total_savings = heating_savings + cooling_savings

        annual = SavingsBreakdown(
            heating=heating_savings,
            cooling=cooling_savings,
            total=total_savings,
        )
        monthly = SavingsBreakdown(
            heating=heating_savings / 12,
            cooling=cooling_savings / 12,
            total=total_savings / 12,
        )

        return EstimateResult(
            current_heating_cost=current_heating,
            current_cooling_cost=current_cooling,
            heat_pump_heating_cost=heat_pump_heating,
            heat_pump_cooling_cost=heat_pump_cooling,
            annual_savings=annual,
            monthly_savings=monthly,
            monthly_data=self._monthly_breakdown(
                current_heating, current_cooling, heat_pump_heating, heat_pump_cooling
            ),
        )

    @staticmethod
    def _monthly_breakdown(
        current_heating: float,
        current_cooling: float,
        heat_pump_heating: float,
        heat_pump_cooling: float
    ) -> Tuple[MonthlyRecord, ...]:
        """Spread annual costs over the calendar with the seasonal weights."""
        records: List[MonthlyRecord] = []

        for month, heat_weight, cool_weight in zip(
            MONTHS, HEATING_DISTRIBUTION, COOLING_DISTRIBUTION
        ):
            current_total = current_heating * heat_weight + current_cooling * cool_weight
            heat_pump_total = heat_pump_heating * heat_weight + heat_pump_cooling * cool_weight
            records.append(MonthlyRecord(
                month=month,
                current_total=current_total,
                heat_pump_total=heat_pump_total,
                savings=current_total - heat_pump_total,
            ))

        return tuple(records)


_DEFAULT_ESTIMATOR = CostEstimator()


def estimate_costs(inputs: EstimatorInputs) -> EstimateResult:
    """Convenience function to run the default estimator.

    Args:
        inputs: Home, equipment and rate inputs

    Returns:
        EstimateResult
    """
    return _DEFAULT_ESTIMATOR.estimate(inputs)
