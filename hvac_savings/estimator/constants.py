"""Fixed physical and seasonal constants used by the cost estimator."""

from typing import Dict, Tuple

from .models import CoolingSystem, HeatingSystem

# Fraction of fuel energy delivered as heat
HEATING_EFFICIENCY: Dict[HeatingSystem, float] = {
    HeatingSystem.OIL_FURNACE: 0.80,
    HeatingSystem.ELECTRIC_BASEBOARDS: 1.00,
    HeatingSystem.GAS_FURNACE: 0.85,
}

# Typical SEER of existing equipment, used to pre-fill the SEER input
TYPICAL_SEER: Dict[CoolingSystem, float] = {
    CoolingSystem.CENTRAL_AC: 10.0,
    CoolingSystem.WINDOW_AC: 8.0,
    CoolingSystem.NO_COOLING: 0.0,
}

HEAT_PUMP_HEATING_COP = 3.5
HEAT_PUMP_COOLING_SEER = 18.0

# Cooling kWh are normalised against this SEER
BASELINE_SEER = 10.0

# BTU per sq. ft. of floor area
HEATING_BTU_PER_SQFT = 40.0
COOLING_BTU_PER_SQFT = 20.0

# Hours per year
HEATING_SEASON_HOURS = 1200.0
COOLING_SEASON_HOURS = 800.0

BTU_PER_LITER_OIL = 36000.0
BTU_PER_CUBIC_METER_GAS = 35300.0
BTU_PER_KWH = 3412.0

# Energy content of the fuel each heating system burns, and the rate field
# that prices it
FUEL_ENERGY_CONTENT: Dict[HeatingSystem, float] = {
    HeatingSystem.OIL_FURNACE: BTU_PER_LITER_OIL,
    HeatingSystem.ELECTRIC_BASEBOARDS: BTU_PER_KWH,
    HeatingSystem.GAS_FURNACE: BTU_PER_CUBIC_METER_GAS,
}

FUEL_RATE_FIELD: Dict[HeatingSystem, str] = {
    HeatingSystem.OIL_FURNACE: "oil_rate",
    HeatingSystem.ELECTRIC_BASEBOARDS: "electricity_rate",
    HeatingSystem.GAS_FURNACE: "gas_rate",
}

MONTHS: Tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

# Share of the annual load falling in each month, Jan..Dec; each sums to 1.0
HEATING_DISTRIBUTION: Tuple[float, ...] = (
    0.18, 0.16, 0.12, 0.08, 0.04, 0.01, 0.01, 0.01, 0.03, 0.07, 0.12, 0.17,
)
COOLING_DISTRIBUTION: Tuple[float, ...] = (
    0.01, 0.01, 0.02, 0.05, 0.10, 0.18, 0.22, 0.20, 0.12, 0.06, 0.02, 0.01,
)


def required_rates(
    heating_system: HeatingSystem,
    use_manual_input: bool = False
) -> Tuple[str, ...]:
    """Return the rate fields that affect an estimate for a heating system.

    Manual estimates scale the entered bills and use no rates. Otherwise
    electricity always matters because the heat pump runs on it.
    """
    if use_manual_input:
        return ()
    fuel_rate = FUEL_RATE_FIELD[heating_system]
    if fuel_rate == "electricity_rate":
        return ("electricity_rate",)
    return ("electricity_rate", fuel_rate)
