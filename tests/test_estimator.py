"""Tests for the cost estimator."""

import dataclasses
import logging
import math

import pytest

from hvac_savings.estimator import (
    CoolingSystem,
    CostEstimator,
    EstimatorInputs,
    HeatingSystem,
    estimate_costs,
)
from hvac_savings.estimator.constants import (
    COOLING_DISTRIBUTION,
    HEATING_DISTRIBUTION,
    MONTHS,
    TYPICAL_SEER,
    required_rates,
)

# Annual heating demand for 1500 sq. ft.: 1500 * 40 BTU * 1200 h
HEATING_BTU_1500 = 1500 * 40 * 1200
# Annual cooling demand for 1500 sq. ft.: 1500 * 20 BTU * 800 h
COOLING_BTU_1500 = 1500 * 20 * 800


def _all_input_combinations():
    """Formula and manual inputs for every equipment pairing."""
    combos = []
    for heating in HeatingSystem:
        for cooling in CoolingSystem:
            combos.append(EstimatorInputs(
                home_size=2300,
                heating_system=heating,
                cooling_system=cooling,
                current_seer=13.5,
            ))
            combos.append(EstimatorInputs(
                heating_system=heating,
                cooling_system=cooling,
                current_seer=9,
                use_manual_input=True,
                manual_heating_cost="2750.40",
                manual_cooling_cost="612",
            ))
    return combos


class TestConstants:
    """Tests for the fixed seasonal tables."""

    def test_distributions_have_twelve_months(self):
        """Test that both distributions cover the calendar."""
        assert len(MONTHS) == 12
        assert len(HEATING_DISTRIBUTION) == 12
        assert len(COOLING_DISTRIBUTION) == 12

    def test_distributions_sum_to_one(self):
        """Test that each distribution sums to 1.0."""
        assert sum(HEATING_DISTRIBUTION) == pytest.approx(1.0)
        assert sum(COOLING_DISTRIBUTION) == pytest.approx(1.0)

    def test_heating_peaks_in_winter_cooling_in_summer(self):
        """Test the seasonal shape of the distributions."""
        assert MONTHS[HEATING_DISTRIBUTION.index(max(HEATING_DISTRIBUTION))] == "Jan"
        assert MONTHS[COOLING_DISTRIBUTION.index(max(COOLING_DISTRIBUTION))] == "Jul"

    def test_required_rates(self):
        """Test which rates matter for each heating system."""
        assert required_rates(HeatingSystem.OIL_FURNACE) == ("electricity_rate", "oil_rate")
        assert required_rates(HeatingSystem.GAS_FURNACE) == ("electricity_rate", "gas_rate")
        assert required_rates(HeatingSystem.ELECTRIC_BASEBOARDS) == ("electricity_rate",)

    @pytest.mark.parametrize("heating_system", list(HeatingSystem))
    def test_manual_mode_uses_no_rates(self, heating_system):
        """Test that manual estimates need no rate inputs."""
        assert required_rates(heating_system, use_manual_input=True) == ()

    def test_typical_seer(self):
        """Test typical SEER ratings of existing equipment."""
        assert TYPICAL_SEER[CoolingSystem.CENTRAL_AC] == 10
        assert TYPICAL_SEER[CoolingSystem.WINDOW_AC] == 8
        assert TYPICAL_SEER[CoolingSystem.NO_COOLING] == 0


class TestSystemLabels:
    """Tests for resolving equipment labels."""

    @pytest.mark.parametrize("label", ["Gas Furnace", "gas furnace", "GAS_FURNACE", "gas-furnace"])
    def test_heating_from_label(self, label):
        """Test that labels and member names resolve."""
        assert HeatingSystem.from_label(label) == HeatingSystem.GAS_FURNACE

    def test_from_label_passes_members_through(self):
        """Test that a member resolves to itself."""
        assert CoolingSystem.from_label(CoolingSystem.WINDOW_AC) is CoolingSystem.WINDOW_AC

    def test_from_label_unknown(self):
        """Test that unknown labels raise ValueError."""
        with pytest.raises(ValueError, match="Heat Pump"):
            HeatingSystem.from_label("Heat Pump")

    def test_value_lookup(self):
        """Test standard Enum lookup by display label."""
        assert CoolingSystem("No Cooling") == CoolingSystem.NO_COOLING


class TestEstimatorInputs:
    """Tests for the EstimatorInputs value type."""

    def test_defaults(self):
        """Test default input values."""
        inputs = EstimatorInputs()

        assert inputs.home_size == 1500
        assert inputs.heating_system == HeatingSystem.OIL_FURNACE
        assert inputs.cooling_system == CoolingSystem.CENTRAL_AC
        assert inputs.electricity_rate == 0.15
        assert inputs.oil_rate == 1.20
        assert inputs.gas_rate == 1.50
        assert inputs.current_seer == 10
        assert inputs.use_manual_input is False
        assert inputs.manual_heating_cost == "0"
        assert inputs.manual_cooling_cost == "0"

    def test_frozen(self):
        """Test that inputs cannot be mutated."""
        inputs = EstimatorInputs()

        with pytest.raises(dataclasses.FrozenInstanceError):
            inputs.home_size = 2000

    def test_from_dict_coerces_values(self):
        """Test creating inputs from loose form values."""
        inputs = EstimatorInputs.from_dict({
            "home_size": "2100",
            "heating_system": "electric_baseboards",
            "cooling_system": "Window AC",
            "electricity_rate": "0.18",
            "oil_rate": "not a number",
            "current_seer": 12,
        })

        assert inputs.home_size == 2100.0
        assert inputs.heating_system == HeatingSystem.ELECTRIC_BASEBOARDS
        assert inputs.cooling_system == CoolingSystem.WINDOW_AC
        assert inputs.electricity_rate == pytest.approx(0.18)
        assert inputs.oil_rate == 0.0
        assert inputs.gas_rate == 1.50  # Default
        assert inputs.current_seer == 12.0

    def test_from_dict_keeps_base_for_missing_keys(self):
        """Test that None values fall back to the base inputs."""
        base = EstimatorInputs(home_size=3000, gas_rate=1.1)

        inputs = EstimatorInputs.from_dict({"home_size": None, "oil_rate": 1.4}, base=base)

        assert inputs.home_size == 3000
        assert inputs.gas_rate == 1.1
        assert inputs.oil_rate == 1.4

    def test_from_dict_unknown_system(self):
        """Test that an unknown system label raises ValueError."""
        with pytest.raises(ValueError):
            EstimatorInputs.from_dict({"cooling_system": "Swamp Cooler"})

    def test_from_config(self):
        """Test building defaults from the config section."""
        config = {"defaults": {"home_size": 900, "heating_system": "Gas Furnace"}}

        inputs = EstimatorInputs.from_config(config)

        assert inputs.home_size == 900
        assert inputs.heating_system == HeatingSystem.GAS_FURNACE

    def test_from_config_without_defaults(self):
        """Test that an empty config gives the built-in defaults."""
        assert EstimatorInputs.from_config({}) == EstimatorInputs()

    def test_to_dict(self):
        """Test conversion to dictionary."""
        data = EstimatorInputs(heating_system=HeatingSystem.GAS_FURNACE).to_dict()

        assert data["heating_system"] == "Gas Furnace"
        assert data["cooling_system"] == "Central AC"
        assert data["home_size"] == 1500


class TestFormulaMode:
    """Tests for estimates derived from home size."""

    def test_oil_furnace_central_ac(self):
        """Test the default oil furnace / central AC scenario."""
        result = estimate_costs(EstimatorInputs(
            home_size=1500,
            heating_system=HeatingSystem.OIL_FURNACE,
            cooling_system=CoolingSystem.CENTRAL_AC,
            electricity_rate=0.15,
            oil_rate=1.20,
            gas_rate=1.50,
            current_seer=10,
        ))

        assert result.current_heating_cost == pytest.approx(3000.0)
        assert result.current_heating_cost == pytest.approx(
            HEATING_BTU_1500 / (36000 * 0.80) * 1.20
        )
        assert result.heat_pump_heating_cost == pytest.approx(
            HEATING_BTU_1500 / (3412 * 3.5) * 0.15
        )
        assert result.current_cooling_cost == pytest.approx(COOLING_BTU_1500 / 3412 * 0.15)
        assert result.heat_pump_cooling_cost == pytest.approx(
            COOLING_BTU_1500 / (3412 * 1.8) * 0.15
        )

    def test_gas_furnace_uses_gas_rate(self):
        """Test gas furnace heating cost."""
        result = estimate_costs(EstimatorInputs(
            heating_system=HeatingSystem.GAS_FURNACE,
            gas_rate=1.50,
            oil_rate=99.0,
        ))

        assert result.current_heating_cost == pytest.approx(
            HEATING_BTU_1500 / (35300 * 0.85) * 1.50
        )

    def test_electric_baseboards_use_electricity_rate(self):
        """Test electric baseboard heating cost."""
        result = estimate_costs(EstimatorInputs(
            heating_system=HeatingSystem.ELECTRIC_BASEBOARDS,
            electricity_rate=0.15,
            oil_rate=99.0,
            gas_rate=99.0,
        ))

        assert result.current_heating_cost == pytest.approx(HEATING_BTU_1500 / 3412 * 0.15)

    def test_heat_pump_heating_independent_of_current_system(self):
        """Test that heat pump heating does not depend on the old system."""
        costs = {
            estimate_costs(EstimatorInputs(heating_system=system)).heat_pump_heating_cost
            for system in HeatingSystem
        }

        assert len(costs) == 1

    def test_window_ac_uses_seer(self):
        """Test that a lower SEER raises the current cooling cost."""
        efficient = estimate_costs(EstimatorInputs(
            cooling_system=CoolingSystem.WINDOW_AC, current_seer=16
        ))
        inefficient = estimate_costs(EstimatorInputs(
            cooling_system=CoolingSystem.WINDOW_AC, current_seer=8
        ))

        assert inefficient.current_cooling_cost == pytest.approx(
            efficient.current_cooling_cost * 2
        )
        assert inefficient.heat_pump_cooling_cost == efficient.heat_pump_cooling_cost

    @pytest.mark.parametrize("seer", [0, 8, 10, 16])
    def test_no_cooling(self, seer):
        """Test that no cooling means zero cooling costs regardless of SEER."""
        result = estimate_costs(EstimatorInputs(
            cooling_system=CoolingSystem.NO_COOLING, current_seer=seer
        ))

        assert result.current_cooling_cost == 0
        assert result.heat_pump_cooling_cost == 0
        assert result.annual_savings.cooling == 0

    def test_monotonic_in_home_size(self):
        """Test that heating costs grow with home size."""
        sizes = [500, 1000, 1500, 2500, 4000]
        results = [estimate_costs(EstimatorInputs(home_size=s)) for s in sizes]

        current = [r.current_heating_cost for r in results]
        heat_pump = [r.heat_pump_heating_cost for r in results]

        assert all(a < b for a, b in zip(current, current[1:]))
        assert all(a < b for a, b in zip(heat_pump, heat_pump[1:]))

    def test_negative_home_size_propagates(self):
        """Test that a negative size is not rejected."""
        result = estimate_costs(EstimatorInputs(home_size=-1500))

        assert result.current_heating_cost == pytest.approx(-3000.0)

    def test_zero_seer_does_not_raise(self, caplog):
        """Test that a zero SEER yields an infinite cost and a warning."""
        with caplog.at_level(logging.WARNING):
            result = estimate_costs(EstimatorInputs(current_seer=0))

        assert math.isinf(result.current_cooling_cost)
        assert result.current_cooling_cost > 0
        assert "Division by zero" in caplog.text

    def test_zero_seer_and_zero_size(self):
        """Test that 0 / 0 yields NaN rather than raising."""
        result = estimate_costs(EstimatorInputs(home_size=0, current_seer=0))

        assert math.isnan(result.current_cooling_cost)
        assert result.current_heating_cost == 0


class TestManualMode:
    """Tests for estimates from user-supplied annual costs."""

    def test_manual_costs_scaled(self):
        """Test heat pump equivalents of manual costs."""
        result = estimate_costs(EstimatorInputs(
            use_manual_input=True,
            manual_heating_cost="1000",
            manual_cooling_cost="500",
            cooling_system=CoolingSystem.CENTRAL_AC,
            current_seer=10,
        ))

        assert result.current_heating_cost == 1000
        assert result.current_cooling_cost == 500
        assert result.heat_pump_heating_cost == pytest.approx(285.714, abs=0.01)
        assert result.heat_pump_cooling_cost == pytest.approx(277.778, abs=0.01)

    def test_manual_cooling_scales_with_current_seer(self):
        """Test that a higher current SEER raises the heat pump cooling cost."""
        low = estimate_costs(EstimatorInputs(
            use_manual_input=True, manual_cooling_cost="500", current_seer=8
        ))
        high = estimate_costs(EstimatorInputs(
            use_manual_input=True, manual_cooling_cost="500", current_seer=16
        ))

        assert high.heat_pump_cooling_cost == pytest.approx(low.heat_pump_cooling_cost * 2)

    def test_manual_ignores_home_size(self):
        """Test that manual mode does not use floor area or rates."""
        small = estimate_costs(EstimatorInputs(
            use_manual_input=True, manual_heating_cost="1200", home_size=500
        ))
        large = estimate_costs(EstimatorInputs(
            use_manual_input=True, manual_heating_cost="1200", home_size=4000,
            electricity_rate=0.5
        ))

        assert small == large

    def test_manual_non_numeric_defaults_to_zero(self):
        """Test that unparseable manual costs zero everything out."""
        result = estimate_costs(EstimatorInputs(
            use_manual_input=True,
            manual_heating_cost="lots",
            manual_cooling_cost="",
        ))

        assert result.current_heating_cost == 0
        assert result.current_cooling_cost == 0
        assert result.heat_pump_heating_cost == 0
        assert result.heat_pump_cooling_cost == 0
        assert result.annual_savings.total == 0
        assert all(m.savings == 0 for m in result.monthly_data)

    def test_manual_numeric_values_accepted(self):
        """Test that numbers work as well as strings."""
        result = estimate_costs(EstimatorInputs(
            use_manual_input=True, manual_heating_cost=700.0, manual_cooling_cost=None
        ))

        assert result.current_heating_cost == 700.0
        assert result.current_cooling_cost == 0

    def test_manual_no_cooling(self):
        """Test that no cooling zeroes the heat pump cooling cost."""
        result = estimate_costs(EstimatorInputs(
            use_manual_input=True,
            manual_cooling_cost="500",
            cooling_system=CoolingSystem.NO_COOLING,
        ))

        assert result.current_cooling_cost == 500
        assert result.heat_pump_cooling_cost == 0
        assert result.annual_savings.cooling == 500

    def test_manual_zero_seer(self):
        """Test that a zero SEER in manual mode zeroes heat pump cooling."""
        result = estimate_costs(EstimatorInputs(
            use_manual_input=True, manual_cooling_cost="500", current_seer=0
        ))

        assert result.heat_pump_cooling_cost == 0


class TestResultInvariants:
    """Tests for relationships that hold for every estimate."""

    @pytest.mark.parametrize("inputs", _all_input_combinations())
    def test_savings_totals(self, inputs):
        """Test total savings and monthly averages."""
        result = estimate_costs(inputs)
        annual = result.annual_savings
        monthly = result.monthly_savings

        assert annual.total == pytest.approx(annual.heating + annual.cooling, abs=1e-9)
        assert monthly.heating == pytest.approx(annual.heating / 12, abs=1e-9)
        assert monthly.cooling == pytest.approx(annual.cooling / 12, abs=1e-9)
        assert monthly.total == pytest.approx(annual.total / 12, abs=1e-9)

    @pytest.mark.parametrize("inputs", _all_input_combinations())
    def test_monthly_breakdown_sums_to_annual(self, inputs):
        """Test that the months add up to the annual costs."""
        result = estimate_costs(inputs)

        current = sum(m.current_total for m in result.monthly_data)
        heat_pump = sum(m.heat_pump_total for m in result.monthly_data)

        assert current == pytest.approx(result.current_total_cost, rel=1e-6)
        assert heat_pump == pytest.approx(result.heat_pump_total_cost, rel=1e-6)

    def test_monthly_records(self):
        """Test monthly labels and per-month savings."""
        result = estimate_costs(EstimatorInputs())

        assert [m.month for m in result.monthly_data] == list(MONTHS)
        for record in result.monthly_data:
            assert record.savings == pytest.approx(record.current_total - record.heat_pump_total)

    def test_january_breakdown(self):
        """Test the January record against the distribution weights."""
        result = estimate_costs(EstimatorInputs())
        jan = result.monthly_data[0]

        assert jan.current_total == pytest.approx(
            result.current_heating_cost * 0.18 + result.current_cooling_cost * 0.01
        )
        assert jan.heat_pump_total == pytest.approx(
            result.heat_pump_heating_cost * 0.18 + result.heat_pump_cooling_cost * 0.01
        )

    def test_idempotent(self):
        """Test that identical inputs give identical results."""
        inputs = EstimatorInputs(home_size=2750, heating_system=HeatingSystem.GAS_FURNACE)

        assert estimate_costs(inputs) == estimate_costs(inputs)
        assert CostEstimator().estimate(inputs) == estimate_costs(inputs)

    def test_to_dict(self):
        """Test result conversion to dictionary."""
        data = estimate_costs(EstimatorInputs()).to_dict()

        assert len(data["monthly_data"]) == 12
        assert data["current_total_cost"] == pytest.approx(
            data["current_heating_cost"] + data["current_cooling_cost"]
        )
        assert set(data["annual_savings"]) == {"heating", "cooling", "total"}
