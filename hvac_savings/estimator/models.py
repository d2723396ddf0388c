"""Value types for heating and cooling cost estimates."""

from dataclasses import asdict, dataclass, fields
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from ..utils.helpers import parse_number


class _LabelledEnum(Enum):
    """Enum whose values are the labels shown to users."""

    @classmethod
    def from_label(cls, label: Union[str, "_LabelledEnum"]):
        """Resolve a member from its label or member name, ignoring case.

        Args:
            label: Display label ("Gas Furnace"), member name ("GAS_FURNACE"),
                   snake/kebab form ("gas-furnace") or a member

        Returns:
            Matching enum member

        Raises:
            ValueError: If no member matches
        """
        if isinstance(label, cls):
            return label

        wanted = str(label).strip().lower().replace("-", " ").replace("_", " ")
        for member in cls:
            if wanted in (member.value.lower(), member.name.lower().replace("_", " ")):
                return member

        choices = ", ".join(m.value for m in cls)
        raise ValueError(f"Unknown {cls.__name__} '{label}'. Expected one of: {choices}")


class HeatingSystem(_LabelledEnum):
    """Existing heating equipment."""

    OIL_FURNACE = "Oil Furnace"
    ELECTRIC_BASEBOARDS = "Electric Baseboards"
    GAS_FURNACE = "Gas Furnace"


class CoolingSystem(_LabelledEnum):
    """Existing cooling equipment."""

    CENTRAL_AC = "Central AC"
    WINDOW_AC = "Window AC"
    NO_COOLING = "No Cooling"


@dataclass(frozen=True)
class EstimatorInputs:
    """Everything the estimator needs for one calculation.

    Manual costs are kept as entered (usually form text) and parsed by the
    estimator, so a half-typed value never raises.
    """

    home_size: float = 1500.0  # sq. ft.
    heating_system: HeatingSystem = HeatingSystem.OIL_FURNACE
    cooling_system: CoolingSystem = CoolingSystem.CENTRAL_AC
    electricity_rate: float = 0.15  # $/kWh
    oil_rate: float = 1.20  # $/liter
    gas_rate: float = 1.50  # $/cubic meter
    current_seer: float = 10.0
    use_manual_input: bool = False
    manual_heating_cost: Union[str, float] = "0"
    manual_cooling_cost: Union[str, float] = "0"

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Any],
        base: Optional["EstimatorInputs"] = None
    ) -> "EstimatorInputs":
        """Build inputs from a loose mapping.

        Keys that are missing or None keep the value from ``base`` (or the
        class defaults). Numeric fields are coerced with ``parse_number``.

        Args:
            data: Mapping of field name to raw value
            base: Optional inputs supplying values for missing keys

        Returns:
            EstimatorInputs instance

        Raises:
            ValueError: If a heating or cooling system label is unknown
        """
        values = asdict(base) if base is not None else {}
        for f in fields(cls):
            if data.get(f.name) is not None:
                values[f.name] = data[f.name]

        kwargs: Dict[str, Any] = {}
        for name in ("home_size", "electricity_rate", "oil_rate", "gas_rate", "current_seer"):
            if name in values:
                kwargs[name] = parse_number(values[name])
        if "heating_system" in values:
            kwargs["heating_system"] = HeatingSystem.from_label(values["heating_system"])
        if "cooling_system" in values:
            kwargs["cooling_system"] = CoolingSystem.from_label(values["cooling_system"])
        if "use_manual_input" in values:
            kwargs["use_manual_input"] = bool(values["use_manual_input"])
        for name in ("manual_heating_cost", "manual_cooling_cost"):
            if name in values:
                kwargs[name] = values[name]

        return cls(**kwargs)

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "EstimatorInputs":
        """Build default inputs from the ``defaults`` section of the config."""
        return cls.from_dict(config.get("defaults") or {})

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "home_size": self.home_size,
            "heating_system": self.heating_system.value,
            "cooling_system": self.cooling_system.value,
            "electricity_rate": self.electricity_rate,
            "oil_rate": self.oil_rate,
            "gas_rate": self.gas_rate,
            "current_seer": self.current_seer,
            "use_manual_input": self.use_manual_input,
            "manual_heating_cost": self.manual_heating_cost,
            "manual_cooling_cost": self.manual_cooling_cost,
        }


@dataclass(frozen=True)
class SavingsBreakdown:
    """Savings split by end use."""

    heating: float
    cooling: float
    total: float

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary."""
        return {"heating": self.heating, "cooling": self.cooling, "total": self.total}


@dataclass(frozen=True)
class MonthlyRecord:
    """Costs and savings for one calendar month."""

    month: str
    current_total: float
    heat_pump_total: float
    savings: float

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "month": self.month,
            "current_total": self.current_total,
            "heat_pump_total": self.heat_pump_total,
            "savings": self.savings,
        }


@dataclass(frozen=True)
class EstimateResult:
    """Annual costs, savings and the seasonal monthly breakdown."""

    current_heating_cost: float
    current_cooling_cost: float
    heat_pump_heating_cost: float
    heat_pump_cooling_cost: float
    annual_savings: SavingsBreakdown
    monthly_savings: SavingsBreakdown
    monthly_data: Tuple[MonthlyRecord, ...]

    @property
    def current_total_cost(self) -> float:
        return self.current_heating_cost + self.current_cooling_cost

    @property
    def heat_pump_total_cost(self) -> float:
        return self.heat_pump_heating_cost + self.heat_pump_cooling_cost

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "current_heating_cost": self.current_heating_cost,
            "current_cooling_cost": self.current_cooling_cost,
            "current_total_cost": self.current_total_cost,
            "heat_pump_heating_cost": self.heat_pump_heating_cost,
            "heat_pump_cooling_cost": self.heat_pump_cooling_cost,
            "heat_pump_total_cost": self.heat_pump_total_cost,
            "annual_savings": self.annual_savings.to_dict(),
            "monthly_savings": self.monthly_savings.to_dict(),
            "monthly_data": [record.to_dict() for record in self.monthly_data],
        }
