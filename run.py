#!/usr/bin/env python3
"""CLI entry point for the Heat Pump Savings Calculator."""

import argparse
import logging
import subprocess
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from hvac_savings.estimator import CoolingSystem, EstimatorInputs, HeatingSystem
from hvac_savings.estimator.constants import TYPICAL_SEER
from hvac_savings.output.excel_generator import ExcelGenerator
from hvac_savings.output.report_data import ReportDataBuilder
from hvac_savings.utils.helpers import (
    format_currency,
    format_percentage,
    load_config,
    setup_logging,
)

logger = logging.getLogger("hvac_savings")


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Heat Pump Savings Calculator - Compare current heating/cooling "
                    "costs with a cold-climate heat pump"
    )

    parser.add_argument(
        "--home-size",
        type=float,
        help="Home floor area in square feet (default from config: 1500)"
    )

    parser.add_argument(
        "--heating-system",
        choices=[s.value for s in HeatingSystem],
        help="Current heating system"
    )

    parser.add_argument(
        "--cooling-system",
        choices=[s.value for s in CoolingSystem],
        help="Current cooling system"
    )

    parser.add_argument(
        "--electricity-rate",
        type=float,
        help="Electricity rate in $/kWh"
    )

    parser.add_argument(
        "--oil-rate",
        type=float,
        help="Heating oil rate in $/liter"
    )

    parser.add_argument(
        "--gas-rate",
        type=float,
        help="Natural gas rate in $/cubic meter"
    )

    parser.add_argument(
        "--seer",
        dest="current_seer",
        type=float,
        help="SEER rating of the current cooling equipment "
             "(default: typical rating for the cooling system)"
    )

    manual_group = parser.add_argument_group(
        "manual costs",
        "Supplying either value switches to manual mode"
    )
    manual_group.add_argument(
        "--manual-heating-cost",
        type=str,
        help="Known annual heating cost"
    )
    manual_group.add_argument(
        "--manual-cooling-cost",
        type=str,
        help="Known annual cooling cost"
    )

    parser.add_argument(
        "--output", "-o",
        type=str,
        help="Write an Excel report to this path"
    )

    parser.add_argument(
        "--monthly",
        action="store_true",
        help="Print the month-by-month breakdown"
    )

    parser.add_argument(
        "--dashboard",
        action="store_true",
        help="Launch the Streamlit dashboard instead of printing an estimate"
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to custom config file"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )

    return parser.parse_args(argv)


def build_inputs(args, config: Dict[str, Any]) -> EstimatorInputs:
    """Merge command line values over the configured defaults.

    Args:
        args: Parsed command line arguments
        config: Application configuration

    Returns:
        EstimatorInputs for the estimate
    """
    base = EstimatorInputs.from_config(config)
    overrides = {
        "home_size": args.home_size,
        "heating_system": args.heating_system,
        "cooling_system": args.cooling_system,
        "electricity_rate": args.electricity_rate,
        "oil_rate": args.oil_rate,
        "gas_rate": args.gas_rate,
        "current_seer": args.current_seer,
        "manual_heating_cost": args.manual_heating_cost,
        "manual_cooling_cost": args.manual_cooling_cost,
    }

    # Switching to another cooling system without a SEER uses its typical rating
    if args.cooling_system and args.current_seer is None:
        cooling_system = CoolingSystem.from_label(args.cooling_system)
        typical = TYPICAL_SEER[cooling_system]
        if cooling_system != base.cooling_system and typical > 0:
            overrides["current_seer"] = typical

    if args.manual_heating_cost is not None or args.manual_cooling_cost is not None:
        overrides["use_manual_input"] = True

    return EstimatorInputs.from_dict(overrides, base=base)


def print_summary(
    report_builder: ReportDataBuilder,
    config: Dict[str, Any],
    show_monthly: bool = False
) -> None:
    """Print the estimate summary to stdout."""
    currency = config.get("currency", {})
    symbol = currency.get("symbol", "$")
    decimals = currency.get("decimals", 0)

    def money(value: float) -> str:
        return format_currency(value, symbol=symbol, decimals=decimals)

    inputs = report_builder.inputs
    summary = report_builder.build_summary()
    annual = summary["annual_savings"]

    print("\n" + "=" * 60)
    print("HEAT PUMP SAVINGS ESTIMATE")
    print("=" * 60)
    if inputs.use_manual_input:
        print("Mode:                  Manual annual costs")
    else:
        print(f"Home Size:             {inputs.home_size:,.0f} sq. ft.")
        print(f"Heating System:        {inputs.heating_system.value}")
    print(f"Cooling System:        {inputs.cooling_system.value}")
    if inputs.cooling_system != CoolingSystem.NO_COOLING:
        print(f"Current SEER:          {inputs.current_seer:g}")
    print("-" * 60)
    print(f"{'':22} {'Current':>11} {'Heat Pump':>11} {'Savings':>11}")
    print(f"{'Heating':22} {money(summary['current_heating']):>11} "
          f"{money(summary['heat_pump_heating']):>11} {money(annual['heating']):>11}")
    print(f"{'Cooling':22} {money(summary['current_cooling']):>11} "
          f"{money(summary['heat_pump_cooling']):>11} {money(annual['cooling']):>11}")
    print(f"{'Total':22} {money(summary['current_total']):>11} "
          f"{money(summary['heat_pump_total']):>11} {money(annual['total']):>11}")
    print("-" * 60)
    print(f"Monthly Savings:       {money(summary['monthly_savings']['total'])}/month")
    print(f"Savings Percentage:    {format_percentage(summary['savings_percentage'])}")
    print("=" * 60)

    if show_monthly:
        print(f"\n{'Month':6} {'Current':>11} {'Heat Pump':>11} {'Savings':>11}")
        for record in report_builder.result.monthly_data:
            print(f"{record.month:6} {money(record.current_total):>11} "
                  f"{money(record.heat_pump_total):>11} {money(record.savings):>11}")


def run_estimate(args, config: Dict[str, Any]) -> Optional[Path]:
    """Run the estimate and optionally write the Excel report.

    Args:
        args: Command line arguments
        config: Application configuration

    Returns:
        Path to the Excel report, if one was written
    """
    inputs = build_inputs(args, config)
    logger.info(
        f"Estimating savings for {inputs.heating_system.value} / "
        f"{inputs.cooling_system.value}"
    )

    report_builder = ReportDataBuilder(inputs)
    print_summary(report_builder, config, show_monthly=args.monthly)

    if not args.output:
        return None

    logger.info(f"Generating report: {args.output}")
    try:
        output_path = ExcelGenerator(args.output).generate(report_builder)
    except OSError as e:
        logger.error(f"Failed to write report: {e}")
        sys.exit(1)

    print(f"\nReport saved to: {output_path}")
    return output_path


def launch_dashboard():
    """Launch the Streamlit dashboard."""
    dashboard_path = Path(__file__).parent / "dashboard" / "app.py"

    if not dashboard_path.exists():
        print(f"Dashboard not found: {dashboard_path}")
        sys.exit(1)

    subprocess.run(["streamlit", "run", str(dashboard_path)])


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)

    try:
        config = load_config(args.config)
    except FileNotFoundError as e:
        config = {}
        setup_logging("DEBUG" if args.verbose else "INFO")
        logger.error(f"{e}; using built-in defaults")
    else:
        log_config = config.get("logging", {})
        setup_logging(
            "DEBUG" if args.verbose else log_config.get("level", "INFO"),
            log_file=log_config.get("file")
        )

    if args.dashboard:
        launch_dashboard()
    else:
        run_estimate(args, config)


if __name__ == "__main__":
    main()
