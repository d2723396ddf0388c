"""Generate Excel reports from estimate data."""

import logging
import math
from io import BytesIO
from pathlib import Path
from typing import Any, Dict, List, Union

from openpyxl import Workbook
from openpyxl.chart import BarChart, LineChart, Reference
from openpyxl.styles import Border, Font, PatternFill, Side

from .report_data import ReportDataBuilder

logger = logging.getLogger(__name__)


class ExcelGenerator:
    """Generate an Excel workbook with a summary sheet and monthly charts."""

    # Style definitions
    HEADER_FILL = PatternFill(start_color="1F4E79", end_color="1F4E79", fill_type="solid")
    HEADER_FONT = Font(color="FFFFFF", bold=True, size=11)
    SAVINGS_FILL = PatternFill(start_color="C6EFCE", end_color="C6EFCE", fill_type="solid")
    CURRENCY_FORMAT = "$#,##0"
    PERCENT_FORMAT = "0.0%"
    THIN_BORDER = Border(
        left=Side(style='thin'),
        right=Side(style='thin'),
        top=Side(style='thin'),
        bottom=Side(style='thin')
    )

    def __init__(self, output_path: Union[str, Path, None] = None):
        """Initialize the generator.

        Args:
            output_path: Path for the output Excel file; may be omitted
                         when only ``to_bytes`` is used
        """
        self.output_path = Path(output_path) if output_path is not None else None
        self.workbook = Workbook()
        # Remove default sheet
        self.workbook.remove(self.workbook.active)
        self._non_finite = False

    def build(self, report_builder: ReportDataBuilder) -> Workbook:
        """Populate the workbook without saving it.

        Args:
            report_builder: ReportDataBuilder for one estimate

        Returns:
            The populated workbook
        """
        data = report_builder.get_all_data()

        self._create_summary_sheet(data["inputs"], data["summary"])
        self._create_monthly_sheet(data["monthly"])

        if self._non_finite:
            logger.warning(
                "Estimate contains non-finite costs; affected cells are written as text. "
                "Check the SEER rating"
            )

        return self.workbook

    def generate(self, report_builder: ReportDataBuilder) -> Path:
        """Generate the complete Excel report.

        Args:
            report_builder: ReportDataBuilder for one estimate

        Returns:
            Path to generated file
        """
        if self.output_path is None:
            raise ValueError("output_path is required to save the report")

        self.build(report_builder)
        self.workbook.save(self.output_path)
        logger.info(f"Excel report saved to {self.output_path}")
        return self.output_path

    def to_bytes(self, report_builder: ReportDataBuilder) -> bytes:
        """Render the report in memory, e.g. for a download button."""
        self.build(report_builder)
        buffer = BytesIO()
        self.workbook.save(buffer)
        return buffer.getvalue()

    def _number(self, value: Any) -> Any:
        """Return a cell value; inf and nan become text so they are not left blank."""
        if isinstance(value, float) and not math.isfinite(value):
            self._non_finite = True
            return str(value)
        return value

    def _write_header(self, ws, row: int, headers: List[str]) -> None:
        for col, header in enumerate(headers, 1):
            cell = ws.cell(row=row, column=col, value=header)
            cell.fill = self.HEADER_FILL
            cell.font = self.HEADER_FONT
            cell.border = self.THIN_BORDER

    def _create_summary_sheet(self, inputs: Dict[str, Any], summary: Dict[str, Any]) -> None:
        """Create the Summary sheet."""
        ws = self.workbook.create_sheet("Summary")

        # Title
        ws["A1"] = "Heat Pump Savings Estimate"
        ws["A1"].font = Font(size=16, bold=True)
        ws.merge_cells("A1:D1")

        ws["A2"] = f"Generated: {summary['generated_at']}"
        ws["A2"].font = Font(italic=True)

        # Inputs
        row = 4
        ws.cell(row=row, column=1, value="Inputs").font = Font(bold=True, size=12)
        row += 1

        if inputs["use_manual_input"]:
            input_rows = [
                ("Mode", "Manual annual costs"),
                ("Annual Heating Cost", inputs["manual_heating_cost"]),
                ("Annual Cooling Cost", inputs["manual_cooling_cost"]),
                ("Cooling System", inputs["cooling_system"]),
                ("Current SEER", inputs["current_seer"]),
            ]
        else:
            input_rows = [
                ("Mode", "Estimated from home size"),
                ("Home Size (sq. ft.)", inputs["home_size"]),
                ("Heating System", inputs["heating_system"]),
                ("Cooling System", inputs["cooling_system"]),
                ("Current SEER", inputs["current_seer"]),
                ("Electricity Rate ($/kWh)", inputs["electricity_rate"]),
                ("Oil Rate ($/liter)", inputs["oil_rate"]),
                ("Gas Rate ($/cubic meter)", inputs["gas_rate"]),
            ]

        for label, value in input_rows:
            ws.cell(row=row, column=1, value=label).font = Font(bold=True)
            ws.cell(row=row, column=2, value=value)
            row += 1

        # Annual costs
        row += 1
        ws.cell(row=row, column=1, value="Annual Costs").font = Font(bold=True, size=12)
        row += 1

        self._write_header(ws, row, ["", "Current System", "Heat Pump", "Savings"])
        row += 1

        savings = summary["annual_savings"]
        cost_rows = [
            ("Heating", summary["current_heating"], summary["heat_pump_heating"], savings["heating"]),
            ("Cooling", summary["current_cooling"], summary["heat_pump_cooling"], savings["cooling"]),
            ("Total", summary["current_total"], summary["heat_pump_total"], savings["total"]),
        ]

        for label, current, heat_pump, saved in cost_rows:
            ws.cell(row=row, column=1, value=label).font = Font(bold=True)
            for col, value in enumerate((current, heat_pump, saved), 2):
                cell = ws.cell(row=row, column=col, value=self._number(value))
                cell.number_format = self.CURRENCY_FORMAT
            ws.cell(row=row, column=4).fill = self.SAVINGS_FILL
            row += 1

        # Headline metrics
        row += 1
        metrics = [
            ("Average Monthly Savings", summary["monthly_savings"]["total"], self.CURRENCY_FORMAT),
            ("Savings Percentage", summary["savings_percentage"] / 100, self.PERCENT_FORMAT),
            ("Heat Pump COP (Heating)", summary["heat_pump_cop"], None),
            ("Heat Pump SEER (Cooling)", summary["heat_pump_seer"], None),
        ]

        for label, value, fmt in metrics:
            ws.cell(row=row, column=1, value=label).font = Font(bold=True)
            cell = ws.cell(row=row, column=2, value=self._number(value))
            if fmt:
                cell.number_format = fmt
            row += 1

        # Adjust column widths
        ws.column_dimensions["A"].width = 30
        ws.column_dimensions["B"].width = 18
        ws.column_dimensions["C"].width = 18
        ws.column_dimensions["D"].width = 18

    def _create_monthly_sheet(self, monthly: List[Dict[str, Any]]) -> None:
        """Create the Monthly Breakdown sheet with cost and savings charts."""
        ws = self.workbook.create_sheet("Monthly Breakdown")

        headers = ["Month", "Current System", "Heat Pump", "Savings"]
        self._write_header(ws, 1, headers)

        row = 2
        for record in monthly:
            ws.cell(row=row, column=1, value=record["month"])
            for col, key in enumerate(("current_total", "heat_pump_total", "savings"), 2):
                cell = ws.cell(row=row, column=col, value=self._number(record[key]))
                cell.number_format = self.CURRENCY_FORMAT
            row += 1

        last_row = row - 1
        if last_row < 2:
            return

        cats = Reference(ws, min_col=1, min_row=2, max_row=last_row)

        line = LineChart()
        line.title = "Monthly Energy Costs"
        line.y_axis.title = "Cost ($)"
        line.x_axis.title = "Month"
        line.add_data(
            Reference(ws, min_col=2, max_col=3, min_row=1, max_row=last_row),
            titles_from_data=True
        )
        line.set_categories(cats)
        line.series[1].graphicalProperties.line.dashStyle = "dash"
        ws.add_chart(line, "F2")

        bar = BarChart()
        bar.type = "col"
        bar.style = 10
        bar.title = "Monthly Savings"
        bar.y_axis.title = "Savings ($)"
        bar.add_data(
            Reference(ws, min_col=4, min_row=1, max_row=last_row),
            titles_from_data=True
        )
        bar.set_categories(cats)
        ws.add_chart(bar, "F20")

        ws.column_dimensions["A"].width = 10
        ws.column_dimensions["B"].width = 18
        ws.column_dimensions["C"].width = 18
        ws.column_dimensions["D"].width = 18


def generate_excel_report(
    report_builder: ReportDataBuilder,
    output_path: Union[str, Path]
) -> Path:
    """Convenience function to generate an Excel report.

    Args:
        report_builder: ReportDataBuilder for one estimate
        output_path: Path for the output file

    Returns:
        Path to generated file
    """
    generator = ExcelGenerator(output_path)
    return generator.generate(report_builder)
