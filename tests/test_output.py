"""Tests for report data preparation and Excel export."""

import logging
from io import BytesIO

import pytest
from openpyxl import load_workbook

from hvac_savings.estimator import CoolingSystem, EstimatorInputs, estimate_costs
from hvac_savings.output.excel_generator import ExcelGenerator, generate_excel_report
from hvac_savings.output.report_data import ReportDataBuilder


class TestReportDataBuilder:
    """Tests for ReportDataBuilder."""

    def test_computes_result_when_missing(self):
        """Test that the builder runs the estimator if needed."""
        inputs = EstimatorInputs(home_size=1800)

        builder = ReportDataBuilder(inputs)

        assert builder.result == estimate_costs(inputs)

    def test_uses_given_result(self):
        """Test that a precomputed result is reused."""
        inputs = EstimatorInputs()
        result = estimate_costs(inputs)

        builder = ReportDataBuilder(inputs, result)

        assert builder.result is result

    def test_build_summary(self):
        """Test summary values."""
        builder = ReportDataBuilder(EstimatorInputs())
        result = builder.result

        summary = builder.build_summary()

        assert summary["mode"] == "formula"
        assert summary["current_total"] == pytest.approx(result.current_total_cost)
        assert summary["heat_pump_total"] == pytest.approx(result.heat_pump_total_cost)
        assert summary["annual_savings"]["total"] == pytest.approx(result.annual_savings.total)
        assert summary["savings_percentage"] == pytest.approx(
            result.annual_savings.total / result.current_total_cost * 100
        )
        assert summary["heat_pump_cop"] == 3.5
        assert summary["heat_pump_seer"] == 18

    def test_build_summary_zero_costs(self):
        """Test that zero current costs give a zero savings percentage."""
        builder = ReportDataBuilder(EstimatorInputs(use_manual_input=True))

        summary = builder.build_summary()

        assert summary["mode"] == "manual"
        assert summary["current_total"] == 0
        assert summary["savings_percentage"] == 0

    def test_export_to_dataframe(self):
        """Test the monthly DataFrame."""
        builder = ReportDataBuilder(EstimatorInputs())

        df = builder.export_to_dataframe()

        assert list(df.columns) == ["month", "current_total", "heat_pump_total", "savings"]
        assert len(df) == 12
        assert df["month"].iloc[0] == "Jan"
        assert df["current_total"].sum() == pytest.approx(builder.result.current_total_cost)

    def test_export_with_display_names(self):
        """Test human-readable column headers."""
        df = ReportDataBuilder(EstimatorInputs()).export_to_dataframe(display_names=True)

        assert list(df.columns) == ["Month", "Current System", "Heat Pump", "Savings"]

    def test_build_cost_table(self):
        """Test the end-use comparison table."""
        builder = ReportDataBuilder(EstimatorInputs(cooling_system=CoolingSystem.NO_COOLING))

        table = builder.build_cost_table()

        assert list(table.index) == ["Heating", "Cooling", "Total"]
        assert table.loc["Cooling", "Current System"] == 0
        assert table.loc["Total", "Annual Savings"] == pytest.approx(
            builder.result.annual_savings.total
        )

    def test_get_all_data(self):
        """Test the combined report payload."""
        data = ReportDataBuilder(EstimatorInputs()).get_all_data()

        assert data["inputs"]["heating_system"] == "Oil Furnace"
        assert len(data["monthly"]) == 12
        assert "summary" in data


class TestExcelGenerator:
    """Tests for ExcelGenerator."""

    def test_generate_formula_report(self, tmp_path):
        """Test sheets, values and charts of a generated report."""
        output = tmp_path / "report.xlsx"
        builder = ReportDataBuilder(EstimatorInputs())

        path = ExcelGenerator(output).generate(builder)

        assert path == output
        wb = load_workbook(path)
        assert wb.sheetnames == ["Summary", "Monthly Breakdown"]

        summary = wb["Summary"]
        assert summary["A1"].value == "Heat Pump Savings Estimate"
        labels = [summary.cell(row=r, column=1).value for r in range(1, summary.max_row + 1)]
        assert "Home Size (sq. ft.)" in labels
        assert "Total" in labels

        monthly = wb["Monthly Breakdown"]
        assert monthly["A1"].value == "Month"
        assert monthly["A2"].value == "Jan"
        assert monthly["A13"].value == "Dec"
        assert monthly["D2"].value == pytest.approx(builder.result.monthly_data[0].savings)
        assert len(monthly._charts) == 2

    def test_generate_manual_report(self, tmp_path):
        """Test that manual inputs are listed instead of home details."""
        builder = ReportDataBuilder(EstimatorInputs(
            use_manual_input=True,
            manual_heating_cost="1800",
            manual_cooling_cost="300",
        ))

        path = generate_excel_report(builder, tmp_path / "manual.xlsx")

        summary = load_workbook(path)["Summary"]
        labels = [summary.cell(row=r, column=1).value for r in range(1, summary.max_row + 1)]
        assert "Annual Heating Cost" in labels
        assert "Home Size (sq. ft.)" not in labels

    def test_non_finite_costs_written_as_text(self, tmp_path, caplog):
        """Test that a zero SEER estimate does not leave blank cost cells."""
        builder = ReportDataBuilder(EstimatorInputs(current_seer=0))

        with caplog.at_level(logging.WARNING):
            path = ExcelGenerator(tmp_path / "zero_seer.xlsx").generate(builder)

        monthly = load_workbook(path)["Monthly Breakdown"]
        assert monthly["B2"].value == "inf"
        assert monthly["D2"].value == "inf"
        assert monthly["C2"].value == pytest.approx(builder.result.monthly_data[0].heat_pump_total)
        assert "non-finite" in caplog.text

    def test_to_bytes(self):
        """Test rendering the report in memory."""
        data = ExcelGenerator().to_bytes(ReportDataBuilder(EstimatorInputs()))

        wb = load_workbook(BytesIO(data))
        assert "Monthly Breakdown" in wb.sheetnames

    def test_generate_requires_path(self):
        """Test that saving without an output path fails."""
        with pytest.raises(ValueError):
            ExcelGenerator().generate(ReportDataBuilder(EstimatorInputs()))
