"""Output generation modules."""

from .excel_generator import ExcelGenerator
from .report_data import ReportDataBuilder

__all__ = ["ExcelGenerator", "ReportDataBuilder"]
