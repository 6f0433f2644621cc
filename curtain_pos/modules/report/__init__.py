"""
Daily report module package exports.
"""

from .controller import ReportController
from .model import ReportSummary, report_bills

__all__ = [
    "ReportController",
    "ReportSummary",
    "report_bills",
]
