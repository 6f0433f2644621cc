"""
Dashboard module package exports.
"""

from .controller import DashboardController
from .metrics import DashboardMetrics, bill_profit, daily_profit, daily_sell

__all__ = [
    "DashboardController",
    "DashboardMetrics",
    "bill_profit",
    "daily_profit",
    "daily_sell",
]
