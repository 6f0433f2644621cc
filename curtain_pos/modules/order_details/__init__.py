"""
Order Details module package exports.
"""

from .controller import OrderDetailsController
from .model import OrdersTableModel, filter_orders, sort_newest_first

__all__ = [
    "OrderDetailsController",
    "OrdersTableModel",
    "filter_orders",
    "sort_newest_first",
]
