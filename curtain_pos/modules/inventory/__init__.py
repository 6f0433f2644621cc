"""
Inventory module package exports.
"""

from .controller import InventoryController
from .model import StockTableModel, quantity_band

__all__ = [
    "InventoryController",
    "StockTableModel",
    "quantity_band",
]
