"""
Quick Sell module package exports.
"""

from .controller import QuickSellController
from .view import QuickSellView

__all__ = [
    "QuickSellController",
    "QuickSellView",
]
