"""
Order module package exports.
"""

from .controller import OrderController
from .view import OrderView

__all__ = [
    "OrderController",
    "OrderView",
]
