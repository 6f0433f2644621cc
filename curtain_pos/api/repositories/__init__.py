from .stock_repo import StockItem, StockRepo
from .orders_repo import OrdersRepo
from .bills_repo import BillsRepo
from .expenses_repo import ExpensesRepo
from .reports_repo import ReportsRepo

__all__ = [
    "StockItem",
    "StockRepo",
    "OrdersRepo",
    "BillsRepo",
    "ExpensesRepo",
    "ReportsRepo",
]
