APP_NAME = "Curtain POS"
CURRENCY = "LKR"

# ---- Line item categories (composer keys) and their wire itemType ----
CATEGORY_CURTAINS = "curtains"
CATEGORY_POLES = "poles"
CATEGORY_ACCESSORIES = "accessories"

# order matters: totals are summed curtains -> poles -> accessories
CATEGORIES: tuple[str, ...] = (CATEGORY_CURTAINS, CATEGORY_POLES, CATEGORY_ACCESSORIES)

ITEM_TYPE_BY_CATEGORY = {
    CATEGORY_CURTAINS: "Curtain",
    CATEGORY_POLES: "Poles",
    CATEGORY_ACCESSORIES: "Other Accessories",
}
CATEGORY_BY_ITEM_TYPE = {v: k for k, v in ITEM_TYPE_BY_CATEGORY.items()}
ITEM_TYPES: tuple[str, ...] = tuple(ITEM_TYPE_BY_CATEGORY[c] for c in CATEGORIES)

CATEGORY_TITLES = {
    CATEGORY_CURTAINS: "Curtains",
    CATEGORY_POLES: "Poles",
    CATEGORY_ACCESSORIES: "Accessories",
}

# ---- Orders / bills ----
PAYMENT_TYPE_CASH = "cash"
PAYMENT_TYPES = ("cash", "card", "bank-transfer")

ORDER_STATUS_PENDING = "pending"
ORDER_STATUS_CANCELLED = "cancelled"
# statuses a user can pick; cancelled is reached only through cancel
ORDER_STATUSES = ("pending", "in-progress", "completed")
ORDER_FILTER_STATUSES = ORDER_STATUSES + (ORDER_STATUS_CANCELLED,)
PAYMENT_STATUSES = ("pending", "partial", "paid")

# ---- Discount bounds (percent) ----
DISCOUNT_MIN = 0
DISCOUNT_MAX = 100

# stock below this count is shown as "low"
LOW_STOCK_THRESHOLD = 20
# stock above this count is shown as "plenty"
HIGH_STOCK_THRESHOLD = 50
