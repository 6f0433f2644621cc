from ...widgets.composer_panel import ComposerPanel


class QuickSellView(ComposerPanel):
    """Composer without customer details; only in-stock items are offered."""

    def __init__(self, parent=None):
        super().__init__("Quick Sell", parent)
        self.summary.txt_payment.setPlaceholderText("Cash received (must cover the total)")
