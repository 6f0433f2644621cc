from ...widgets.composer_panel import ComposerPanel
from .customer_form import CustomerForm


class OrderView(ComposerPanel):
    def __init__(self, parent=None):
        form = CustomerForm()
        super().__init__("New Order", parent, extra=form)
        self.customer_form = form
