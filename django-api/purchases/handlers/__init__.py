from purchases.handlers.views import PurchaseView, metrics_view

__all__ = ["PurchaseView", "metrics_view"]
