from purchases.services.calculator import PurchaseCalculator
from purchases.services.ticket_service import TicketService
from purchases.services.validator import Validator

__all__ = ["PurchaseCalculator", "TicketService", "Validator"]
