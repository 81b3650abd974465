from purchases.gateways.interfaces import PaymentGateway, SeatReservation

__all__ = ["PaymentGateway", "SeatReservation"]
