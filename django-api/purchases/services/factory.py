"""Wires a TicketService from the collaborators named in settings."""

from django.conf import settings
from django.utils.module_loading import import_string

from purchases.services.ticket_service import TicketService


def build_ticket_service() -> TicketService:
    payment_gateway = import_string(settings.PURCHASES_PAYMENT_GATEWAY)()
    seat_reservation = import_string(settings.PURCHASES_SEAT_RESERVATION)()
    return TicketService(payment_gateway, seat_reservation)
