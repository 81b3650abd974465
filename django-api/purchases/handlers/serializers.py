"""Serializers for parsing purchase requests into domain value objects."""

from rest_framework import serializers

from purchases.domain import TicketType, TicketTypeRequest


class TicketRequestSerializer(serializers.Serializer):
    """One purchase line: ``{"type": "ADULT", "count": 2}``."""

    type = serializers.ChoiceField(choices=[t.value for t in TicketType])
    count = serializers.IntegerField(min_value=1)


class PurchaseRequestSerializer(serializers.Serializer):
    """Purchase body.

    The account id is only checked for shape here; whether it is a valid
    account is a business rule enforced by the ticket service.
    """

    account_id = serializers.IntegerField(allow_null=True, default=None)
    tickets = TicketRequestSerializer(many=True, allow_empty=True)

    def ticket_requests(self) -> list[TicketTypeRequest]:
        return [
            TicketTypeRequest.from_string(line["type"], line["count"])
            for line in self.validated_data["tickets"]
        ]
